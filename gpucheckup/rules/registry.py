"""Closed mapping from rule id to built-in check.

Catalog ids with no entry here are inert: they never produce a finding.
"""

from collections.abc import Callable
from typing import Optional

from ..models import FactSnapshot
from .base import Finding, Rule
from . import driver, gpu_presence, thermal, vram

Check = Callable[[Rule, FactSnapshot], Optional[Finding]]

CHECKS: dict[str, Check] = {
    "no-nvidia-gpu": gpu_presence.check_no_nvidia_gpu,
    "hybrid-gpu": gpu_presence.check_hybrid_gpu,
    "driver-not-detected": driver.check_driver_not_detected,
    "nvidia-smi-missing": driver.check_nvidia_smi_missing,
    "low-vram": vram.check_low_vram,
    "gpu-running-hot": thermal.check_gpu_running_hot,
    "thermal-throttling": thermal.check_thermal_throttling,
}

RULE_INFO: dict[str, str] = {
    "no-nvidia-gpu": "GPU list is empty",
    "hybrid-gpu": "at least one NVIDIA GPU and at least one non-NVIDIA GPU",
    "driver-not-detected": "driver version is empty",
    "nvidia-smi-missing": "GPU list is empty and driver version is empty",
    "low-vram": f"first NVIDIA GPU with 0 < VRAM < {vram.LOW_VRAM_MB} MB",
    "gpu-running-hot": f"first GPU with {thermal.HOT_TEMP_C} <= temp < {thermal.THROTTLE_TEMP_C} °C",
    "thermal-throttling": f"first GPU with temp >= {thermal.THROTTLE_TEMP_C} °C",
}
