"""Thermal rules. The two bands do not overlap: hot is [75, 85), throttling is >= 85."""

from ..models import FactSnapshot
from .base import Finding, Rule, make_finding

HOT_TEMP_C = 75
THROTTLE_TEMP_C = 85


def check_gpu_running_hot(rule: Rule, facts: FactSnapshot) -> Finding | None:
    for gpu in facts.gpus:
        if HOT_TEMP_C <= gpu.temperature_c < THROTTLE_TEMP_C:
            return make_finding(rule, f"GPU temperature is {gpu.temperature_c}°C.")
    return None


def check_thermal_throttling(rule: Rule, facts: FactSnapshot) -> Finding | None:
    for gpu in facts.gpus:
        if gpu.temperature_c >= THROTTLE_TEMP_C:
            return make_finding(
                rule,
                f"GPU temperature is {gpu.temperature_c}°C — exceeds safe limit.",
            )
    return None
