"""Builders for facts and rules used across tests."""

from gpucheckup.models import DriverInfo, FactSnapshot, GPUInfo, SystemInfo
from gpucheckup.rules.base import Rule

ALL_MODES = ("gaming", "ai", "creator", "streaming", "full")


def make_rule(id: str, **kwargs) -> Rule:
    defaults = {
        "title": f"Title {id}",
        "category": "hardware",
        "severity": "WARN",
        "modes": frozenset(ALL_MODES),
        "description": f"Why {id} matters.",
        "base_confidence": 80,
        "platform": None,
    }
    return Rule(id=id, **{**defaults, **kwargs})


def make_gpu(index: int = 0, **kwargs) -> GPUInfo:
    defaults = {
        "name": "NVIDIA GeForce RTX 3060",
        "vendor": "NVIDIA",
        "driver_version": "535.104.05",
        "vram_total_mb": 12288,
        "temperature_c": 45,
        "is_nvidia": True,
    }
    return GPUInfo(index=index, **{**defaults, **kwargs})


def make_facts(gpus=(), driver_version: str = "", cuda_version: str = "") -> FactSnapshot:
    return FactSnapshot(
        system=SystemInfo(os_name="linux", os_version="6.5.0", architecture="x86_64", cpu_model="Test CPU", hostname="box", ram_total_mb=32768),
        gpus=tuple(gpus),
        driver=DriverInfo(version=driver_version, cuda_version=cuda_version),
    )
