"""Fact snapshot for one run: system, GPUs, driver."""

import platform
from dataclasses import dataclass, field

MODES = ("gaming", "ai", "creator", "streaming", "full")


@dataclass(frozen=True)
class SystemInfo:
    """Host facts gathered once per run."""

    os_name: str = ""  # "linux", "windows", "macos"
    os_version: str = ""
    architecture: str = ""
    cpu_model: str = ""
    hostname: str = ""
    ram_total_mb: int = 0  # 0 = unknown


@dataclass(frozen=True)
class GPUInfo:
    """One enumerated GPU. Zero values mean "not reported"."""

    index: int
    name: str = ""
    vendor: str = ""
    driver_version: str = ""
    vram_total_mb: int = 0
    temperature_c: int = 0
    is_nvidia: bool = False


@dataclass(frozen=True)
class DriverInfo:
    """Driver facts. Empty string = not detected."""

    version: str = ""
    cuda_version: str = ""


@dataclass(frozen=True)
class FactSnapshot:
    """Everything the evaluator may look at."""

    system: SystemInfo = field(default_factory=SystemInfo)
    gpus: tuple[GPUInfo, ...] = ()
    driver: DriverInfo = field(default_factory=DriverInfo)

    @property
    def nvidia_gpus(self) -> tuple[GPUInfo, ...]:
        return tuple(g for g in self.gpus if g.is_nvidia)

    @property
    def has_nvidia(self) -> bool:
        return any(g.is_nvidia for g in self.gpus)


def current_platform() -> str:
    """Canonical platform id: "linux", "windows", "macos", or the lowercased OS name."""
    system = platform.system().lower()
    if system == "darwin":
        return "macos"
    if system == "windows":
        return "windows"
    return system or "unknown"


@dataclass(frozen=True)
class ExecutionContext:
    """Mode and platform for one run, built once and passed down."""

    mode: str
    platform: str

    @classmethod
    def current(cls, mode: str = "full") -> "ExecutionContext":
        return cls(mode=mode, platform=current_platform())
