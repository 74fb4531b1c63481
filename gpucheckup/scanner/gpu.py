"""GPU and driver collector via nvidia-smi."""

import logging
import re

from ..models import DriverInfo, FactSnapshot, GPUInfo
from .host import collect_system_info, run_command

log = logging.getLogger(__name__)

QUERY_FIELDS = "index,name,driver_version,memory.total,temperature.gpu"

_CUDA_RE = re.compile(r"CUDA Version:\s*([\d.]+)")


def _to_int(value: str) -> int:
    """Parse a numeric field; "[N/A]" and garbage mean unknown (0)."""
    try:
        return int(float(value.strip()))
    except (ValueError, OverflowError):
        return 0


def parse_gpu_csv(text: str) -> tuple[tuple[GPUInfo, ...], str]:
    """Parse --format=csv,noheader,nounits output. Returns (gpus, driver_version)."""
    gpus = []
    driver_version = ""
    for position, line in enumerate(l for l in text.splitlines() if l.strip()):
        fields = [f.strip() for f in line.split(", ")]
        if len(fields) < 5:
            log.debug("Skipping short nvidia-smi line: %r", line)
            continue
        index_raw, name, drv, vram, temp = fields[:5]
        index = int(index_raw) if index_raw.isdigit() else position
        if not driver_version:
            driver_version = drv
        gpus.append(GPUInfo(
            index=index,
            name=name,
            vendor="NVIDIA",
            driver_version=drv,
            vram_total_mb=_to_int(vram),
            temperature_c=_to_int(temp),
            is_nvidia=True,
        ))
    return tuple(gpus), driver_version


def parse_cuda_version(text: str) -> str:
    """Pull "12.2" out of the nvidia-smi banner, or ""."""
    m = _CUDA_RE.search(text or "")
    return m.group(1).rstrip(".") if m else ""


def collect_gpu_info() -> tuple[tuple[GPUInfo, ...], DriverInfo]:
    """Query nvidia-smi. Missing tool or bad output -> no GPUs, empty driver."""
    output = run_command(
        "nvidia-smi",
        [f"--query-gpu={QUERY_FIELDS}", "--format=csv,noheader,nounits"],
    )
    if not output:
        return (), DriverInfo()
    gpus, driver_version = parse_gpu_csv(output)
    cuda_version = parse_cuda_version(run_command("nvidia-smi", []) or "")
    return gpus, DriverInfo(version=driver_version, cuda_version=cuda_version)


def collect_facts() -> FactSnapshot:
    """Gather the full fact snapshot for one run."""
    system = collect_system_info()
    gpus, driver = collect_gpu_info()
    return FactSnapshot(system=system, gpus=gpus, driver=driver)
