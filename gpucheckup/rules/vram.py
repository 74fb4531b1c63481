"""VRAM rule: NVIDIA GPU with less than 4 GB."""

from ..models import FactSnapshot
from .base import Finding, Rule, make_finding

LOW_VRAM_MB = 4096


def check_low_vram(rule: Rule, facts: FactSnapshot) -> Finding | None:
    """First NVIDIA GPU under the threshold. 0 MB means unknown and never fires."""
    for gpu in facts.nvidia_gpus:
        if 0 < gpu.vram_total_mb < LOW_VRAM_MB:
            return make_finding(
                rule,
                f"GPU {gpu.name} has {gpu.vram_total_mb} MB VRAM (< 4 GB).",
            )
    return None
