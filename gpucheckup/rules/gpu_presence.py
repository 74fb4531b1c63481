"""GPU presence rules: no NVIDIA GPU, hybrid graphics."""

from ..models import FactSnapshot
from .base import Finding, Rule, make_finding


def check_no_nvidia_gpu(rule: Rule, facts: FactSnapshot) -> Finding | None:
    """Fires only when the GPU set is empty."""
    if facts.has_nvidia or facts.gpus:
        return None
    return make_finding(rule, "No NVIDIA GPU detected in system.")


def check_hybrid_gpu(rule: Rule, facts: FactSnapshot) -> Finding | None:
    """NVIDIA plus at least one non-NVIDIA adapter (laptop iGPU + dGPU)."""
    nvidia_count = len(facts.nvidia_gpus)
    if nvidia_count == 0 or nvidia_count >= len(facts.gpus):
        return None
    return make_finding(rule, "Both NVIDIA and integrated graphics detected.")
