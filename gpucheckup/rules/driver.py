"""Driver rules: missing driver version, missing nvidia-smi."""

from ..models import FactSnapshot
from .base import Finding, Rule, make_finding


def check_driver_not_detected(rule: Rule, facts: FactSnapshot) -> Finding | None:
    if facts.driver.version:
        return None
    return make_finding(rule, "nvidia-smi did not return a driver version.")


def check_nvidia_smi_missing(rule: Rule, facts: FactSnapshot) -> Finding | None:
    """No GPUs and no driver: nvidia-smi is probably not installed."""
    if facts.gpus or facts.driver.version:
        return None
    return make_finding(rule, "nvidia-smi was not found or returned no data.")
