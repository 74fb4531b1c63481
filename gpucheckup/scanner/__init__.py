"""Fact collectors — shell out to OS / vendor tools, never raise."""

from .gpu import collect_facts, collect_gpu_info
from .host import collect_system_info

__all__ = ["collect_facts", "collect_gpu_info", "collect_system_info"]
