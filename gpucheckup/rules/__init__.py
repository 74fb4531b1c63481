"""Rule catalog, built-in checks and the id -> check registry."""

from .base import Finding, Rule, Severity, make_finding, severity_rank
from .loader import load_rules

__all__ = ["Finding", "Rule", "Severity", "load_rules", "make_finding", "severity_rank"]
