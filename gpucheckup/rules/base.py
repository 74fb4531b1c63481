"""Base types for rules and findings."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional


class Severity(str, Enum):
    CRIT = "CRIT"
    WARN = "WARN"
    INFO = "INFO"


_SEVERITY_ORDER = {Severity.CRIT.value: 0, Severity.WARN.value: 1, Severity.INFO.value: 2}


def severity_rank(severity) -> int:
    """Sort key: CRIT < WARN < INFO < anything else."""
    if isinstance(severity, Severity):
        severity = severity.value
    return _SEVERITY_ORDER.get(severity, len(_SEVERITY_ORDER))


@dataclass(frozen=True)
class Rule:
    """Declarative rule metadata from the knowledge pack."""

    id: str
    title: str
    category: str
    severity: str  # CRIT | WARN | INFO; other values load fine and sort last
    modes: frozenset[str]
    description: str
    base_confidence: int = 0  # 0-100
    platform: Optional[str] = None  # None = all platforms


@dataclass(frozen=True)
class Finding:
    """Output of a single rule that fired."""

    severity: str
    title: str
    evidence: str  # Rule-specific, built from facts
    why_it_matters: str
    next_steps: tuple[str, ...] = field(default_factory=tuple)
    confidence: int = 0
    category: str = ""
    rule_id: str = ""

    def to_dict(self) -> dict:
        return {
            "rule_id": self.rule_id,
            "severity": self.severity,
            "title": self.title,
            "evidence": self.evidence,
            "why_it_matters": self.why_it_matters,
            "next_steps": list(self.next_steps),
            "confidence": self.confidence,
            "category": self.category,
        }


def make_finding(rule: Rule, evidence: str) -> Finding:
    """Build a Finding from a fired rule. Remediation steps are not wired in yet."""
    return Finding(
        severity=rule.severity,
        title=rule.title,
        evidence=evidence,
        why_it_matters=rule.description,
        next_steps=(),
        confidence=rule.base_confidence,
        category=rule.category,
        rule_id=rule.id,
    )
