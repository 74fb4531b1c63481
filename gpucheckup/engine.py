"""Rule engine — filter by mode/platform, dispatch by id, sort by severity."""

import logging
from collections.abc import Iterable, Sequence

from .models import ExecutionContext, FactSnapshot
from .rules.base import Finding, Rule, Severity, severity_rank
from .rules.registry import CHECKS

log = logging.getLogger(__name__)


def is_applicable(rule: Rule, context: ExecutionContext) -> bool:
    """Mode must be listed exactly; platform must match when the rule sets one."""
    if context.mode not in rule.modes:
        return False
    if rule.platform is not None and rule.platform != context.platform:
        return False
    return True


def evaluate_rule(rule: Rule, facts: FactSnapshot) -> Finding | None:
    """Run the built-in check for rule.id. Unknown ids produce nothing."""
    check = CHECKS.get(rule.id)
    if check is None:
        return None
    return check(rule, facts)


def run_rules(
    facts: FactSnapshot,
    rules: Sequence[Rule],
    context: ExecutionContext,
) -> list[Finding]:
    """Evaluate every applicable rule; return findings CRIT first.

    The sort is stable, so findings of equal severity keep catalog order.
    """
    findings: list[Finding] = []
    for rule in rules:
        if not is_applicable(rule, context):
            continue
        if rule.id not in CHECKS:
            log.debug("Rule %r has no built-in check; skipped", rule.id)
            continue
        finding = evaluate_rule(rule, facts)
        if finding is not None:
            findings.append(finding)
    return sorted(findings, key=lambda f: severity_rank(f.severity))


def unimplemented_rule_ids(rules: Iterable[Rule]) -> list[str]:
    """Catalog ids the engine cannot evaluate (catalog ahead of code)."""
    return [r.id for r in rules if r.id not in CHECKS]


def exit_code_for(findings: Iterable[Finding]) -> int:
    """2 if any CRIT, 1 if any WARN, else 0."""
    severities = {f.severity for f in findings}
    if Severity.CRIT.value in severities:
        return 2
    if Severity.WARN.value in severities:
        return 1
    return 0
