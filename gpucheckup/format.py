"""Text, Markdown and JSON report output."""

import json
from typing import List

import click

from . import DISCLAIMER, __version__
from .models import ExecutionContext, FactSnapshot
from .rules.base import Finding, Severity

WIDTH = 72

_SEVERITY_COLOR = {
    Severity.CRIT.value: "red",
    Severity.WARN.value: "yellow",
    Severity.INFO.value: "cyan",
}


def _rule() -> str:
    return "─" * WIDTH


def _or_na(value: str) -> str:
    return value if value else "N/A"


def _severity_tag(severity: str) -> str:
    return click.style(f"[{severity}]", fg=_SEVERITY_COLOR.get(severity), bold=True)


def _totals(findings: List[Finding]) -> str:
    counts = {s.value: 0 for s in Severity}
    for f in findings:
        if f.severity in counts:
            counts[f.severity] += 1
    return (
        f"  Total: {counts['CRIT']} CRITICAL, {counts['WARN']} WARNING, "
        f"{counts['INFO']} INFO"
    )


def _system_lines(facts: FactSnapshot) -> List[str]:
    s = facts.system
    lines = [
        "",
        "== SYSTEM INFO ==",
        "",
        f"  OS:           {s.os_name} {s.os_version}".rstrip(),
        f"  Architecture: {s.architecture}",
        f"  CPU:          {s.cpu_model}",
    ]
    if s.ram_total_mb > 0:
        lines.append(f"  RAM:          {s.ram_total_mb} MB")
    return lines


def _gpu_lines(facts: FactSnapshot) -> List[str]:
    lines = ["", "== GPU INVENTORY ==", ""]
    if not facts.gpus:
        lines.append("  No GPUs detected.")
    for gpu in facts.gpus:
        lines.append(f"  [GPU {gpu.index}] {gpu.name}")
        lines.append(f"    Driver:  {_or_na(gpu.driver_version)}")
        if gpu.vram_total_mb > 0:
            lines.append(f"    VRAM:    {gpu.vram_total_mb} MB")
        if gpu.temperature_c > 0:
            lines.append(f"    Temp:    {gpu.temperature_c}°C")
        lines.append("")
    lines.append(f"  NVIDIA Driver: {_or_na(facts.driver.version)}")
    lines.append(f"  CUDA (driver): {_or_na(facts.driver.cuda_version)}")
    return lines


def _finding_lines(findings: List[Finding], verbose: bool) -> List[str]:
    lines = ["", "== FINDINGS ==", ""]
    if not findings:
        lines.append("  No issues detected.")
        return lines
    lines.append(_totals(findings))
    lines.append("")
    for i, f in enumerate(findings, 1):
        title = f"{f.title} [{f.rule_id}]" if verbose and f.rule_id else f.title
        lines.append(f"  {_severity_tag(f.severity)} #{i}: {title} (confidence: {f.confidence}%)")
        lines.append(f"    Evidence:     {f.evidence}")
        lines.append(f"    Why:          {f.why_it_matters}")
        if f.next_steps:
            lines.append("    Next steps:")
            for step in f.next_steps:
                lines.append(f"      - {step}")
        lines.append("")
    return lines


def format_report(
    facts: FactSnapshot,
    findings: List[Finding],
    mode: str,
    runtime_secs: float,
    verbose: bool = False,
) -> str:
    """Build the human-readable report as a single string."""
    lines = [
        _rule(),
        f"  gpucheckup v{__version__} — GPU Diagnostic Report",
        f"  {DISCLAIMER}",
        _rule(),
        f"  Mode:      {mode}",
        f"  Platform:  {facts.system.os_name or 'unknown'}",
        f"  Runtime:   {runtime_secs:.1f}s",
        _rule(),
    ]
    lines += _system_lines(facts)
    lines.append(_rule())
    lines += _gpu_lines(facts)
    lines.append(_rule())
    lines += _finding_lines(findings, verbose)
    lines.append(_rule())
    lines += [
        "",
        "== PRIVACY & DATA ==",
        "",
        "  This report was generated locally. No data was sent anywhere.",
        "  gpucheckup does not modify your system, drivers, or settings.",
        "",
        _rule(),
    ]
    return "\n".join(lines)


def findings_to_json(
    facts: FactSnapshot,
    findings: List[Finding],
    context: ExecutionContext,
) -> str:
    """JSON output for piping/CI."""
    from dataclasses import asdict

    output = {
        "version": __version__,
        "mode": context.mode,
        "platform": context.platform,
        "system": asdict(facts.system),
        "gpus": [asdict(g) for g in facts.gpus],
        "driver": asdict(facts.driver),
        "findings": [f.to_dict() for f in findings],
    }
    return json.dumps(output, indent=2, ensure_ascii=False)


def _truncate(text: str, max_len: int = 80) -> str:
    return text if len(text) <= max_len else text[: max_len - 3] + "..."


def _md_cell(text: str) -> str:
    return text.replace("|", "\\|")


def format_markdown(
    facts: FactSnapshot,
    findings: List[Finding],
    context: ExecutionContext,
) -> str:
    """Markdown report for forum posts and issue trackers."""
    s = facts.system
    lines = [
        "# gpucheckup Diagnostic Report",
        "",
        f"> {DISCLAIMER}",
        "",
        f"**Version:** {__version__} | **Mode:** {context.mode} | **Platform:** {context.platform}",
        "",
        "## System",
        "",
        "| Property | Value |",
        "|----------|-------|",
        f"| OS | {s.os_name} {s.os_version} |",
        f"| Architecture | {s.architecture} |",
        f"| CPU | {_md_cell(s.cpu_model)} |",
    ]
    if s.ram_total_mb > 0:
        lines.append(f"| RAM | {s.ram_total_mb} MB |")
    lines += ["", "## GPUs", ""]
    if not facts.gpus:
        lines += ["No GPUs detected.", ""]
    for gpu in facts.gpus:
        lines += [
            f"### GPU {gpu.index}: {gpu.name}",
            "",
            "| Property | Value |",
            "|----------|-------|",
            f"| Vendor | {gpu.vendor or 'N/A'} |",
            f"| Driver | {_or_na(gpu.driver_version)} |",
        ]
        if gpu.vram_total_mb > 0:
            lines.append(f"| VRAM | {gpu.vram_total_mb} MB |")
        if gpu.temperature_c > 0:
            lines.append(f"| Temperature | {gpu.temperature_c}°C |")
        lines.append("")
    lines += [
        f"**NVIDIA Driver:** {_or_na(facts.driver.version)} | **CUDA:** {_or_na(facts.driver.cuda_version)}",
        "",
        "## Findings",
        "",
    ]
    if not findings:
        lines += ["No issues detected.", ""]
    else:
        lines += [
            "| Severity | Finding | Evidence | Next Step |",
            "|----------|---------|----------|-----------|",
        ]
        for f in findings:
            next_step = f.next_steps[0] if f.next_steps else "—"
            lines.append(
                f"| **{f.severity}** | {_md_cell(f.title)} | {_md_cell(_truncate(f.evidence))} "
                f"| {_md_cell(_truncate(next_step))} |"
            )
        lines += ["", "### Details", ""]
        for i, f in enumerate(findings, 1):
            lines += [
                "<details>",
                f"<summary><b>[{f.severity}] #{i}: {f.title}</b></summary>",
                "",
                f"**Evidence:** {f.evidence}",
                "",
                f"**Why it matters:** {f.why_it_matters}",
                "",
                f"**Confidence:** {f.confidence}%",
                "",
            ]
            if f.next_steps:
                lines.append("**Next steps:**")
                lines += [f"- {step}" for step in f.next_steps]
                lines.append("")
            lines += ["</details>", ""]
    lines += [
        "---",
        "",
        f"*This report was generated locally. No data was transmitted. {DISCLAIMER}*",
    ]
    return "\n".join(lines)
