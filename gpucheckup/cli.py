"""CLI entry point — collect facts, run rules, print the report."""

import logging
import time
from pathlib import Path
from typing import Optional

import click
import typer

from . import DISCLAIMER, __version__
from .engine import exit_code_for, run_rules, unimplemented_rule_ids
from .errors import LoadError
from .format import findings_to_json, format_markdown, format_report
from .models import MODES, ExecutionContext
from .redact import Redactor
from .rules.loader import load_rules
from .rules.registry import RULE_INFO
from .scanner import collect_facts

EXIT_USAGE = 3

app = typer.Typer(help="Local GPU / driver diagnostics.", no_args_is_help=True)


def _setup_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


def _fail(msg: str) -> None:
    """Print an error to stderr and exit with the usage/config exit code."""
    typer.echo(click.style(f"Error: {msg}", fg="red"), err=True)
    raise typer.Exit(EXIT_USAGE)


def _check_mode(mode: str) -> str:
    if mode not in MODES:
        _fail(f"Invalid mode: {mode}. Use: {', '.join(MODES)}")
    return mode


def _load(rules_path: Optional[Path]):
    try:
        return load_rules(rules_path)
    except LoadError as e:
        _fail(str(e))


@app.command("run")
def run_cmd(
    mode: str = typer.Option("full", "--mode", "-m", envvar="GPUCHECKUP_MODE", help=f"Diagnostic mode: {', '.join(MODES)}"),
    rules_path: Optional[Path] = typer.Option(None, "--rules", "-r", envvar="GPUCHECKUP_RULES", help="Rule catalog (YAML/JSON). Default: embedded knowledge pack"),
    json_out: bool = typer.Option(False, "--json", "-j", help="Output as JSON"),
    md_out: bool = typer.Option(False, "--md", help="Output as Markdown"),
    redact: bool = typer.Option(True, "--redact/--no-redact", help="Remove hostname, username, home dir and emails from output"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Debug logging and rule IDs in output"),
) -> None:
    """Run diagnostics and print a report. Exit 2 on CRIT, 1 on WARN."""
    _setup_logging(verbose)
    _check_mode(mode)
    if json_out and md_out:
        _fail("--json and --md are mutually exclusive")
    rules = _load(rules_path)
    context = ExecutionContext.current(mode)

    start = time.monotonic()
    quiet = json_out or md_out
    if not quiet:
        typer.echo("[1/3] Collecting system and GPU information...", err=True)
    facts = collect_facts()
    if not quiet:
        typer.echo("[2/3] Analyzing results...", err=True)
    findings = run_rules(facts, rules, context)
    if not quiet:
        typer.echo("[3/3] Generating report...", err=True)
    elapsed = time.monotonic() - start

    if json_out:
        text = findings_to_json(facts, findings, context)
    elif md_out:
        text = format_markdown(facts, findings, context)
    else:
        text = format_report(facts, findings, mode, elapsed, verbose=verbose)
    redactor = Redactor(redact, hostname=facts.system.hostname or None)
    typer.echo(redactor.redact(text))

    code = exit_code_for(findings)
    if code:
        raise typer.Exit(code)


@app.command("rules")
def rules_cmd(
    rules_path: Optional[Path] = typer.Option(None, "--rules", "-r", envvar="GPUCHECKUP_RULES", help="Rule catalog (YAML/JSON)"),
    mode: Optional[str] = typer.Option(None, "--mode", "-m", help="Only rules listed for this mode"),
) -> None:
    """List the rule catalog and flag ids without a built-in check."""
    if mode is not None:
        _check_mode(mode)
    rules = _load(rules_path)
    missing = set(unimplemented_rule_ids(rules))
    shown = 0
    shown_missing = 0
    for r in rules:
        if mode is not None and mode not in r.modes:
            continue
        shown += 1
        platform = r.platform or "all"
        line = f"  {r.id:<24} {r.severity:<5} {platform:<8} {','.join(sorted(r.modes))}"
        if r.id in missing:
            shown_missing += 1
            line += click.style("  (no built-in check)", dim=True)
        else:
            line += click.style(f"  when: {RULE_INFO[r.id]}", dim=True)
        typer.echo(line)
    typer.echo(f"\n{shown} rule(s), {shown_missing} without a built-in check.")


@app.command("version")
def version_cmd() -> None:
    """Show version information."""
    typer.echo(f"gpucheckup v{__version__}")
    typer.echo(DISCLAIMER)


def _main() -> None:
    app()


if __name__ == "__main__":
    _main()
