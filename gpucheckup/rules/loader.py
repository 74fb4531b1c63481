"""Load the rule catalog from the embedded knowledge pack or a YAML/JSON file.

Loading is all-or-nothing: one malformed entry fails the whole catalog.
"""

import logging
from collections.abc import Mapping
from importlib import resources
from pathlib import Path
from typing import Any

import yaml

from ..errors import LoadError
from .base import Rule

log = logging.getLogger(__name__)

EMBEDDED_PACK = "knowledge.yaml"

_REQUIRED_STR = ("id", "title", "category", "severity", "description")


def _read_embedded() -> str:
    return resources.files(__package__).joinpath(EMBEDDED_PACK).read_text(encoding="utf-8")


def _read_source(source: Any) -> Any:
    """Turn a path / None / parsed data into parsed data."""
    if source is None:
        log.debug("Loading embedded rule catalog %s", EMBEDDED_PACK)
        text = _read_embedded()
    elif isinstance(source, (str, Path)):
        path = Path(source)
        log.debug("Loading rule catalog from %s", path)
        if not path.is_file():
            raise LoadError(f"Rule catalog not found: {path}")
        try:
            text = path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            raise LoadError(f"Cannot read rule catalog {path}: {e}") from e
    else:
        return source
    # JSON is valid YAML, so one parser covers both file types
    try:
        return yaml.safe_load(text)
    except yaml.YAMLError as e:
        raise LoadError(f"Rule catalog is not valid YAML/JSON: {e}") from e


def _rule_entries(data: Any) -> list:
    if isinstance(data, Mapping):
        if "rules" not in data:
            raise LoadError("Rule catalog has no 'rules' key")
        data = data["rules"]
    if not isinstance(data, list):
        raise LoadError(f"Rule catalog 'rules' must be a list, got {type(data).__name__}")
    return data


def _parse_rule(i: int, entry: Any) -> Rule:
    if not isinstance(entry, Mapping):
        raise LoadError(f"Rule #{i}: expected a mapping, got {type(entry).__name__}")
    where = f"Rule #{i} ({entry.get('id', '?')})"

    for key in _REQUIRED_STR:
        if key not in entry:
            raise LoadError(f"{where}: missing required field '{key}'")
        if not isinstance(entry[key], str):
            raise LoadError(f"{where}: field '{key}' must be a string")
    if not entry["id"].strip():
        raise LoadError(f"{where}: field 'id' must not be empty")

    if "modes" not in entry:
        raise LoadError(f"{where}: missing required field 'modes'")
    modes = entry["modes"]
    if not isinstance(modes, list) or not all(isinstance(m, str) for m in modes):
        raise LoadError(f"{where}: field 'modes' must be a list of strings")

    confidence = entry.get("base_confidence", 0)
    if isinstance(confidence, bool) or not isinstance(confidence, int):
        raise LoadError(f"{where}: field 'base_confidence' must be an integer")
    if not 0 <= confidence <= 100:
        raise LoadError(f"{where}: field 'base_confidence' must be between 0 and 100")

    platform = entry.get("platform")
    if platform is not None and not isinstance(platform, str):
        raise LoadError(f"{where}: field 'platform' must be a string")

    return Rule(
        id=entry["id"],
        title=entry["title"],
        category=entry["category"],
        severity=entry["severity"],
        modes=frozenset(modes),
        description=entry["description"],
        base_confidence=confidence,
        platform=platform,
    )


def load_rules(source: Any = None) -> tuple[Rule, ...]:
    """Load and validate a rule catalog.

    source: None for the embedded knowledge pack, a path to a YAML/JSON file,
    or already-parsed data (a {"rules": [...]} mapping or a bare list).
    Raises LoadError on any problem; never returns a partial catalog.
    """
    entries = _rule_entries(_read_source(source))
    rules: list[Rule] = []
    seen: set[str] = set()
    for i, entry in enumerate(entries):
        rule = _parse_rule(i, entry)
        if rule.id in seen:
            raise LoadError(f"Rule #{i}: duplicate rule id '{rule.id}'")
        seen.add(rule.id)
        rules.append(rule)
    log.debug("Loaded %d rules", len(rules))
    return tuple(rules)
