"""Loader for YAML rule registries.

Reads a ``rules:`` list of rule entries, validates each entry at load time
and builds an immutable :class:`RuleCatalog`. Raises ConfigError on any
violation (fail-fast).
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import yaml

from lintconf.constants.rules import (
    ALLOWED_RULE_ENTRY_KEYS,
    BUILTIN_RULES_FILENAME,
    REQUIRED_RULE_ENTRY_KEYS,
)
from lintconf.exceptions import ConfigError
from lintconf.rules.catalog import RuleCatalog, RuleDescription

logger = logging.getLogger(__name__)

BUILTIN_RULES_PATH: Path = Path(__file__).parent / BUILTIN_RULES_FILENAME


def load_rule_catalog(path: Path | None = None) -> RuleCatalog:
    """Load a rule registry file, defaulting to the bundled rule set."""
    registry_path = path or BUILTIN_RULES_PATH
    try:
        raw = yaml.safe_load(registry_path.read_text(encoding="utf-8"))
    except OSError as exc:
        raise ConfigError(f"Cannot read rule registry {registry_path}: {exc}") from exc
    except yaml.YAMLError as exc:
        raise ConfigError(f"Invalid YAML in rule registry {registry_path}: {exc}") from exc

    source_path = str(registry_path)
    if not isinstance(raw, dict) or not isinstance(raw.get("rules"), list):
        raise ConfigError(f"Rule registry {source_path} must be a mapping with a 'rules' list")

    descriptions = [_build_description(entry, source_path) for entry in raw["rules"]]
    catalog = RuleCatalog.from_descriptions(descriptions)
    logger.debug("Loaded %d rule(s) from %s", len(catalog), source_path)
    return catalog


def _build_description(entry: Any, source_path: str) -> RuleDescription:
    """Validate one registry entry and convert it to a RuleDescription."""
    if not isinstance(entry, dict):
        raise ConfigError(f"{source_path}: rule entry must be a mapping, got {type(entry).__name__}")

    unknown = set(entry.keys()) - ALLOWED_RULE_ENTRY_KEYS
    if unknown:
        raise ConfigError(f"{source_path}: unknown rule entry keys: {sorted(unknown)}")

    for key in sorted(REQUIRED_RULE_ENTRY_KEYS):
        if key not in entry:
            raise ConfigError(f"{source_path}: rule entry missing required key '{key}'")

    identifier = entry["identifier"]
    _validate_rule_name(identifier, source_path, "identifier")

    aliases = entry.get("deprecated_aliases") or []
    if not isinstance(aliases, list):
        raise ConfigError(f"{source_path}: '{identifier}'.deprecated_aliases must be a list")
    for alias in aliases:
        _validate_rule_name(alias, source_path, f"'{identifier}'.deprecated_aliases")

    for flag in ("opt_in", "analyzer"):
        if flag in entry and not isinstance(entry[flag], bool):
            raise ConfigError(f"{source_path}: '{identifier}'.{flag} must be a boolean")

    for text_key in ("name", "description"):
        if text_key in entry and not isinstance(entry[text_key], str):
            raise ConfigError(f"{source_path}: '{identifier}'.{text_key} must be a string")

    return RuleDescription(
        identifier=identifier,
        deprecated_aliases=tuple(aliases),
        opt_in=entry.get("opt_in", False),
        analyzer=entry.get("analyzer", False),
        name=entry.get("name", ""),
        description=entry.get("description", ""),
    )


def _validate_rule_name(value: Any, source_path: str, label: str) -> None:
    if not isinstance(value, str) or not value.strip():
        raise ConfigError(f"{source_path}: {label} must be a non-empty string")
