"""Validated config data model."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any

from lintconf.constants.config import DEFAULT_REPORTER
from lintconf.rules.catalog import RuleCatalog
from lintconf.types.common import JsonObject
from lintconf.types.config import AllEnabled, DefaultMode, IndentationStyle, RulesMode, Whitelisted


@dataclass(frozen=True)
class LintConfig:
    """Resolved lint config, built once per raw config and never patched."""

    rules_mode: RulesMode = DefaultMode()
    included_paths: tuple[str, ...] = ()
    excluded_paths: tuple[str, ...] = ()
    indentation: IndentationStyle = IndentationStyle()
    warning_threshold: int | None = None
    reporter: str = DEFAULT_REPORTER
    cache_path: str | None = None
    pinned_version: str | None = None
    analyzer_rules: tuple[str, ...] = ()
    rule_configurations: Mapping[str, Any] = field(default_factory=lambda: MappingProxyType({}), hash=False)

    def __post_init__(self) -> None:
        if not isinstance(self.rule_configurations, MappingProxyType):
            object.__setattr__(self, "rule_configurations", MappingProxyType(dict(self.rule_configurations)))

    def configuration_for(self, rule_name: str, catalog: RuleCatalog) -> Any | None:
        """Return the config block for a rule, looked up by identifier or alias."""
        identifier = catalog.identifier_for(rule_name)
        if identifier is None:
            return None
        return self.rule_configurations.get(identifier)

    def to_dict(self) -> JsonObject:
        """Serialize for JSON output."""
        return {
            "rules_mode": rules_mode_to_dict(self.rules_mode),
            "included": list(self.included_paths),
            "excluded": list(self.excluded_paths),
            "indentation": self.indentation.describe(),
            "warning_threshold": self.warning_threshold,
            "reporter": self.reporter,
            "cache_path": self.cache_path,
            "pinned_version": self.pinned_version,
            "analyzer_rules": list(self.analyzer_rules),
            "configured_rules": sorted(self.rule_configurations),
        }


def rules_mode_to_dict(mode: RulesMode) -> JsonObject:
    """Describe a rules mode with sorted rule lists."""
    if isinstance(mode, AllEnabled):
        return {"kind": "all_enabled"}
    if isinstance(mode, Whitelisted):
        return {"kind": "whitelisted", "rules": sorted(mode.rules)}
    return {"kind": "default", "disabled": sorted(mode.disabled), "opt_in": sorted(mode.opt_in)}
