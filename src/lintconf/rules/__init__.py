"""Rule catalog and rule activation modes."""

from __future__ import annotations

from lintconf.rules.catalog import RuleCatalog, RuleDescription
from lintconf.rules.loader import load_rule_catalog
from lintconf.rules.mode import resolve_rules_mode

__all__ = [
    "RuleCatalog",
    "RuleDescription",
    "load_rule_catalog",
    "resolve_rules_mode",
]
