"""Rule registry file layout."""

from __future__ import annotations

BUILTIN_RULES_FILENAME: str = "builtin_rules.yaml"

REQUIRED_RULE_ENTRY_KEYS: frozenset[str] = frozenset({"identifier"})

ALLOWED_RULE_ENTRY_KEYS: frozenset[str] = REQUIRED_RULE_ENTRY_KEYS | {
    "name",
    "description",
    "deprecated_aliases",
    "opt_in",
    "analyzer",
}
