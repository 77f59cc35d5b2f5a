"""Tests for warnings about rule config that the rules mode ignores."""

from __future__ import annotations

from typing import Any

from lintconf.config import warn_ineffective_rule_config
from lintconf.constants.validation import CFG004, CFG005, CFG006
from lintconf.exceptions.validation import ValidationWarning
from lintconf.rules import RuleCatalog
from lintconf.types import AllEnabled, DefaultMode, RulesMode, Whitelisted


def _run(raw: dict[str, Any], catalog: RuleCatalog, mode: RulesMode) -> list[ValidationWarning]:
    warnings: list[ValidationWarning] = []
    warn_ineffective_rule_config(raw, catalog, mode, warnings)
    return warnings


def test_all_enabled_never_warns(catalog: RuleCatalog) -> None:
    raw = {"line_length": 1, "empty_count": {}, "unused_import": {}, "bogus": 1}

    assert _run(raw, catalog, AllEnabled()) == []


def test_whitelist_warns_for_rules_not_listed(catalog: RuleCatalog) -> None:
    raw = {"line_length": 100, "type_name": {}}

    warnings = _run(raw, catalog, Whitelisted(rules=frozenset({"line_length"})))

    assert [(w.code, w.field) for w in warnings] == [(CFG004, "type_name")]
    assert warnings[0].message == "Found a configuration for 'type_name' rule, but it is not present on 'whitelist_rules'."


def test_whitelist_matches_rule_through_alias(catalog: RuleCatalog) -> None:
    warnings = _run({"identifier_name": {}}, catalog, Whitelisted(rules=frozenset({"variable_name"})))

    assert warnings == []


def test_disabled_rule_warns(catalog: RuleCatalog) -> None:
    warnings = _run({"line_length": 80}, catalog, DefaultMode(disabled=frozenset({"line_length"})))

    assert [w.code for w in warnings] == [CFG006]
    assert warnings[0].message == "Found a configuration for 'line_length' rule, but it is disabled on 'disabled_rules'."


def test_disabled_requires_every_rule_name(catalog: RuleCatalog) -> None:
    partial = DefaultMode(disabled=frozenset({"identifier_name"}))
    full = DefaultMode(disabled=frozenset({"identifier_name", "variable_name"}))

    assert _run({"identifier_name": {}}, catalog, partial) == []
    assert [w.code for w in _run({"identifier_name": {}}, catalog, full)] == [CFG006]


def test_opt_in_rule_not_enabled_warns(catalog: RuleCatalog) -> None:
    warnings = _run({"empty_count": {"severity": "error"}}, catalog, DefaultMode())

    assert [w.code for w in warnings] == [CFG005]
    assert warnings[0].message == "Found a configuration for 'empty_count' rule, but it is not enabled on 'opt_in_rules'."


def test_opt_in_rule_enabled_through_alias(catalog: RuleCatalog) -> None:
    warnings = _run({"sorted_imports": {}}, catalog, DefaultMode(opt_in=frozenset({"import_order"})))

    assert warnings == []


def test_analyzer_rule_behaves_as_opt_in(catalog: RuleCatalog) -> None:
    assert [w.code for w in _run({"unused_import": {}}, catalog, DefaultMode())] == [CFG005]
    assert _run({"unused_import": {}}, catalog, DefaultMode(opt_in=frozenset({"unused_import"}))) == []


def test_opt_in_check_takes_precedence_over_disabled(catalog: RuleCatalog) -> None:
    mode = DefaultMode(disabled=frozenset({"empty_count"}))

    warnings = _run({"empty_count": {}}, catalog, mode)

    assert [w.code for w in warnings] == [CFG005]


def test_global_and_unknown_keys_are_skipped(catalog: RuleCatalog) -> None:
    raw = {"disabled_rules": ["line_length"], "reporter": "json", "made_up": {}}

    assert _run(raw, catalog, DefaultMode(disabled=frozenset({"line_length"}))) == []


def test_warning_names_canonical_identifier_for_alias_key(catalog: RuleCatalog) -> None:
    warnings = _run({"import_order": {}}, catalog, DefaultMode())

    assert warnings[0].field == "import_order"
    assert "'sorted_imports' rule" in warnings[0].message


def test_warnings_follow_raw_key_order(catalog: RuleCatalog) -> None:
    raw = {"type_name": {}, "line_length": {}}
    mode = Whitelisted(rules=frozenset({"empty_count"}))

    assert [w.field for w in _run(raw, catalog, mode)] == ["type_name", "line_length"]
