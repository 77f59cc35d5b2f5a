"""Tests for unknown top-level key detection."""

from __future__ import annotations

from lintconf.config import detect_unknown_keys, valid_keys, warn_unknown_keys
from lintconf.constants.config import GLOBAL_CONFIG_KEYS
from lintconf.constants.validation import CFG001
from lintconf.exceptions.validation import ValidationWarning
from lintconf.rules import RuleCatalog


def test_valid_keys_union_globals_and_rule_names(catalog: RuleCatalog) -> None:
    keys = valid_keys(catalog)

    assert GLOBAL_CONFIG_KEYS <= keys
    assert catalog.all_valid_identifiers <= keys


def test_detect_unknown_keys_sorted(catalog: RuleCatalog) -> None:
    raw = {"zeta": 1, "line_length": 120, "alpha": True, "excluded": ["Pods"]}

    assert detect_unknown_keys(raw, catalog) == ("alpha", "zeta")


def test_deprecated_alias_is_not_unknown(catalog: RuleCatalog) -> None:
    assert detect_unknown_keys({"variable_name": {"min_length": 2}}, catalog) == ()


def test_single_warning_lists_every_unknown_key(catalog: RuleCatalog) -> None:
    warnings: list[ValidationWarning] = []

    warn_unknown_keys({"line_lenght": 100, "bogus": 1}, catalog, warnings)

    assert len(warnings) == 1
    warning = warnings[0]
    assert warning.code == CFG001
    assert warning.message == "Configuration contains invalid keys: bogus, line_lenght"
    assert "line_lenght: did you mean `line_length`?" in warning.hint


def test_no_warning_when_all_keys_known(catalog: RuleCatalog) -> None:
    warnings: list[ValidationWarning] = []

    warn_unknown_keys({"reporter": "json", "type_name": {}}, catalog, warnings)

    assert warnings == []
