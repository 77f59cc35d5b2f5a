"""Tests for deprecated key and renamed rule warnings."""

from __future__ import annotations

from typing import Any

from lintconf.config import warn_deprecations
from lintconf.constants.validation import CFG002, CFG003
from lintconf.exceptions.validation import ValidationWarning
from lintconf.rules import RuleCatalog


def _run(
    raw: dict[str, Any],
    catalog: RuleCatalog,
    *,
    disabled: tuple[str, ...] = (),
    opt_in: tuple[str, ...] = (),
    whitelist: tuple[str, ...] = (),
) -> list[ValidationWarning]:
    warnings: list[ValidationWarning] = []
    warn_deprecations(
        raw,
        disabled_rules=disabled,
        opt_in_rules=opt_in,
        whitelist_rules=whitelist,
        catalog=catalog,
        warnings=warnings,
    )
    return warnings


def test_enabled_rules_key_is_deprecated(catalog: RuleCatalog) -> None:
    warnings = _run({"enabled_rules": ["empty_count"]}, catalog)

    assert [w.code for w in warnings] == [CFG002]
    assert warnings[0].message == (
        "'enabled_rules' has been renamed to 'opt_in_rules' and will be completely removed in a future release."
    )


def test_use_nested_configs_key_is_deprecated(catalog: RuleCatalog) -> None:
    warnings = _run({"use_nested_configs": True}, catalog)

    assert [w.field for w in warnings] == ["use_nested_configs"]
    assert "its value is now ignored" in warnings[0].message


def test_alias_as_top_level_key_warns(catalog: RuleCatalog) -> None:
    warnings = _run({"variable_name": {"min_length": 3}}, catalog)

    assert len(warnings) == 1
    assert warnings[0].code == CFG003
    assert warnings[0].message == (
        "'variable_name' rule has been renamed to 'identifier_name' and will be completely removed in a future release."
    )


def test_alias_in_rule_lists_warns_once(catalog: RuleCatalog) -> None:
    warnings = _run(
        {},
        catalog,
        disabled=("class_name",),
        opt_in=("class_name", "import_order"),
        whitelist=("class_name",),
    )

    assert [w.field for w in warnings] == ["class_name", "import_order"]


def test_alias_in_key_and_list_warns_once(catalog: RuleCatalog) -> None:
    warnings = _run({"variable_name": {}}, catalog, disabled=("variable_name",))

    assert len(warnings) == 1


def test_canonical_names_do_not_warn(catalog: RuleCatalog) -> None:
    warnings = _run({"identifier_name": {}}, catalog, disabled=("type_name",), opt_in=("sorted_imports",))

    assert warnings == []


def test_key_warnings_precede_alias_warnings(catalog: RuleCatalog) -> None:
    warnings = _run({"type_label": {}, "enabled_rules": [], "use_nested_configs": False}, catalog)

    assert [w.code for w in warnings] == [CFG002, CFG002, CFG003]
