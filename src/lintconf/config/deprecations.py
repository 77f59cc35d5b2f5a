"""Warnings for deprecated top-level keys and renamed rules."""

from __future__ import annotations

from lintconf.constants.config import KEY_ENABLED_RULES, KEY_OPT_IN_RULES, KEY_USE_NESTED_CONFIGS
from lintconf.constants.validation import CFG002, CFG003
from lintconf.exceptions.validation import ValidationWarning
from lintconf.rules.catalog import RuleCatalog
from lintconf.types.common import RawConfig


def warn_deprecations(
    raw: RawConfig,
    *,
    disabled_rules: tuple[str, ...],
    opt_in_rules: tuple[str, ...],
    whitelist_rules: tuple[str, ...],
    catalog: RuleCatalog,
    warnings: list[ValidationWarning],
) -> None:
    """Append one warning per deprecated key and per renamed rule still in use.

    A renamed rule counts as used when its old name is a top-level key or
    appears in any of the user rule lists. Each alias is reported once.
    """
    if KEY_ENABLED_RULES in raw:
        warnings.append(
            ValidationWarning(
                code=CFG002,
                field=KEY_ENABLED_RULES,
                message=(
                    f"'{KEY_ENABLED_RULES}' has been renamed to '{KEY_OPT_IN_RULES}' "
                    "and will be completely removed in a future release."
                ),
                hint=f"use `{KEY_OPT_IN_RULES}`",
            )
        )

    if KEY_USE_NESTED_CONFIGS in raw:
        warnings.append(
            ValidationWarning(
                code=CFG002,
                field=KEY_USE_NESTED_CONFIGS,
                message=(
                    f"Support for '{KEY_USE_NESTED_CONFIGS}' has been deprecated and its value is now "
                    "ignored. Nested configuration files are now always considered."
                ),
                hint=f"remove `{KEY_USE_NESTED_CONFIGS}`",
            )
        )

    user_rule_ids = set(disabled_rules) | set(opt_in_rules) | set(whitelist_rules)
    for alias, identifier in catalog.deprecated_aliases():
        if alias not in raw and alias not in user_rule_ids:
            continue
        warnings.append(
            ValidationWarning(
                code=CFG003,
                field=alias,
                message=(
                    f"'{alias}' rule has been renamed to '{identifier}' "
                    "and will be completely removed in a future release."
                ),
                hint=f"use `{identifier}`",
            )
        )
