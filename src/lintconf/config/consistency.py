"""Warnings for rule config blocks that the active rules mode ignores."""

from __future__ import annotations

from typing import assert_never

from lintconf.constants.config import GLOBAL_CONFIG_KEYS, KEY_DISABLED_RULES, KEY_OPT_IN_RULES, KEY_WHITELIST_RULES
from lintconf.constants.validation import CFG004, CFG005, CFG006
from lintconf.exceptions.validation import ValidationWarning
from lintconf.rules.catalog import RuleCatalog
from lintconf.types.common import RawConfig
from lintconf.types.config import AllEnabled, DefaultMode, RulesMode, Whitelisted


def warn_ineffective_rule_config(
    raw: RawConfig,
    catalog: RuleCatalog,
    mode: RulesMode,
    warnings: list[ValidationWarning],
) -> None:
    """Append a warning for each configured rule that will not run.

    Keys that do not name a known rule are skipped; unknown-key detection
    already reports them. For the default mode the opt-in check runs first
    and a rule gets at most one warning.
    """
    if isinstance(mode, AllEnabled):
        return

    for key in raw:
        if key in GLOBAL_CONFIG_KEYS:
            continue
        description = catalog.description_for(key)
        if description is None:
            continue

        identifier = description.identifier
        message = f"Found a configuration for '{identifier}' rule"
        rule_names = description.all_identifiers

        if isinstance(mode, Whitelisted):
            if rule_names.isdisjoint(mode.rules):
                warnings.append(
                    ValidationWarning(
                        code=CFG004,
                        field=key,
                        message=f"{message}, but it is not present on '{KEY_WHITELIST_RULES}'.",
                    )
                )
        elif isinstance(mode, DefaultMode):
            if description.requires_opt_in and rule_names.isdisjoint(mode.opt_in):
                warnings.append(
                    ValidationWarning(
                        code=CFG005,
                        field=key,
                        message=f"{message}, but it is not enabled on '{KEY_OPT_IN_RULES}'.",
                    )
                )
            elif rule_names <= mode.disabled:
                warnings.append(
                    ValidationWarning(
                        code=CFG006,
                        field=key,
                        message=f"{message}, but it is disabled on '{KEY_DISABLED_RULES}'.",
                    )
                )
        else:
            assert_never(mode)
