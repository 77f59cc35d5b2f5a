"""Rule activation mode resolution from user rule lists."""

from __future__ import annotations

import logging

from lintconf.constants.config import KEY_DISABLED_RULES, KEY_OPT_IN_RULES, KEY_WHITELIST_RULES
from lintconf.exceptions import RulesModeError
from lintconf.types.config import AllEnabled, DefaultMode, RulesMode, Whitelisted

logger = logging.getLogger(__name__)


def resolve_rules_mode(
    *,
    enable_all_rules: bool,
    whitelist_rules: tuple[str, ...],
    opt_in_rules: tuple[str, ...],
    disabled_rules: tuple[str, ...],
    analyzer_rules: tuple[str, ...],
) -> RulesMode:
    """Pick the activation mode for a config.

    Analyzer rules only run when listed, so they join the whitelist or the
    opt-in set of whichever mode applies.
    """
    if enable_all_rules:
        logger.debug("Rules mode: all enabled")
        return AllEnabled()

    if whitelist_rules:
        if opt_in_rules or disabled_rules:
            raise RulesModeError(
                f"'{KEY_DISABLED_RULES}' or '{KEY_OPT_IN_RULES}' cannot be used in combination "
                f"with '{KEY_WHITELIST_RULES}'"
            )
        logger.debug("Rules mode: whitelist of %d rule(s)", len(whitelist_rules))
        return Whitelisted(rules=frozenset(whitelist_rules) | frozenset(analyzer_rules))

    logger.debug(
        "Rules mode: default with %d disabled, %d opt-in",
        len(disabled_rules),
        len(opt_in_rules),
    )
    return DefaultMode(
        disabled=frozenset(disabled_rules),
        opt_in=frozenset(opt_in_rules) | frozenset(analyzer_rules),
    )
