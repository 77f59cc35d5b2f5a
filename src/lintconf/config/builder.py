"""Assemble a validated LintConfig from a raw config mapping."""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass
from typing import TypeAlias

from lintconf.config.consistency import warn_ineffective_rule_config
from lintconf.config.deprecations import warn_deprecations
from lintconf.config.duplicates import resolve_rule_configurations
from lintconf.config.fields import (
    ensure_string_list,
    parse_cache_path,
    parse_indentation,
    parse_pinned_version,
    parse_reporter,
    parse_warning_threshold,
)
from lintconf.config.keys import warn_unknown_keys
from lintconf.config.model import LintConfig
from lintconf.constants.config import (
    KEY_ANALYZER_RULES,
    KEY_DISABLED_RULES,
    KEY_ENABLED_RULES,
    KEY_EXCLUDED,
    KEY_INCLUDED,
    KEY_OPT_IN_RULES,
    KEY_WHITELIST_RULES,
)
from lintconf.exceptions.validation import ValidationWarning
from lintconf.rules.catalog import RuleCatalog
from lintconf.rules.mode import resolve_rules_mode
from lintconf.types.common import RawConfig
from lintconf.types.config import RulesMode

logger = logging.getLogger(__name__)

ModeResolver: TypeAlias = Callable[..., RulesMode]


@dataclass(frozen=True)
class ConfigResult:
    """A validated config together with the warnings raised while building it."""

    config: LintConfig
    warnings: tuple[ValidationWarning, ...] = ()


def build_config(
    raw: RawConfig,
    catalog: RuleCatalog,
    *,
    enable_all_rules: bool = False,
    cache_path: str | None = None,
    mode_resolver: ModeResolver = resolve_rules_mode,
) -> ConfigResult:
    """Validate a raw config against a rule catalog.

    Only a rule configured under two of its names aborts the build, with
    DuplicatedRuleConfigurationError. Every other problem becomes a warning
    in the returned result. Errors raised by ``mode_resolver`` propagate.
    """
    warnings: list[ValidationWarning] = []

    warn_unknown_keys(raw, catalog, warnings)

    opt_in_key = KEY_OPT_IN_RULES if raw.get(KEY_OPT_IN_RULES) is not None else KEY_ENABLED_RULES
    opt_in_rules = ensure_string_list(raw.get(opt_in_key), opt_in_key, warnings)
    disabled_rules = ensure_string_list(raw.get(KEY_DISABLED_RULES), KEY_DISABLED_RULES, warnings)
    whitelist_rules = ensure_string_list(raw.get(KEY_WHITELIST_RULES), KEY_WHITELIST_RULES, warnings)
    analyzer_rules = ensure_string_list(raw.get(KEY_ANALYZER_RULES), KEY_ANALYZER_RULES, warnings)

    warn_deprecations(
        raw,
        disabled_rules=disabled_rules,
        opt_in_rules=opt_in_rules,
        whitelist_rules=whitelist_rules,
        catalog=catalog,
        warnings=warnings,
    )

    rule_configurations = resolve_rule_configurations(raw, catalog)

    rules_mode = mode_resolver(
        enable_all_rules=enable_all_rules,
        whitelist_rules=whitelist_rules,
        opt_in_rules=opt_in_rules,
        disabled_rules=disabled_rules,
        analyzer_rules=analyzer_rules,
    )

    warn_ineffective_rule_config(raw, catalog, rules_mode, warnings)

    config = LintConfig(
        rules_mode=rules_mode,
        included_paths=ensure_string_list(raw.get(KEY_INCLUDED), KEY_INCLUDED, warnings),
        excluded_paths=ensure_string_list(raw.get(KEY_EXCLUDED), KEY_EXCLUDED, warnings),
        indentation=parse_indentation(raw, warnings),
        warning_threshold=parse_warning_threshold(raw, warnings),
        reporter=parse_reporter(raw, warnings),
        cache_path=parse_cache_path(raw, cache_path, warnings),
        pinned_version=parse_pinned_version(raw),
        analyzer_rules=analyzer_rules,
        rule_configurations=rule_configurations,
    )
    logger.debug(
        "Built config: %d configured rule(s), %d warning(s)",
        len(rule_configurations),
        len(warnings),
    )
    return ConfigResult(config=config, warnings=tuple(warnings))
