"""Configuration loading and validation for lint runs.

This package facade re-exports the public names so that callers can use
``from lintconf.config import ...``.
"""

from __future__ import annotations

from lintconf.config.builder import ConfigResult, build_config
from lintconf.config.consistency import warn_ineffective_rule_config
from lintconf.config.deprecations import warn_deprecations
from lintconf.config.duplicates import resolve_rule_configurations
from lintconf.config.keys import detect_unknown_keys, valid_keys, warn_unknown_keys
from lintconf.config.loader import load_config, load_raw_config
from lintconf.config.model import LintConfig

__all__ = [
    "ConfigResult",
    "LintConfig",
    "build_config",
    "detect_unknown_keys",
    "load_config",
    "load_raw_config",
    "resolve_rule_configurations",
    "valid_keys",
    "warn_deprecations",
    "warn_ineffective_rule_config",
    "warn_unknown_keys",
]
