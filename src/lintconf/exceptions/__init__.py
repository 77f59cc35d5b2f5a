"""Shared exception hierarchy for lintconf."""

from __future__ import annotations

from .base import LintconfError
from .config import ConfigError, DuplicatedRuleConfigurationError, RulesModeError

__all__ = [
    "ConfigError",
    "DuplicatedRuleConfigurationError",
    "LintconfError",
    "RulesModeError",
]
