"""Configuration-related exceptions."""

from __future__ import annotations

from lintconf.exceptions.base import LintconfError


class ConfigError(LintconfError, ValueError):
    """Raised when lint configuration is invalid."""


class DuplicatedRuleConfigurationError(ConfigError):
    """Raised when one rule is configured under more than one of its names."""

    def __init__(self, identifier: str, aliases: tuple[str, ...]) -> None:
        self.identifier = identifier
        self.aliases = aliases
        quoted = ", ".join(f"'{alias}'" for alias in aliases)
        super().__init__(f"Multiple configurations found for '{identifier}'. Check for any aliases: {quoted}.")


class RulesModeError(ConfigError):
    """Raised when rule selection lists cannot be combined."""
