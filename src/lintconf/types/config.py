"""Typed configuration structures for lint rule activation and formatting."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TypeAlias

from lintconf.constants.config import DEFAULT_INDENTATION_SPACES


@dataclass(frozen=True)
class AllEnabled:
    """Every rule in the catalog runs."""


@dataclass(frozen=True)
class Whitelisted:
    """Only the listed rules run."""

    rules: frozenset[str] = frozenset()


@dataclass(frozen=True)
class DefaultMode:
    """Non opt-in rules run unless disabled; opt-in rules run only when listed."""

    disabled: frozenset[str] = frozenset()
    opt_in: frozenset[str] = frozenset()


RulesMode: TypeAlias = AllEnabled | Whitelisted | DefaultMode


@dataclass(frozen=True)
class IndentationStyle:
    """Indentation used by rules that check or fix indentation."""

    tabs: bool = False
    spaces: int = DEFAULT_INDENTATION_SPACES

    @classmethod
    def with_tabs(cls) -> IndentationStyle:
        return cls(tabs=True, spaces=0)

    @classmethod
    def with_spaces(cls, count: int) -> IndentationStyle:
        return cls(tabs=False, spaces=count)

    def describe(self) -> str:
        """Short label used in logs and CLI output."""
        if self.tabs:
            return "tabs"
        return f"{self.spaces} spaces"
