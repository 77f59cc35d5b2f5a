"""Immutable registry of known lint rules and their deprecated names."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from types import MappingProxyType

from lintconf.exceptions import ConfigError


@dataclass(frozen=True)
class RuleDescription:
    """Identity of one lint rule."""

    identifier: str
    deprecated_aliases: tuple[str, ...] = ()
    opt_in: bool = False
    analyzer: bool = False
    name: str = ""
    description: str = ""

    @property
    def all_identifiers(self) -> frozenset[str]:
        """Canonical identifier plus every deprecated alias."""
        return frozenset((self.identifier, *self.deprecated_aliases))

    @property
    def requires_opt_in(self) -> bool:
        """Analyzer rules never run by default, same as opt-in rules."""
        return self.opt_in or self.analyzer


@dataclass(frozen=True)
class RuleCatalog:
    """Known rules keyed by canonical identifier, with a flat alias lookup.

    Build with :meth:`from_descriptions` so that the lookup tables are
    computed once and name collisions are rejected.
    """

    descriptions: tuple[RuleDescription, ...] = ()
    by_identifier: Mapping[str, RuleDescription] = field(
        default_factory=lambda: MappingProxyType({}), repr=False, hash=False
    )
    name_lookup: Mapping[str, str] = field(default_factory=lambda: MappingProxyType({}), repr=False, hash=False)

    @classmethod
    def from_descriptions(cls, descriptions: Iterable[RuleDescription]) -> RuleCatalog:
        """Index rule descriptions, rejecting names claimed by two rules."""
        ordered = tuple(descriptions)
        by_identifier: dict[str, RuleDescription] = {}
        name_lookup: dict[str, str] = {}
        for description in ordered:
            for rule_name in (description.identifier, *description.deprecated_aliases):
                owner = name_lookup.get(rule_name)
                if owner is not None:
                    raise ConfigError(
                        f"Rule name '{rule_name}' is claimed by both '{owner}' and '{description.identifier}'"
                    )
                name_lookup[rule_name] = description.identifier
            by_identifier[description.identifier] = description
        return cls(
            descriptions=ordered,
            by_identifier=MappingProxyType(by_identifier),
            name_lookup=MappingProxyType(name_lookup),
        )

    @property
    def all_valid_identifiers(self) -> frozenset[str]:
        """Every canonical identifier and alias in the catalog."""
        return frozenset(self.name_lookup)

    def identifier_for(self, rule_name: str) -> str | None:
        """Map an identifier or alias to its canonical identifier."""
        return self.name_lookup.get(rule_name)

    def description_for(self, rule_name: str) -> RuleDescription | None:
        """Return the owning rule description for an identifier or alias."""
        identifier = self.name_lookup.get(rule_name)
        if identifier is None:
            return None
        return self.by_identifier[identifier]

    def deprecated_aliases(self) -> tuple[tuple[str, str], ...]:
        """Return ``(alias, identifier)`` pairs in catalog order."""
        return tuple(
            (alias, description.identifier)
            for description in self.descriptions
            for alias in description.deprecated_aliases
        )

    def analyzer_identifiers(self) -> tuple[str, ...]:
        return tuple(d.identifier for d in self.descriptions if d.analyzer)

    def __len__(self) -> int:
        return len(self.descriptions)
