"""Top-level key registry and unknown-key detection."""

from __future__ import annotations

import difflib

from lintconf.constants.config import GLOBAL_CONFIG_KEYS
from lintconf.constants.validation import CFG001
from lintconf.exceptions.validation import ValidationWarning
from lintconf.rules.catalog import RuleCatalog
from lintconf.types.common import RawConfig


def valid_keys(catalog: RuleCatalog) -> frozenset[str]:
    """Global keys plus every rule identifier and alias in the catalog."""
    return GLOBAL_CONFIG_KEYS | catalog.all_valid_identifiers


def detect_unknown_keys(raw: RawConfig, catalog: RuleCatalog) -> tuple[str, ...]:
    """Return raw keys that neither the tool nor any rule understands, sorted."""
    allowed = valid_keys(catalog)
    return tuple(sorted(str(key) for key in raw if key not in allowed))


def warn_unknown_keys(raw: RawConfig, catalog: RuleCatalog, warnings: list[ValidationWarning]) -> None:
    """Append one warning listing every unknown key, if any."""
    unknown = detect_unknown_keys(raw, catalog)
    if not unknown:
        return

    allowed = valid_keys(catalog)
    hints = []
    for key in unknown:
        suggestion = _suggest_key(key, allowed)
        if suggestion:
            hints.append(f"{key}: {suggestion}")

    warnings.append(
        ValidationWarning(
            code=CFG001,
            field=", ".join(unknown),
            message=f"Configuration contains invalid keys: {', '.join(unknown)}",
            hint="; ".join(hints),
        )
    )


def _suggest_key(unknown: str, allowed: frozenset[str]) -> str:
    """Return a 'did you mean ...' hint for a close key match, or empty string."""
    matches = difflib.get_close_matches(unknown, sorted(allowed), n=1, cutoff=0.6)
    if matches:
        return f"did you mean `{matches[0]}`?"
    return ""
