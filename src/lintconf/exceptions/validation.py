"""Structured warning model for config validation."""

from __future__ import annotations

from dataclasses import dataclass

from lintconf.types.common import JsonObject


@dataclass(frozen=True)
class ValidationWarning:
    """A single non-fatal config diagnostic with a stable code."""

    code: str
    field: str
    message: str
    hint: str = ""
    path: str = ""

    def format(self) -> str:
        """Format as a human-readable single-line message."""
        parts = [f"[{self.code}]"]
        if self.path:
            parts.append(self.path)
        parts.append(self.message)
        if self.hint:
            parts.append(f"({self.hint})")
        return " ".join(parts)

    def to_dict(self) -> JsonObject:
        """Serialize for JSON output."""
        return {
            "code": self.code,
            "path": self.path,
            "field": self.field,
            "message": self.message,
            "hint": self.hint,
        }


def format_warnings(warnings: list[ValidationWarning] | tuple[ValidationWarning, ...]) -> str:
    """Format warnings as a multi-line string, keeping emission order."""
    return "\n".join(w.format() for w in warnings)
