"""Root exception type."""

from __future__ import annotations


class LintconfError(Exception):
    """Base class for all lintconf errors."""
