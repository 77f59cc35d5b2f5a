"""lintconf: configuration validation for lint rule sets."""

from __future__ import annotations

__version__ = "0.1.0"
