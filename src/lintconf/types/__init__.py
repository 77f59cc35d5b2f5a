"""Shared type aliases for lintconf."""

from .common import JsonObject, JsonScalar, JsonValue, RawConfig
from .config import AllEnabled, DefaultMode, IndentationStyle, RulesMode, Whitelisted

__all__ = [
    "AllEnabled",
    "DefaultMode",
    "IndentationStyle",
    "JsonObject",
    "JsonScalar",
    "JsonValue",
    "RawConfig",
    "RulesMode",
    "Whitelisted",
]
