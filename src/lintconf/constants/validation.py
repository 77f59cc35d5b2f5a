"""Stable warning codes for config validation."""

from __future__ import annotations

CFG001: str = "CFG001"  # unknown top-level keys
CFG002: str = "CFG002"  # deprecated top-level key
CFG003: str = "CFG003"  # deprecated rule alias
CFG004: str = "CFG004"  # configured rule missing from whitelist_rules
CFG005: str = "CFG005"  # configured opt-in rule not enabled
CFG006: str = "CFG006"  # configured rule disabled
CFG007: str = "CFG007"  # invalid indentation, default used
CFG008: str = "CFG008"  # invalid value type, value ignored
