"""Lenient extraction of scalar and list fields from a raw config.

None of these helpers raise. A value of the wrong type is reported as a
warning and replaced with the field default.
"""

from __future__ import annotations

from typing import Any

from lintconf.constants.config import (
    DEFAULT_REPORTER,
    INDENTATION_TABS,
    KEY_CACHE_PATH,
    KEY_INDENTATION,
    KEY_LINT_VERSION,
    KEY_REPORTER,
    KEY_WARNING_THRESHOLD,
)
from lintconf.constants.validation import CFG007, CFG008
from lintconf.exceptions.validation import ValidationWarning
from lintconf.types.common import RawConfig
from lintconf.types.config import IndentationStyle


def ensure_string_list(value: Any, key_name: str, warnings: list[ValidationWarning]) -> tuple[str, ...]:
    """Coerce a value to a tuple of strings; a lone string is a one-item list."""
    if value is None:
        return ()
    if isinstance(value, str):
        return (value,)
    if not isinstance(value, (list, tuple)) or not all(isinstance(item, str) for item in value):
        warnings.append(_invalid_type(key_name, "expected a list of strings"))
        return ()
    return tuple(value)


def parse_indentation(raw: RawConfig, warnings: list[ValidationWarning]) -> IndentationStyle:
    """Read ``indentation``; fall back to the default with one warning if invalid."""
    if KEY_INDENTATION not in raw:
        return IndentationStyle()

    value = raw[KEY_INDENTATION]
    if isinstance(value, int) and not isinstance(value, bool):
        return IndentationStyle.with_spaces(value)
    if value == INDENTATION_TABS:
        return IndentationStyle.with_tabs()

    warnings.append(
        ValidationWarning(
            code=CFG007,
            field=KEY_INDENTATION,
            message=f"Invalid configuration for '{KEY_INDENTATION}'. Falling back to default.",
            hint=f"expected an integer or '{INDENTATION_TABS}'; got: {value!r}",
        )
    )
    return IndentationStyle()


def parse_warning_threshold(raw: RawConfig, warnings: list[ValidationWarning]) -> int | None:
    value = raw.get(KEY_WARNING_THRESHOLD)
    if value is None:
        return None
    if isinstance(value, bool) or not isinstance(value, int):
        warnings.append(_invalid_type(KEY_WARNING_THRESHOLD, "expected an integer"))
        return None
    return value


def parse_reporter(raw: RawConfig, warnings: list[ValidationWarning]) -> str:
    value = raw.get(KEY_REPORTER)
    if value is None:
        return DEFAULT_REPORTER
    if not isinstance(value, str):
        warnings.append(_invalid_type(KEY_REPORTER, f"expected a string; using `{DEFAULT_REPORTER}`"))
        return DEFAULT_REPORTER
    return value


def parse_cache_path(raw: RawConfig, override: str | None, warnings: list[ValidationWarning]) -> str | None:
    """An explicit override wins over the config value."""
    if override is not None:
        return override
    value = raw.get(KEY_CACHE_PATH)
    if value is None:
        return None
    if not isinstance(value, str):
        warnings.append(_invalid_type(KEY_CACHE_PATH, "expected a string"))
        return None
    return value


def parse_pinned_version(raw: RawConfig) -> str | None:
    """YAML reads ``0.40`` as a float, so any scalar is stringified."""
    value = raw.get(KEY_LINT_VERSION)
    if value is None:
        return None
    if isinstance(value, str):
        return value
    return str(value)


def _invalid_type(key_name: str, hint: str) -> ValidationWarning:
    return ValidationWarning(
        code=CFG008,
        field=key_name,
        message=f"invalid type for `{key_name}`, value ignored",
        hint=hint,
    )
