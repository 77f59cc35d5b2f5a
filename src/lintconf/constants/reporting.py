"""Output formats and schema versioning for check results."""

from __future__ import annotations

SCHEMA_VERSION: str = "1"

OUTPUT_FORMAT_TEXT: str = "text"
OUTPUT_FORMAT_JSON: str = "json"
VALID_OUTPUT_FORMATS: frozenset[str] = frozenset({OUTPUT_FORMAT_TEXT, OUTPUT_FORMAT_JSON})
