"""Shared pytest fixtures for config validation tests."""

from __future__ import annotations

from pathlib import Path

import pytest

from lintconf.rules import RuleCatalog, RuleDescription


@pytest.fixture(scope="session")
def catalog() -> RuleCatalog:
    """Small catalog covering plain, aliased, opt-in and analyzer rules."""
    return RuleCatalog.from_descriptions(
        [
            RuleDescription(identifier="line_length"),
            RuleDescription(identifier="identifier_name", deprecated_aliases=("variable_name",)),
            RuleDescription(identifier="type_name", deprecated_aliases=("type_label", "class_name")),
            RuleDescription(identifier="empty_count", opt_in=True),
            RuleDescription(identifier="sorted_imports", opt_in=True, deprecated_aliases=("import_order",)),
            RuleDescription(identifier="unused_import", analyzer=True),
        ]
    )


@pytest.fixture()
def write_config(tmp_path: Path):
    """Write a ``.lintconf.yml`` under tmp_path and return its path."""

    def _write(content: str, name: str = ".lintconf.yml") -> Path:
        path = tmp_path / name
        path.write_text(content, encoding="utf-8")
        return path

    return _write
