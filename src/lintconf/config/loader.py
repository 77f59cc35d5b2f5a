"""Config file loading for lint runs."""

from __future__ import annotations

from dataclasses import replace
from pathlib import Path

import yaml

from lintconf.config.builder import ConfigResult, build_config
from lintconf.constants.config import CONFIG_FILENAME
from lintconf.exceptions import ConfigError
from lintconf.rules.catalog import RuleCatalog
from lintconf.rules.loader import load_rule_catalog
from lintconf.types.common import RawConfig


def load_raw_config(root: Path, config_path: Path | None = None) -> RawConfig:
    """Read ``.lintconf.yml`` (or an explicit path) into a plain mapping.

    A missing default file yields an empty config; a missing explicit file
    is an error.
    """
    root = root.resolve()
    path = config_path.resolve() if config_path else (root / CONFIG_FILENAME)
    if not path.exists():
        if config_path is not None:
            raise ConfigError(f"Config file not found: {path}")
        return {}

    try:
        raw = yaml.safe_load(path.read_text(encoding="utf-8"))
    except yaml.YAMLError as exc:
        raise ConfigError(f"Invalid YAML config file at {path}: {exc}") from exc

    if raw is None:
        return {}
    if not isinstance(raw, dict):
        raise ConfigError(f"Config file at {path} must be a YAML mapping")
    return raw


def load_config(
    root: Path,
    config_path: Path | None = None,
    *,
    catalog: RuleCatalog | None = None,
    enable_all_rules: bool = False,
    cache_path: str | None = None,
) -> ConfigResult:
    """Load a config file and validate it against the rule catalog."""
    raw = load_raw_config(root, config_path)
    result = build_config(
        raw,
        catalog or load_rule_catalog(),
        enable_all_rules=enable_all_rules,
        cache_path=cache_path,
    )
    path_str = str(config_path.resolve() if config_path else root.resolve() / CONFIG_FILENAME)
    return replace(result, warnings=tuple(replace(w, path=path_str) for w in result.warnings))
