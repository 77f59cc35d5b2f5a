"""CLI entrypoint for lintconf."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path

from lintconf import __version__
from lintconf.config import ConfigResult, load_config
from lintconf.constants.reporting import (
    OUTPUT_FORMAT_JSON,
    OUTPUT_FORMAT_TEXT,
    SCHEMA_VERSION,
    VALID_OUTPUT_FORMATS,
)
from lintconf.exceptions import ConfigError
from lintconf.exceptions.validation import format_warnings
from lintconf.rules import load_rule_catalog

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    """Build top-level CLI parser."""
    parser = argparse.ArgumentParser(
        prog="lintconf",
        description="Validate lint configuration files against a rule catalog.",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    subparsers = parser.add_subparsers(dest="command", required=True)

    check = subparsers.add_parser("check-config", help="Validate a config file and report warnings")
    check.add_argument("-r", "--root", type=Path, default=Path("."), help="Project root path")
    check.add_argument("-c", "--config", type=Path, default=None, help="Explicit config file")
    check.add_argument(
        "-R",
        "--rules",
        type=Path,
        default=None,
        help="Rule registry YAML file (defaults to the bundled rules)",
    )
    check.add_argument("--enable-all-rules", action="store_true", help="Run every rule regardless of config")
    check.add_argument("--cache-path", default=None, help="Override the cache path from the config")
    check.add_argument(
        "--format",
        choices=sorted(VALID_OUTPUT_FORMATS),
        default=OUTPUT_FORMAT_TEXT,
        help="Output format (default: text)",
    )
    check.add_argument("--strict", action="store_true", help="Exit non-zero when any warning is emitted")
    check.add_argument("-v", "--verbose", action="store_true", help="Show debug diagnostics")

    return parser


def main(argv: list[str] | None = None) -> int:
    """CLI entrypoint."""
    parser = build_parser()
    args = parser.parse_args(argv)

    level = logging.DEBUG if args.verbose else logging.INFO
    logging.basicConfig(level=level, format="%(levelname)s %(message)s")

    if args.command != "check-config":
        parser.error(f"Unsupported command: {args.command}")

    try:
        catalog = load_rule_catalog(args.rules)
        result = load_config(
            args.root,
            args.config,
            catalog=catalog,
            enable_all_rules=args.enable_all_rules,
            cache_path=args.cache_path,
        )
    except ConfigError as exc:
        print(f"Configuration error: {exc}", file=sys.stderr)
        return 2

    if args.format == OUTPUT_FORMAT_JSON:
        print(json.dumps(build_report(result), indent=2, sort_keys=True))
    else:
        if result.warnings:
            logger.warning("%d configuration warning(s):\n%s", len(result.warnings), format_warnings(result.warnings))
        print(f"Configuration is valid ({len(result.warnings)} warning(s)).")

    if args.strict and result.warnings:
        return 1
    return 0


def build_report(result: ConfigResult) -> dict[str, object]:
    """Build the JSON report payload for a check run."""
    return {
        "schema_version": SCHEMA_VERSION,
        "config": result.config.to_dict(),
        "warnings": [w.to_dict() for w in result.warnings],
    }


if __name__ == "__main__":
    raise SystemExit(main())
