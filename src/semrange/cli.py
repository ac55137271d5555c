"""Command line entrypoint.

Usage:
  semrange parse VERSION
  semrange range RANGE
  semrange compare A B
  semrange satisfies RANGE VERSION
  semrange check [--file path] [--summary] [--warn-only]

Exit codes: 0 on success, 1 when a version does not satisfy a range or a
constraints file cannot be loaded, 2 on malformed input, 10 when ``check``
finds problems (unless ``--warn-only``).
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path

from .config import ConfigError, load_constraints
from .core import (
    check_constraints,
    compare_version,
    format_range,
    format_version,
    parse_version,
    parse_version_range,
)
from .parsers.errors import ParseError
from .summary import render_summary

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_FAILED = 1
EXIT_PARSE_ERROR = 2
EXIT_FINDINGS = 10

_COMPARISON_SYMBOLS = {-1: "<", 0: "=", 1: ">"}


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="semrange", description=__doc__.splitlines()[0])
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    commands = parser.add_subparsers(dest="command", required=True)

    parse_cmd = commands.add_parser("parse", help="Parse and normalise a version")
    parse_cmd.add_argument("version")

    range_cmd = commands.add_parser("range", help="Parse a range and print its bracket form")
    range_cmd.add_argument("range")

    compare_cmd = commands.add_parser("compare", help="Compare the precedence of two versions")
    compare_cmd.add_argument("a")
    compare_cmd.add_argument("b")

    satisfies_cmd = commands.add_parser("satisfies", help="Exit 0 if VERSION is in RANGE")
    satisfies_cmd.add_argument("range")
    satisfies_cmd.add_argument("version")

    check_cmd = commands.add_parser("check", help="Check a constraints document")
    check_cmd.add_argument(
        "--file",
        type=Path,
        default=None,
        help="Path to a JSON or YAML constraints document",
    )
    check_cmd.add_argument("--summary", action="store_true", help="Print a Markdown summary")
    check_cmd.add_argument("--warn-only", action="store_true")

    return parser.parse_args(argv)


def _run_check(args: argparse.Namespace) -> int:
    try:
        document = load_constraints(args.file)
    except ConfigError as exc:
        print(f"ERROR: {exc}", file=sys.stderr)
        return EXIT_FAILED

    report = check_constraints(document)
    if args.summary:
        print(render_summary(report), end="")
    else:
        print(json.dumps(report, indent=2))

    if report.get("hasFindings") and not args.warn_only:
        return EXIT_FINDINGS
    return EXIT_OK


def _run(args: argparse.Namespace) -> int:
    if args.command == "parse":
        print(format_version(parse_version(args.version)))
        return EXIT_OK

    if args.command == "range":
        print(format_range(parse_version_range(args.range)))
        return EXIT_OK

    if args.command == "compare":
        comparison = compare_version(parse_version(args.a), parse_version(args.b))
        print(_COMPARISON_SYMBOLS[comparison])
        return EXIT_OK

    if args.command == "satisfies":
        version_range = parse_version_range(args.range)
        satisfied = version_range.is_satisfied_by(parse_version(args.version))
        logger.debug("%s in %s: %s", args.version, format_range(version_range), satisfied)
        return EXIT_OK if satisfied else EXIT_FAILED

    return _run_check(args)


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        return _run(args)
    except ParseError as exc:
        print(f"ERROR: {exc.render()}", file=sys.stderr)
        return EXIT_PARSE_ERROR


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
