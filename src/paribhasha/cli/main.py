"""CLI entrypoint for the paribhasha sutra engine."""

from __future__ import annotations

import argparse
import logging
from pathlib import Path

from paribhasha import __version__
from paribhasha.cli.handlers import handle_resolve, handle_rules, handle_validate_rules
from paribhasha.constants.branding import CLI_DESCRIPTION


def build_parser() -> argparse.ArgumentParser:
    """Build top-level CLI parser."""
    parser = argparse.ArgumentParser(
        prog="paribhasha",
        description=CLI_DESCRIPTION,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    subparsers = parser.add_subparsers(dest="command", required=True)

    resolve = subparsers.add_parser("resolve", help="Decide which sutra governs a word group")
    resolve.add_argument(
        "words",
        nargs="+",
        help="Word forms (Devanagari or IAST); with --json-input, a single JSON list of words or word records",
    )
    resolve.add_argument("--json-input", action="store_true", help="Parse WORDS as one JSON document")
    resolve.add_argument("--context", default=None, help="Context flags as a JSON object")
    resolve.add_argument(
        "-s",
        "--scope",
        action="append",
        default=None,
        help="Scope tag used to select candidate rules (repeat for multiple tags)",
    )
    resolve.add_argument("-c", "--config", type=Path, help="Explicit config file")
    _add_rules_source(resolve)
    resolve.add_argument("-v", "--verbose", action="store_true", help="Log every resolution stage")

    rules = subparsers.add_parser("rules", help="List the loaded rule catalog")
    rules.add_argument("-c", "--config", type=Path, help="Explicit config file")
    _add_rules_source(rules)
    rules.add_argument("-v", "--verbose", action="store_true", help="Log rule loading")

    validate = subparsers.add_parser("validate-rules", help="Validate rule files and report every problem")
    _add_rules_source(validate)
    validate.add_argument("-v", "--verbose", action="store_true", help="Verbose logging")

    return parser


def _add_rules_source(parser: argparse.ArgumentParser) -> None:
    rules_source = parser.add_mutually_exclusive_group()
    rules_source.add_argument(
        "-R",
        "--rules-dir",
        type=Path,
        default=None,
        help="Custom rules directory (loads only *.yaml files from this folder)",
    )
    rules_source.add_argument(
        "-f",
        "--rule-file",
        type=Path,
        action="append",
        default=None,
        help="Custom rule file path (repeat for multiple files)",
    )


def main(argv: list[str] | None = None) -> int:
    """CLI entrypoint."""
    parser = build_parser()
    args = parser.parse_args(argv)

    level = logging.DEBUG if args.verbose else logging.INFO
    logging.basicConfig(level=level, format="%(levelname)s %(name)s %(message)s")

    if args.command == "resolve":
        return handle_resolve(args)
    if args.command == "rules":
        return handle_rules(args)
    if args.command == "validate-rules":
        return handle_validate_rules(args)

    parser.error(f"Unsupported command: {args.command}")
    return 2


if __name__ == "__main__":
    raise SystemExit(main())
