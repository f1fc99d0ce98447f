"""CLI subcommand handlers."""

from __future__ import annotations

import argparse
import json
import sys
from dataclasses import replace
from pathlib import Path
from typing import Any

from paribhasha.config import EngineConfig, load_config
from paribhasha.dsl.validation import validate_rule_sources
from paribhasha.engine import SutraEngine
from paribhasha.exceptions import ConfigError, ParibhashaError
from paribhasha.exceptions.validation import format_errors


def handle_resolve(args: argparse.Namespace) -> int:
    """Resolve one word group and print the envelope as JSON."""
    try:
        words = _parse_words(args.words, json_input=args.json_input)
        context = _parse_context(args.context)
        engine = SutraEngine.from_config(_engine_config(args))
    except ConfigError as exc:
        print(f"Configuration error: {exc}", file=sys.stderr)
        return 2

    try:
        result = engine.resolve(words, context, scope=args.scope)
    except ParibhashaError as exc:
        print(f"Engine error: {exc}", file=sys.stderr)
        return 1

    print(json.dumps(result.to_dict(), ensure_ascii=False, indent=2))
    return 0


def handle_rules(args: argparse.Namespace) -> int:
    """Print the loaded rule catalog in declaration order."""
    try:
        engine = SutraEngine.from_config(_engine_config(args))
    except ConfigError as exc:
        print(f"Configuration error: {exc}", file=sys.stderr)
        return 2

    registry = engine.registry
    for descriptor in registry:
        tags = ",".join(sorted(descriptor.scope_tags))
        print(f"{descriptor.rule_id:<8} {descriptor.priority_class.value:<18} {tags:<32} {descriptor.title}")
    print(f"{len(registry)} rule(s), fingerprint {registry.fingerprint()[:16]}")
    return 0


def handle_validate_rules(args: argparse.Namespace) -> int:
    """Run collect-all rule validation and report results."""
    errors = validate_rule_sources(rules_dir=args.rules_dir, rule_files=_rule_files(args))
    if errors:
        print(format_errors(errors), file=sys.stderr)
        return 2

    print("Rules are valid.")
    return 0


def _engine_config(args: argparse.Namespace) -> EngineConfig:
    """Config file settings, with rule sources from the command line taking precedence."""
    config = load_config(Path.cwd(), args.config)
    rule_files = _rule_files(args)
    if args.rules_dir is not None:
        return replace(config, rules_dir=args.rules_dir, rule_files=None)
    if rule_files is not None:
        return replace(config, rules_dir=None, rule_files=rule_files)
    return config


def _rule_files(args: argparse.Namespace) -> tuple[Path, ...] | None:
    return tuple(args.rule_file) if args.rule_file else None


def _parse_words(tokens: list[str], *, json_input: bool) -> Any:
    if not json_input:
        return list(tokens)
    try:
        return json.loads(" ".join(tokens))
    except json.JSONDecodeError as exc:
        raise ConfigError(f"--json-input is not valid JSON: {exc}") from exc


def _parse_context(raw: str | None) -> dict[str, Any] | None:
    if raw is None:
        return None
    try:
        context = json.loads(raw)
    except json.JSONDecodeError as exc:
        raise ConfigError(f"--context is not valid JSON: {exc}") from exc
    if not isinstance(context, dict):
        raise ConfigError("--context must be a JSON object")
    return context
