"""Strict schema validation for v1 sutra rule files.

Validates parsed YAML dicts at load time. Raises RuleSchemaError on the
first violation; nothing is skipped.
"""

from __future__ import annotations

from typing import Any

from paribhasha.constants.dsl_schema import (
    ACTION_OVERRIDE_KEYS,
    ALLOWED_CONTEXT_KEYS,
    ALLOWED_MATCH_PARAMS,
    ALLOWED_METADATA_KEYS,
    ALLOWED_TOP_KEYS,
    REQUIRED_MATCH_PARAMS,
    REQUIRED_METADATA_KEYS,
    REQUIRED_TOP_KEYS,
    VALID_ACTION_STRATEGIES,
    VALID_LEXICON_SCRIPTS,
    VALID_PREDICATE_STRATEGIES,
    VALID_PRIORITY_CLASSES,
)
from paribhasha.constants.engine import RULE_ID_PATTERN
from paribhasha.exceptions.dsl import RuleSchemaError
from paribhasha.utils.naming import to_snake_case


def validate_rule(data: dict[str, Any], source_path: str) -> None:
    """Validate a YAML rule dict. Raises RuleSchemaError on any violation."""
    if not isinstance(data, dict):
        raise RuleSchemaError(f"{source_path}: rule must be a mapping, got {type(data).__name__}")

    unknown_top = set(data.keys()) - ALLOWED_TOP_KEYS
    if unknown_top:
        raise RuleSchemaError(f"{source_path}: unknown top-level keys: {sorted(unknown_top)}")

    for key in sorted(REQUIRED_TOP_KEYS):
        if key not in data:
            raise RuleSchemaError(f"{source_path}: missing required key '{key}'")

    _validate_rule_id(data["rule_id"], source_path)
    _validate_version(data["version"], source_path)
    _validate_priority_class(data["priority_class"], source_path)
    _validate_scope_tags(data["scope_tags"], source_path)
    _validate_metadata(data["metadata"], source_path)
    if "context" in data:
        _validate_context(data["context"], source_path)
    _validate_match(data["match"], source_path)
    _validate_action(data["action"], source_path)


def _validate_rule_id(value: Any, path: str) -> None:
    if not isinstance(value, str) or not RULE_ID_PATTERN.match(value):
        raise RuleSchemaError(f"{path}: 'rule_id' must be a quoted dotted numeral like \"1.2.64\", got {value!r}")


def _validate_version(value: Any, path: str) -> None:
    if not isinstance(value, int) or isinstance(value, bool) or value != 1:
        raise RuleSchemaError(f"{path}: 'version' must be 1, got {value!r}")


def _validate_priority_class(value: Any, path: str) -> None:
    if not isinstance(value, str) or to_snake_case(value) not in VALID_PRIORITY_CLASSES:
        raise RuleSchemaError(
            f"{path}: priority_class must be one of {sorted(VALID_PRIORITY_CLASSES)}, got {value!r}"
        )


def _validate_scope_tags(value: Any, path: str) -> None:
    if not isinstance(value, list) or not value:
        raise RuleSchemaError(f"{path}: 'scope_tags' must be a non-empty list")
    for tag in value:
        if not isinstance(tag, str) or not tag.strip():
            raise RuleSchemaError(f"{path}: scope_tags entries must be non-empty strings, got {tag!r}")


def _validate_metadata(metadata: Any, path: str) -> None:
    if not isinstance(metadata, dict):
        raise RuleSchemaError(f"{path}: 'metadata' must be a mapping")

    unknown = set(metadata.keys()) - ALLOWED_METADATA_KEYS
    if unknown:
        raise RuleSchemaError(f"{path}: unknown metadata keys: {sorted(unknown)}")

    for key in sorted(REQUIRED_METADATA_KEYS):
        if key not in metadata:
            raise RuleSchemaError(f"{path}: metadata missing required key '{key}'")

    for key in ("title", "description", "text", "reason"):
        if key in metadata and (not isinstance(metadata[key], str) or not metadata[key].strip()):
            raise RuleSchemaError(f"{path}: metadata.{key} must be a non-empty string")

    confidence = metadata["confidence"]
    if isinstance(confidence, bool) or not isinstance(confidence, (int, float)) or not 0.0 <= confidence <= 1.0:
        raise RuleSchemaError(f"{path}: metadata.confidence must be a number in [0, 1], got {confidence!r}")


def _validate_context(context: Any, path: str) -> None:
    if not isinstance(context, dict):
        raise RuleSchemaError(f"{path}: 'context' must be a mapping")
    unknown = set(context.keys()) - ALLOWED_CONTEXT_KEYS
    if unknown:
        raise RuleSchemaError(f"{path}: unknown context keys: {sorted(unknown)}")
    for key in sorted(context):
        if not isinstance(context[key], dict):
            raise RuleSchemaError(f"{path}: context.{key} must be a mapping of flag to value")


def _validate_match(match: Any, path: str) -> None:
    if not isinstance(match, dict):
        raise RuleSchemaError(f"{path}: 'match' must be a mapping")
    if "strategy" not in match:
        raise RuleSchemaError(f"{path}: match missing 'strategy'")
    strategy = match["strategy"]
    if strategy not in VALID_PREDICATE_STRATEGIES:
        raise RuleSchemaError(
            f"{path}: match.strategy must be one of {sorted(VALID_PREDICATE_STRATEGIES)}, got {strategy!r}"
        )

    unknown = set(match) - ALLOWED_MATCH_PARAMS[strategy]
    if unknown:
        raise RuleSchemaError(f"{path}: unknown match keys for strategy '{strategy}': {sorted(unknown)}")

    for key in sorted(REQUIRED_MATCH_PARAMS[strategy]):
        if key not in match:
            raise RuleSchemaError(f"{path}: match strategy '{strategy}' requires '{key}'")

    if "flag_confidence" in match:
        if "flag" not in match:
            raise RuleSchemaError(f"{path}: match.flag_confidence requires match.flag")
        flag_confidence = match["flag_confidence"]
        if (
            isinstance(flag_confidence, bool)
            or not isinstance(flag_confidence, (int, float))
            or not 0.0 <= flag_confidence <= 1.0
        ):
            raise RuleSchemaError(
                f"{path}: match.flag_confidence must be a number in [0, 1], got {flag_confidence!r}"
            )

    if "min_words" in match:
        min_words = match["min_words"]
        if isinstance(min_words, bool) or not isinstance(min_words, int) or min_words < 1:
            raise RuleSchemaError(f"{path}: match.min_words must be a positive integer, got {min_words!r}")

    for key in ("flag", "case_check_flag"):
        if key in match and (not isinstance(match[key], str) or not match[key].strip()):
            raise RuleSchemaError(f"{path}: match.{key} must be a non-empty string")

    for key in ("retain", "against"):
        if key in match and (not isinstance(match[key], dict) or not match[key]):
            raise RuleSchemaError(f"{path}: match.{key} must be a non-empty mapping of attribute filters")

    if "pairs" in match:
        pairs = match["pairs"]
        if not isinstance(pairs, list) or not pairs:
            raise RuleSchemaError(f"{path}: match.pairs must be a non-empty list")
        for i, pair in enumerate(pairs):
            if not isinstance(pair, dict) or set(pair) != {"retain", "drop"}:
                raise RuleSchemaError(f"{path}: match.pairs[{i}] must have exactly 'retain' and 'drop'")
            _validate_lexicon(pair["retain"], f"match.pairs[{i}].retain", path)
            _validate_lexicon(pair["drop"], f"match.pairs[{i}].drop", path)

    if "series" in match:
        _validate_lexicon(match["series"], "match.series", path)
    if strategy == "series_retention" and "series" not in match and "flag" not in match:
        raise RuleSchemaError(f"{path}: match strategy 'series_retention' requires 'series' or 'flag'")


def _validate_lexicon(table: Any, field: str, path: str) -> None:
    if not isinstance(table, dict) or not table:
        raise RuleSchemaError(f"{path}: {field} must be a mapping of script to word list")
    unknown = set(table) - VALID_LEXICON_SCRIPTS
    if unknown:
        raise RuleSchemaError(f"{path}: {field} has unknown scripts: {sorted(unknown)}")
    for script, entries in table.items():
        if not isinstance(entries, list) or not all(isinstance(e, str) and e.strip() for e in entries):
            raise RuleSchemaError(f"{path}: {field}.{script} must be a list of non-empty strings")


def _validate_action(action: Any, path: str) -> None:
    if not isinstance(action, dict):
        raise RuleSchemaError(f"{path}: 'action' must be a mapping")
    if "strategy" not in action:
        raise RuleSchemaError(f"{path}: action missing 'strategy'")
    if action["strategy"] not in VALID_ACTION_STRATEGIES:
        raise RuleSchemaError(
            f"{path}: action.strategy must be one of {sorted(VALID_ACTION_STRATEGIES)}, got {action['strategy']!r}"
        )
    unknown = set(action) - ACTION_OVERRIDE_KEYS - {"strategy"}
    if unknown:
        raise RuleSchemaError(f"{path}: unknown action keys: {sorted(unknown)}")
    if "optional" in action and not isinstance(action["optional"], bool):
        raise RuleSchemaError(f"{path}: action.optional must be a boolean")
    for key in ("domain", "gender_override", "number_override"):
        if key in action and (not isinstance(action[key], str) or not action[key].strip()):
            raise RuleSchemaError(f"{path}: action.{key} must be a non-empty string")
