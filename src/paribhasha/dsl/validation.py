"""Collect-all validation for rule sources.

Returns a list of :class:`ValidationError` instances rather than raising,
so callers can report every problem in one pass.
"""

from __future__ import annotations

from pathlib import Path

import yaml

from paribhasha.constants.dsl_schema import RULE_FILE_SUFFIX
from paribhasha.constants.validation import RULE001, RULE002, RULE003, RULE004, RULE005, RULE006, RULE007
from paribhasha.dsl.loader import RULES_DIR
from paribhasha.dsl.schema import validate_rule
from paribhasha.exceptions.dsl import RuleSchemaError
from paribhasha.exceptions.validation import ValidationError


def validate_rule_sources(
    rules_dir: Path | None = None,
    rule_files: tuple[Path, ...] | None = None,
) -> list[ValidationError]:
    """Validate rule sources and return all validation errors.

    Without a custom source the bundled pack is checked. When both
    *rules_dir* and *rule_files* are given a single ``RULE007`` conflict
    error is returned immediately.
    """
    errors: list[ValidationError] = []

    if rules_dir is not None and rule_files is not None:
        errors.append(
            ValidationError(
                code=RULE007,
                path="",
                field="",
                message="rules source conflict: choose either --rules-dir or --rule-file, not both",
            )
        )
        return errors

    if rule_files is not None:
        paths = _resolve_explicit_files(rule_files, errors)
    else:
        paths = _resolve_rules_dir(rules_dir if rules_dir is not None else RULES_DIR, errors)

    loaded_sources: dict[str, str] = {}
    for path in paths:
        _validate_single_rule(path, errors, loaded_sources)
    return errors


def _resolve_explicit_files(rule_files: tuple[Path, ...], errors: list[ValidationError]) -> list[Path]:
    paths: list[Path] = []
    for rule_file in rule_files:
        resolved = rule_file.resolve()
        if not resolved.is_file():
            errors.append(
                ValidationError(code=RULE001, path=str(resolved), field="", message=f"rule file not found: {resolved}")
            )
            continue
        if resolved.suffix.lower() != RULE_FILE_SUFFIX:
            errors.append(
                ValidationError(
                    code=RULE002,
                    path=str(resolved),
                    field="",
                    message=f"rule file must use {RULE_FILE_SUFFIX} extension: {resolved.name}",
                    hint=f"rename the file to use a {RULE_FILE_SUFFIX} extension",
                )
            )
            continue
        paths.append(resolved)
    return paths


def _resolve_rules_dir(rules_dir: Path, errors: list[ValidationError]) -> list[Path]:
    resolved = rules_dir.resolve()
    if not resolved.is_dir():
        errors.append(
            ValidationError(code=RULE001, path=str(resolved), field="", message=f"rules directory not found: {resolved}")
        )
        return []
    return sorted(resolved.glob(f"*{RULE_FILE_SUFFIX}"))


def _validate_single_rule(path: Path, errors: list[ValidationError], loaded_sources: dict[str, str]) -> None:
    path_str = str(path)
    try:
        raw = yaml.safe_load(path.read_text(encoding="utf-8"))
    except OSError as exc:
        errors.append(
            ValidationError(code=RULE001, path=path_str, field="", message=f"failed to read rule file: {exc}")
        )
        return
    except yaml.YAMLError as exc:
        detail = " ".join(str(exc).split())
        errors.append(ValidationError(code=RULE003, path=path_str, field="", message=f"invalid YAML: {detail}"))
        return

    if not isinstance(raw, dict):
        errors.append(
            ValidationError(
                code=RULE004,
                path=path_str,
                field="",
                message=f"rule must be a mapping, got {type(raw).__name__}",
            )
        )
        return

    try:
        validate_rule(raw, path_str)
    except RuleSchemaError as exc:
        message = str(exc).removeprefix(f"{path_str}: ")
        errors.append(ValidationError(code=RULE005, path=path_str, field="", message=message))
        return

    rule_id = raw["rule_id"]
    previous = loaded_sources.get(rule_id)
    if previous is not None:
        errors.append(
            ValidationError(
                code=RULE006,
                path=path_str,
                field="rule_id",
                message=f"duplicate rule_id `{rule_id}` (first defined in {previous})",
                hint="give each rule file a distinct rule_id",
            )
        )
        return
    loaded_sources[rule_id] = path_str
