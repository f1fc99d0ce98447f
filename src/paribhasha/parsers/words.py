"""Normalize caller input into a tuple of word records.

Accepted shapes:

- ``"gajaḥ gajaḥ"`` or ``"gajaḥ+gajaḥ"``
- ``["gajaḥ", "gajaḥ"]``
- ``[{"surface": "गजः", "case": "nom"}, ...]``

Word records without a surface (``{"kinship": True}``) are accepted; only
surfaces that are present are script-validated.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from types import MappingProxyType
from typing import Any

from paribhasha.constants.scripts import ERROR_EMPTY, ERROR_TYPE, GENDER_ALIASES, WORD_SEPARATOR_PATTERN
from paribhasha.model import InputValidation, WordRecord
from paribhasha.types.common import InputErrorType, Script
from paribhasha.utils.naming import to_snake_case
from paribhasha.validation import validate_text

_FIELD_ALIASES: dict[str, str] = {
    "surface": "surface",
    "form": "surface",
    "lemma": "lemma",
    "base": "base",
    "case": "case",
    "vibhakti": "case",
    "gender": "gender",
    "linga": "gender",
    "category": "category",
}


@dataclass(frozen=True)
class PreparedInput:
    """Validated words plus the script they share (``None`` when mixed or absent)."""

    words: tuple[WordRecord, ...]
    validation: InputValidation
    script: Script | None = None


def prepare_input(raw: Any) -> PreparedInput:
    """Split, coerce and validate caller input."""
    if isinstance(raw, str):
        items: list[Any] = [token for token in WORD_SEPARATOR_PATTERN.split(raw.strip()) if token]
    elif isinstance(raw, Sequence) and not isinstance(raw, (bytes, bytearray)):
        items = list(raw)
    else:
        return _invalid(ERROR_TYPE, f"input must be a string or a sequence, got {type(raw).__name__}")

    if not items:
        return _invalid(ERROR_EMPTY, "input contains no words")

    words: list[WordRecord] = []
    scripts: set[str] = set()
    for index, item in enumerate(items):
        if isinstance(item, str):
            fields: dict[str, Any] = {"surface": item}
            flags: dict[str, Any] = {}
        elif isinstance(item, Mapping):
            fields, flags = _split_record(item)
        else:
            return _invalid(ERROR_TYPE, f"word {index} must be a string or a mapping, got {type(item).__name__}")

        surface = fields.get("surface")
        if surface is not None:
            check = validate_text(surface)
            if not check.is_valid:
                return PreparedInput(words=(), validation=check)
            scripts.add(check.script)  # type: ignore[arg-type]

        words.append(_build_word(index, fields, flags))

    script = scripts.pop() if len(scripts) == 1 else None
    return PreparedInput(words=tuple(words), validation=InputValidation(is_valid=True, script=script), script=script)


def _split_record(item: Mapping[str, Any]) -> tuple[dict[str, Any], dict[str, Any]]:
    fields: dict[str, Any] = {}
    flags: dict[str, Any] = {}
    for key, value in item.items():
        name = to_snake_case(str(key))
        target = _FIELD_ALIASES.get(name)
        if target is None:
            flags[name] = value
        elif value is not None and target not in fields:
            fields[target] = value
    return fields, flags


def _build_word(index: int, fields: dict[str, Any], flags: dict[str, Any]) -> WordRecord:
    gender = str(fields.get("gender", "")).strip().lower()
    return WordRecord(
        index=index,
        surface=str(fields.get("surface", "")).strip(),
        lemma=str(fields.get("lemma", "")).strip(),
        base=str(fields.get("base", "")).strip(),
        case=str(fields.get("case", "")).strip().lower(),
        gender=GENDER_ALIASES.get(gender, gender),
        category=str(fields.get("category", "")).strip().lower(),
        flags=MappingProxyType(flags),
    )


def _invalid(error_type: InputErrorType, message: str) -> PreparedInput:
    return PreparedInput(words=(), validation=InputValidation(is_valid=False, error_type=error_type, message=message))
