"""Shared helpers used across rule operation modules."""

from __future__ import annotations

from collections.abc import Iterable, Mapping, Sequence
from functools import lru_cache
from typing import Any

from paribhasha.constants.context import FAMILY_MIN_WORDS
from paribhasha.constants.scripts import SCRIPT_TABLE_KEYS
from paribhasha.model import EvaluationContext, WordRecord, Words
from paribhasha.parsers.script import detect_script
from paribhasha.utils.naming import normalize_form


@lru_cache(maxsize=512)
def _normalized_set(values: tuple[str, ...]) -> frozenset[str]:
    return frozenset(normalize_form(value) for value in values)


def lexicon_contains(table: Mapping[str, Sequence[str]], word: WordRecord) -> bool:
    """True when the word's surface or lemma is listed under its own script in *table*."""
    for form in word.forms:
        key = SCRIPT_TABLE_KEYS.get(detect_script(form))
        if key is not None and form in _normalized_set(tuple(table.get(key, ()))):
            return True
    return False


def value_matches(actual: Any, expected: Any) -> bool:
    """Compare a word or context value against a rule-file literal."""
    if isinstance(expected, list):
        return any(value_matches(actual, option) for option in expected)
    if isinstance(expected, bool):
        return bool(actual) is expected
    if actual is None:
        return False
    return normalize_form(str(actual)) == normalize_form(str(expected))


def word_matches(word: WordRecord, criteria: Mapping[str, Any]) -> bool:
    """Every key in *criteria* must hold. ``{key: {not: v}}`` requires presence and inequality."""
    for key, expected in criteria.items():
        actual = word.get(key)
        if isinstance(expected, Mapping):
            if actual is None or value_matches(actual, expected.get("not")):
                return False
        elif not value_matches(actual, expected):
            return False
    return True


def context_satisfies(
    context: EvaluationContext,
    require: Mapping[str, Any],
    forbid: Mapping[str, Any],
) -> bool:
    if any(not value_matches(context.get(key), expected) for key, expected in require.items()):
        return False
    return not any(value_matches(context.get(key), banned) for key, banned in forbid.items())


def has_min_words(words: Words, params: Mapping[str, Any]) -> bool:
    return len(words) >= int(params.get("min_words", FAMILY_MIN_WORDS))


def selection(retain: Iterable[int], drop: Iterable[int]) -> dict[str, tuple[int, ...]]:
    """Extracted-features shape shared by every retention strategy."""
    kept = set(retain)
    return {"retain": tuple(sorted(kept)), "drop": tuple(sorted(set(drop) - kept))}


def group_by_base(words: Words) -> list[list[WordRecord]]:
    """Counterpart groups keyed by base (or surface), in first-seen order."""
    groups: dict[str, list[WordRecord]] = {}
    for word in words:
        groups.setdefault(word.group_key, []).append(word)
    return list(groups.values())
