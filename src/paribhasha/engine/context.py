"""Scope-tag satisfaction for one call."""

from __future__ import annotations

from collections.abc import Iterable

from paribhasha.constants.context import FAMILY_MIN_WORDS, FAMILY_TAG, TAG_ALIASES
from paribhasha.model import EvaluationContext, Words


def derive_active_tags(words: Words, context: EvaluationContext, tags: Iterable[str]) -> frozenset[str]:
    """Return the subset of *tags* satisfied by the words and context of a call."""
    active: set[str] = set()
    for tag in tags:
        if tag == FAMILY_TAG:
            if len(words) >= FAMILY_MIN_WORDS:
                active.add(tag)
            continue
        keys = (tag, *TAG_ALIASES.get(tag, ()))
        if any(context.is_set(key) for key in keys) or any(word.has(key) for word in words for key in keys):
            active.add(tag)
    return frozenset(active)


def specificity(scope_tags: frozenset[str], active_tags: frozenset[str]) -> int:
    """Number of a rule's scope tags satisfied by the call."""
    return len(scope_tags & active_tags)
