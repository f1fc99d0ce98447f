"""Attribute-driven retention: gender, gotra category and context-gated selection."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from paribhasha.dsl.operations.shared import group_by_base, has_min_words, selection, word_matches
from paribhasha.model import EvaluationContext, PredicateOutcome, Words


def run_attribute_pairing(words: Words, context: EvaluationContext, params: Mapping[str, Any]) -> PredicateOutcome:
    """Within each base group holding both a ``retain`` word and an ``against`` counterpart,
    keep the last ``retain`` word and drop the rest of the group."""
    if not has_min_words(words, params):
        return PredicateOutcome.no_match("insufficient-forms")

    retain_criteria = params["retain"]
    against_criteria = params["against"]
    retain: set[int] = set()
    drop: set[int] = set()
    for group in group_by_base(words):
        keepers = [word for word in group if word_matches(word, retain_criteria)]
        counterparts = [
            word for word in group if word not in keepers and word_matches(word, against_criteria)
        ]
        if keepers and counterparts:
            keep = keepers[-1].index
            retain.add(keep)
            drop.update(word.index for word in group if word.index != keep)

    if not retain:
        return PredicateOutcome.no_match()
    return PredicateOutcome(matched=True, extracted=selection(retain, drop))


def run_attribute_selection(words: Words, context: EvaluationContext, params: Mapping[str, Any]) -> PredicateOutcome:
    """Keep the last word matching ``retain`` and drop every other word."""
    if not has_min_words(words, params):
        return PredicateOutcome.no_match("insufficient-forms")

    keepers = [word for word in words if word_matches(word, params["retain"])]
    if not keepers:
        return PredicateOutcome.no_match()
    keep = keepers[-1].index
    return PredicateOutcome(matched=True, extracted=selection([keep], (word.index for word in words)))
