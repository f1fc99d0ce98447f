"""Lexicon-driven retention: kinship pairs and pronoun series."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from paribhasha.dsl.operations.shared import has_min_words, lexicon_contains, selection
from paribhasha.model import EvaluationContext, PredicateOutcome, Words


def run_lexical_retention(words: Words, context: EvaluationContext, params: Mapping[str, Any]) -> PredicateOutcome:
    """For each ``retain``/``drop`` lexicon pair present together, keep the last retain-word.

    The optional ``flag`` applies only to groups without any surface or
    lemma: the last flagged word is retained over the rest. Words with a
    form are decided by the lexicon alone.
    """
    if not has_min_words(words, params):
        return PredicateOutcome.no_match("insufficient-forms")

    retain: set[int] = set()
    drop: set[int] = set()
    for pair in params.get("pairs", ()):
        keepers = [word for word in words if lexicon_contains(pair["retain"], word)]
        dropped = [word for word in words if lexicon_contains(pair["drop"], word)]
        if keepers and dropped:
            retain.add(keepers[-1].index)
            drop.update(word.index for word in dropped)
    if retain:
        return PredicateOutcome(matched=True, extracted=selection(retain, drop))

    flag = params.get("flag")
    if flag and not any(word.forms for word in words):
        flagged = [word for word in words if word.has(flag)]
        if flagged:
            keep = flagged[-1].index
            return PredicateOutcome(
                matched=True,
                confidence=float(params.get("flag_confidence", 1.0)),
                extracted=selection([keep], (word.index for word in words)),
            )
    return PredicateOutcome.no_match()


def run_series_retention(words: Words, context: EvaluationContext, params: Mapping[str, Any]) -> PredicateOutcome:
    """Retain every member of a closed series (lexicon or ``flag``) and drop the rest."""
    if not has_min_words(words, params):
        return PredicateOutcome.no_match("insufficient-forms")

    series = params.get("series", {})
    flag = params.get("flag")
    members = [
        word.index
        for word in words
        if lexicon_contains(series, word) or (flag is not None and word.has(flag))
    ]
    if not members:
        return PredicateOutcome.no_match()
    return PredicateOutcome(matched=True, extracted=selection(members, (word.index for word in words)))
