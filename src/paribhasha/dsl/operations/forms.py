"""Identical-form retention (sarūpa ekaśeṣa)."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from paribhasha.dsl.operations.shared import has_min_words, selection
from paribhasha.model import EvaluationContext, PredicateOutcome, Words


def run_identical_forms(words: Words, context: EvaluationContext, params: Mapping[str, Any]) -> PredicateOutcome:
    """Keep the last of two or more identical surfaces.

    When the context flag named by ``case_check_flag`` is set, every word
    that declares a case must declare the same one.
    """
    if not has_min_words(words, params):
        return PredicateOutcome.no_match("insufficient-forms")

    if context.is_set(params.get("case_check_flag", "force_case_check")):
        cases = [word.case for word in words if word.case]
        if cases and any(case != cases[0] for case in cases[1:]):
            return PredicateOutcome.no_match("case-mismatch", near_miss=True)

    forms = [word.form for word in words]
    if not forms[0] or any(form != forms[0] for form in forms[1:]):
        return PredicateOutcome.no_match("form-mismatch")

    last = len(words) - 1
    return PredicateOutcome(matched=True, extracted=selection([last], range(last)))
