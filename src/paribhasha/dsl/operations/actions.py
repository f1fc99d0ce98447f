"""Action strategies: turn a winning match into the result payload."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from paribhasha.constants.dsl_schema import ACTION_OVERRIDE_KEYS
from paribhasha.model import EvaluationContext, MatchResult, Words


def run_retain_selection(
    words: Words,
    context: EvaluationContext,
    match: MatchResult,
    params: Mapping[str, Any],
) -> dict[str, Any]:
    """Report retained and dropped members, plus any static overrides from the rule file."""
    retain = list(match.extracted.get("retain", ()))
    drop = list(match.extracted.get("drop", ()))
    payload: dict[str, Any] = {
        "retained_indices": retain,
        "retained_index": retain[-1] if retain else None,
        "dropped_indices": drop,
        "retained_forms": [words[i].surface or words[i].lemma for i in retain],
        "dropped_forms": [words[i].surface or words[i].lemma for i in drop],
        "optional": bool(params.get("optional", False)),
    }
    for key in sorted(ACTION_OVERRIDE_KEYS - {"optional"}):
        if key in params:
            payload[key] = params[key]
    return payload
