"""Tests for predicate evaluation, failure recovery and the candidate ceiling."""

from __future__ import annotations

import logging

import pytest

from paribhasha.engine.evaluator import PredicateEvaluator
from paribhasha.exceptions import ConfigError, ResourceExhausted
from paribhasha.model import EvaluationContext, PredicateOutcome

from .conftest import _always, _descriptor, _never, _words


def _boom(words, context):  # type: ignore[no-untyped-def]
    raise KeyError("surface")


def test_evaluate_collects_results_in_candidate_order() -> None:
    candidates = (
        _descriptor("1.2.65", predicate=_never()),
        _descriptor("1.2.64", predicate=_always(0.8, {"retain": (1,)})),
    )

    evaluation = PredicateEvaluator().evaluate(candidates, _words("gajaḥ", "gajaḥ"), EvaluationContext())

    assert [m.rule_id for m in evaluation.matches] == ["1.2.65", "1.2.64"]
    assert [m.rule_id for m in evaluation.matched] == ["1.2.64"]
    assert evaluation.matched[0].confidence == 0.8
    assert evaluation.matched[0].extracted == {"retain": (1,)}
    assert evaluation.diagnostics == ()


def test_raising_predicate_becomes_diagnostic(caplog: pytest.LogCaptureFixture) -> None:
    """A failing predicate is recorded and evaluation continues."""
    candidates = (_descriptor("1.2.65", predicate=_boom), _descriptor("1.2.64"))

    with caplog.at_level(logging.WARNING, logger="paribhasha.engine.evaluator"):
        evaluation = PredicateEvaluator().evaluate(candidates, _words("gajaḥ", "gajaḥ"), EvaluationContext())

    assert [m.rule_id for m in evaluation.matched] == ["1.2.64"]
    failed = evaluation.matches[0]
    assert not failed.matched
    assert failed.reason == "predicate-failure"
    assert len(evaluation.diagnostics) == 1
    diagnostic = evaluation.diagnostics[0]
    assert diagnostic.code == "predicate-failure"
    assert diagnostic.rule_id == "1.2.65"
    assert "KeyError" in diagnostic.message
    assert "Predicate for rule 1.2.65 failed" in caplog.text


@pytest.mark.parametrize(
    "returned",
    [
        True,
        {"matched": True},
        PredicateOutcome(matched=True, confidence=1.5),
        PredicateOutcome(matched=True, confidence=float("nan")),
        PredicateOutcome(matched="yes"),  # type: ignore[arg-type]
    ],
    ids=["bool", "dict", "confidence_above_one", "nan_confidence", "non_bool_matched"],
)
def test_malformed_outcome_becomes_diagnostic(returned: object) -> None:
    candidates = (_descriptor("1.2.64", predicate=lambda words, context: returned),)

    evaluation = PredicateEvaluator().evaluate(candidates, _words("gajaḥ"), EvaluationContext())

    assert evaluation.matched == ()
    assert [d.code for d in evaluation.diagnostics] == ["predicate-failure"]


def test_non_match_confidence_is_zeroed() -> None:
    candidates = (_descriptor("1.2.64", predicate=lambda words, context: PredicateOutcome(matched=False)),)

    evaluation = PredicateEvaluator().evaluate(candidates, _words("gajaḥ"), EvaluationContext())

    assert evaluation.matches[0].confidence == 0.0


def test_first_near_miss_follows_candidate_order() -> None:
    candidates = (
        _descriptor("1.2.65", predicate=_never("form-mismatch")),
        _descriptor("1.2.66", predicate=_never("case-mismatch", near_miss=True)),
        _descriptor("1.2.67", predicate=_never("gender-mismatch", near_miss=True)),
    )

    evaluation = PredicateEvaluator().evaluate(candidates, _words("gajaḥ"), EvaluationContext())

    near_miss = evaluation.first_near_miss()
    assert near_miss is not None
    assert near_miss.rule_id == "1.2.66"
    assert near_miss.reason == "case-mismatch"


def test_evaluate_enforces_candidate_ceiling() -> None:
    candidates = tuple(_descriptor(f"1.2.{n}") for n in range(64, 68))

    with pytest.raises(ResourceExhausted) as excinfo:
        PredicateEvaluator(max_candidates=3).evaluate(candidates, _words("gajaḥ"), EvaluationContext())

    assert excinfo.value.candidate_count == 4
    assert excinfo.value.ceiling == 3


@pytest.mark.parametrize("ceiling", [0, -1, True, "64"])
def test_evaluator_rejects_invalid_ceiling(ceiling: object) -> None:
    with pytest.raises(ConfigError, match="max_candidates"):
        PredicateEvaluator(max_candidates=ceiling)  # type: ignore[arg-type]
