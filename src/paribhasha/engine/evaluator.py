"""Run candidate predicates and collect match results.

A predicate that raises, or returns something other than a well-formed
``PredicateOutcome``, is recorded as a ``predicate-failure`` diagnostic and
counted as a non-match. Evaluation of the remaining candidates continues.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass

from paribhasha.constants.engine import DEFAULT_MAX_CANDIDATES, DIAG_PREDICATE_FAILURE, REASON_PREDICATE_FAILURE
from paribhasha.exceptions import ConfigError, ResourceExhausted
from paribhasha.model import Diagnostic, EvaluationContext, MatchResult, PredicateOutcome, RuleDescriptor, Words

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Evaluation:
    """Every candidate's match result, in candidate order."""

    matches: tuple[MatchResult, ...]
    diagnostics: tuple[Diagnostic, ...] = ()

    @property
    def matched(self) -> tuple[MatchResult, ...]:
        return tuple(m for m in self.matches if m.matched)

    def first_near_miss(self) -> MatchResult | None:
        for match in self.matches:
            if not match.matched and match.near_miss:
                return match
        return None


class PredicateEvaluator:
    """Evaluates candidate rules against one normalized input."""

    def __init__(self, max_candidates: int = DEFAULT_MAX_CANDIDATES) -> None:
        if isinstance(max_candidates, bool) or not isinstance(max_candidates, int) or max_candidates <= 0:
            raise ConfigError("max_candidates must be a positive integer")
        self._max_candidates = max_candidates

    @property
    def max_candidates(self) -> int:
        return self._max_candidates

    def evaluate(
        self,
        candidates: tuple[RuleDescriptor, ...],
        words: Words,
        context: EvaluationContext,
    ) -> Evaluation:
        if len(candidates) > self._max_candidates:
            raise ResourceExhausted(len(candidates), self._max_candidates)

        matches: list[MatchResult] = []
        diagnostics: list[Diagnostic] = []
        for descriptor in candidates:
            try:
                outcome = descriptor.predicate(words, context)
            except Exception as exc:  # noqa: BLE001
                message = f"{type(exc).__name__}: {exc}"
                logger.warning("Predicate for rule %s failed: %s", descriptor.rule_id, message)
                diagnostics.append(Diagnostic(DIAG_PREDICATE_FAILURE, descriptor.rule_id, message))
                matches.append(MatchResult(rule_id=descriptor.rule_id, matched=False, reason=REASON_PREDICATE_FAILURE))
                continue

            problem = _outcome_problem(outcome)
            if problem is not None:
                logger.warning("Predicate for rule %s returned an invalid outcome: %s", descriptor.rule_id, problem)
                diagnostics.append(Diagnostic(DIAG_PREDICATE_FAILURE, descriptor.rule_id, problem))
                matches.append(MatchResult(rule_id=descriptor.rule_id, matched=False, reason=REASON_PREDICATE_FAILURE))
                continue

            matches.append(
                MatchResult(
                    rule_id=descriptor.rule_id,
                    matched=outcome.matched,
                    confidence=float(outcome.confidence) if outcome.matched else 0.0,
                    extracted=outcome.extracted,
                    reason=outcome.reason,
                    near_miss=outcome.near_miss and not outcome.matched,
                )
            )

        return Evaluation(matches=tuple(matches), diagnostics=tuple(diagnostics))


def _outcome_problem(outcome: object) -> str | None:
    """Describe why *outcome* is not a usable ``PredicateOutcome``, or ``None``."""
    if not isinstance(outcome, PredicateOutcome):
        return f"expected PredicateOutcome, got {type(outcome).__name__}"
    if not isinstance(outcome.matched, bool):
        return "matched must be a boolean"
    confidence = outcome.confidence
    if isinstance(confidence, bool) or not isinstance(confidence, (int, float)) or math.isnan(confidence):
        return "confidence must be a number"
    if outcome.matched and not 0.0 <= confidence <= 1.0:
        return f"confidence {confidence} outside 0..1"
    return None
