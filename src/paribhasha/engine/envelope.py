"""Builders for the uniform ``ResolutionResult`` envelope."""

from __future__ import annotations

from typing import Any

from paribhasha.constants.engine import REASON_ACTION_FAILURE, REASON_INVALID_INPUT, REASON_NO_RULE
from paribhasha.engine.evaluator import Evaluation
from paribhasha.model import Diagnostic, InputValidation, MatchResult, ResolutionResult, RuleDescriptor, TraceEntry
from paribhasha.types.common import Script


def invalid_input_result(validation: InputValidation) -> ResolutionResult:
    return ResolutionResult(
        applied=False,
        sutra=None,
        reason=REASON_INVALID_INPUT,
        error=validation.error_type,
        explanation=validation.message,
        script=validation.script,
    )


def no_rule_result(evaluation: Evaluation, *, script: Script | None) -> ResolutionResult:
    """No candidate matched. Report the first near miss in candidate order.

    Candidates are ordered by priority class, then declaration, so a near
    miss of a higher class outranks an earlier-declared lower one.
    """
    near_miss = evaluation.first_near_miss()
    if near_miss is not None and near_miss.reason:
        reason = near_miss.reason
        explanation = f"Rule {near_miss.rule_id} did not apply: {near_miss.reason}"
    else:
        reason = REASON_NO_RULE
        explanation = "No rule applied"
    return ResolutionResult(
        applied=False,
        sutra=None,
        reason=reason,
        explanation=explanation,
        script=script,
        diagnostics=evaluation.diagnostics,
    )


def applied_result(
    descriptor: RuleDescriptor,
    match: MatchResult,
    payload: dict[str, Any],
    *,
    trace: tuple[TraceEntry, ...],
    diagnostics: tuple[Diagnostic, ...],
    script: Script | None,
) -> ResolutionResult:
    return ResolutionResult(
        applied=True,
        sutra=descriptor.rule_id,
        reason=match.reason or descriptor.reason,
        mandatory=descriptor.mandatory,
        confidence=match.confidence,
        priority_class=descriptor.priority_class.value,
        explanation=descriptor.description or descriptor.title,
        script=script,
        payload=payload,
        trace=trace,
        diagnostics=diagnostics,
    )


def action_failure_result(
    descriptor: RuleDescriptor,
    *,
    trace: tuple[TraceEntry, ...],
    diagnostics: tuple[Diagnostic, ...],
    script: Script | None,
) -> ResolutionResult:
    return ResolutionResult(
        applied=False,
        sutra=None,
        reason=REASON_ACTION_FAILURE,
        explanation=f"Rule {descriptor.rule_id} governs but its action failed",
        script=script,
        trace=trace,
        diagnostics=diagnostics,
    )
