"""Shared helpers for engine test modules."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any

from paribhasha.engine import RuleRegistry
from paribhasha.model import (
    Action,
    EvaluationContext,
    MatchResult,
    Predicate,
    PredicateOutcome,
    PriorityClass,
    RuleDescriptor,
    WordRecord,
    Words,
)


def _always(confidence: float = 1.0, extracted: Mapping[str, Any] | None = None) -> Predicate:
    """Predicate that matches every input."""

    def predicate(words: Words, context: EvaluationContext) -> PredicateOutcome:
        return PredicateOutcome(matched=True, confidence=confidence, extracted=extracted or {})

    return predicate


def _never(reason: str = "no-match", near_miss: bool = False) -> Predicate:
    """Predicate that never matches."""

    def predicate(words: Words, context: EvaluationContext) -> PredicateOutcome:
        return PredicateOutcome.no_match(reason, near_miss=near_miss)

    return predicate


def _keep_last(words: Words, context: EvaluationContext, match: MatchResult) -> dict[str, Any]:
    last = len(words) - 1
    return {"retained_index": last, "retained_indices": [last], "dropped_indices": list(range(last))}


def _descriptor(
    rule_id: str = "1.1.1",
    priority_class: PriorityClass | str = PriorityClass.GENERAL,
    scope_tags: Iterable[str] = ("ekasesha",),
    predicate: Predicate | None = None,
    action: Action | None = None,
    **overrides: Any,
) -> RuleDescriptor:
    """Return a descriptor that matches everything unless told otherwise."""
    return RuleDescriptor(
        rule_id=rule_id,
        priority_class=priority_class,  # type: ignore[arg-type]
        scope_tags=frozenset(scope_tags),
        predicate=predicate or _always(),
        action=action or _keep_last,
        **overrides,
    )


def _registered(*descriptors: RuleDescriptor) -> dict[str, RuleDescriptor]:
    """Register *descriptors* in order and return them stamped, keyed by id."""
    registry = RuleRegistry(descriptors)
    return {descriptor.rule_id: descriptor for descriptor in registry}


def _words(*surfaces: str) -> Words:
    return tuple(WordRecord(index=i, surface=surface) for i, surface in enumerate(surfaces))
