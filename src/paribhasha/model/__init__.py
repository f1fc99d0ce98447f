"""Core data models for paribhasha."""

from .entities import (
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
from .results import Diagnostic, InputValidation, ResolutionResult, TraceEntry

__all__ = [
    "Action",
    "Diagnostic",
    "EvaluationContext",
    "InputValidation",
    "MatchResult",
    "Predicate",
    "PredicateOutcome",
    "PriorityClass",
    "ResolutionResult",
    "RuleDescriptor",
    "TraceEntry",
    "WordRecord",
    "Words",
]
