"""Engine defaults, reason strings, and diagnostic codes."""

from __future__ import annotations

import re
from re import Pattern

from paribhasha.types.common import TieBreakPolicy

RULE_ID_PATTERN: Pattern[str] = re.compile(r"^\d+(?:\.\d+)+$")

DEFAULT_MAX_CANDIDATES: int = 64

TIE_BREAK_CONFIDENCE_FIRST: TieBreakPolicy = "confidence-first"
TIE_BREAK_DECLARATION_FIRST: TieBreakPolicy = "declaration-first"
DEFAULT_TIE_BREAK: TieBreakPolicy = TIE_BREAK_CONFIDENCE_FIRST
VALID_TIE_BREAKS: frozenset[TieBreakPolicy] = frozenset({TIE_BREAK_CONFIDENCE_FIRST, TIE_BREAK_DECLARATION_FIRST})

REASON_RULE_APPLIED: str = "rule-applied"
REASON_NO_RULE: str = "no-rule-applies"
REASON_NO_MATCH: str = "no-match"
REASON_INVALID_INPUT: str = "invalid-input"
REASON_ACTION_FAILURE: str = "action-failure"
REASON_PREDICATE_FAILURE: str = "predicate-failure"
REASON_CONTEXT_GATE: str = "context-gate"

DIAG_PREDICATE_FAILURE: str = "predicate-failure"
DIAG_ACTION_FAILURE: str = "action-failure"

# Envelope keys an action payload may not shadow.
RESERVED_ENVELOPE_KEYS: frozenset[str] = frozenset(
    {
        "applied",
        "sutra",
        "mandatory",
        "reason",
        "confidence",
        "priority_class",
        "explanation",
        "script",
        "error",
        "trace",
        "diagnostics",
    }
)
