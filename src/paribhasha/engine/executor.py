"""Invoke the winning rule's action to produce the domain payload."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

from paribhasha.constants.engine import DIAG_ACTION_FAILURE, RESERVED_ENVELOPE_KEYS
from paribhasha.model import Diagnostic, EvaluationContext, MatchResult, RuleDescriptor, Words

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Execution:
    """Action payload, or the diagnostic explaining why there is none."""

    payload: dict[str, Any] = field(default_factory=dict)
    diagnostic: Diagnostic | None = None

    @property
    def ok(self) -> bool:
        return self.diagnostic is None


class ActionExecutor:
    """Runs a descriptor's action and checks the payload shape."""

    def execute(
        self,
        descriptor: RuleDescriptor,
        words: Words,
        context: EvaluationContext,
        match: MatchResult,
    ) -> Execution:
        try:
            payload = descriptor.action(words, context, match)
        except Exception as exc:  # noqa: BLE001
            return _failed(descriptor.rule_id, f"{type(exc).__name__}: {exc}")

        if not isinstance(payload, Mapping):
            return _failed(descriptor.rule_id, f"action returned {type(payload).__name__}, expected a mapping")
        clashes = sorted(RESERVED_ENVELOPE_KEYS & set(payload))
        if clashes:
            return _failed(descriptor.rule_id, f"action payload shadows envelope keys: {', '.join(clashes)}")
        return Execution(payload=dict(payload))


def _failed(rule_id: str, message: str) -> Execution:
    logger.warning("Action for rule %s failed: %s", rule_id, message)
    return Execution(diagnostic=Diagnostic(DIAG_ACTION_FAILURE, rule_id, message))
