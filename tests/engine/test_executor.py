"""Tests for action execution and payload checks."""

from __future__ import annotations

import pytest

from paribhasha.engine.executor import ActionExecutor
from paribhasha.model import EvaluationContext, MatchResult

from .conftest import _descriptor, _words


def _run(action):  # type: ignore[no-untyped-def]
    descriptor = _descriptor("1.2.64", action=action)
    return ActionExecutor().execute(
        descriptor, _words("gajaḥ", "gajaḥ"), EvaluationContext(), MatchResult(rule_id="1.2.64", matched=True)
    )


def test_execute_returns_payload() -> None:
    execution = _run(lambda words, context, match: {"retained_index": 1})

    assert execution.ok
    assert execution.payload == {"retained_index": 1}


def test_raising_action_records_diagnostic() -> None:
    def action(words, context, match):  # type: ignore[no-untyped-def]
        raise IndexError("list index out of range")

    execution = _run(action)

    assert not execution.ok
    assert execution.payload == {}
    assert execution.diagnostic is not None
    assert execution.diagnostic.code == "action-failure"
    assert execution.diagnostic.rule_id == "1.2.64"
    assert "IndexError" in execution.diagnostic.message


@pytest.mark.parametrize("returned", [None, [1, 2], "retained"])
def test_non_mapping_payload_is_rejected(returned: object) -> None:
    execution = _run(lambda words, context, match: returned)

    assert not execution.ok
    assert execution.diagnostic is not None
    assert "expected a mapping" in execution.diagnostic.message


def test_payload_may_not_shadow_envelope_keys() -> None:
    execution = _run(lambda words, context, match: {"sutra": "9.9.9", "applied": False})

    assert not execution.ok
    assert execution.diagnostic is not None
    assert "applied, sutra" in execution.diagnostic.message
