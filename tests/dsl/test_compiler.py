"""Tests for compiling rule dicts into descriptors."""

from __future__ import annotations

import pytest

from paribhasha.dsl.compiler import CompiledAction, CompiledPredicate, compile_rule, compile_rules
from paribhasha.dsl.ops import ACTION_REGISTRY, PREDICATE_REGISTRY
from paribhasha.exceptions.dsl import RuleSchemaError
from paribhasha.model import EvaluationContext, MatchResult, PriorityClass

from .conftest import _minimal_rule, _words


def test_compile_minimal_rule() -> None:
    """Compiler produces a descriptor with fields taken from the rule file."""
    rule = _minimal_rule(priority_class="specific", scope_tags=["ekasesha", "case"])
    rule["metadata"]["reason"] = "identical-forms"

    descriptor = compile_rule(rule, "rules/9.9.1.yaml")

    assert descriptor.rule_id == "9.9.1"
    assert descriptor.priority_class is PriorityClass.SPECIFIC
    assert descriptor.scope_tags == frozenset({"ekasesha", "case"})
    assert descriptor.title == "Test rule"
    assert descriptor.reason == "identical-forms"
    assert descriptor.source == "rules/9.9.1.yaml"
    assert descriptor.definition == rule
    assert descriptor.declaration_index == -1


def test_compiled_callables_bind_registered_strategies() -> None:
    descriptor = compile_rule(_minimal_rule(), "<test>")

    assert isinstance(descriptor.predicate, CompiledPredicate)
    assert isinstance(descriptor.action, CompiledAction)
    assert descriptor.predicate.strategy is PREDICATE_REGISTRY["identical_forms"]
    assert descriptor.action.strategy is ACTION_REGISTRY["retain_selection"]
    assert "strategy" not in descriptor.predicate.params


def test_compile_rejects_schema_violations() -> None:
    with pytest.raises(RuleSchemaError):
        compile_rule(_minimal_rule(version=3), "<test>")


def test_predicate_scales_confidence_by_rule_confidence() -> None:
    descriptor = compile_rule(_minimal_rule(), "<test>")

    outcome = descriptor.predicate(_words("gajaḥ", "gajaḥ"), EvaluationContext())

    assert outcome.matched
    assert outcome.confidence == 0.5


def test_context_gate_blocks_without_near_miss() -> None:
    rule = _minimal_rule(context={"require": {"collection": True}, "forbid": {"young": True}})
    predicate = compile_rule(rule, "<test>").predicate
    words = _words("gāvaḥ", "gāvaḥ")

    missing = predicate(words, EvaluationContext.from_mapping({}))
    forbidden = predicate(words, EvaluationContext.from_mapping({"collection": True, "young": True}))
    allowed = predicate(words, EvaluationContext.from_mapping({"collection": True}))

    assert (missing.matched, missing.reason, missing.near_miss) == (False, "context-gate", False)
    assert (forbidden.matched, forbidden.reason) == (False, "context-gate")
    assert allowed.matched


def test_action_applies_static_params() -> None:
    rule = _minimal_rule(action={"strategy": "retain_selection", "optional": True, "number_override": "singular"})
    descriptor = compile_rule(rule, "<test>")
    words = _words("vanam", "vanam")
    match = MatchResult(rule_id="9.9.1", matched=True, extracted={"retain": (1,), "drop": (0,)})

    payload = descriptor.action(words, EvaluationContext(), match)

    assert payload["optional"] is True
    assert payload["number_override"] == "singular"
    assert payload["retained_forms"] == ["vanam"]


def test_compile_rules_preserves_input_order() -> None:
    compiled = compile_rules(
        [
            ("b.yaml", _minimal_rule(rule_id="1.2.70")),
            ("a.yaml", _minimal_rule(rule_id="1.2.64")),
        ]
    )

    assert [d.rule_id for d in compiled] == ["1.2.70", "1.2.64"]
