"""Compiler: bind validated YAML rules to their strategies as rule descriptors."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass, field, replace
from types import MappingProxyType
from typing import Any

from paribhasha.constants.engine import REASON_CONTEXT_GATE, REASON_RULE_APPLIED
from paribhasha.dsl.operations.shared import context_satisfies
from paribhasha.dsl.ops import ACTION_REGISTRY, PREDICATE_REGISTRY, ActionStrategy, PredicateStrategy
from paribhasha.dsl.schema import validate_rule
from paribhasha.exceptions.dsl import RuleCompileError
from paribhasha.model import EvaluationContext, MatchResult, PredicateOutcome, PriorityClass, RuleDescriptor, Words

logger = logging.getLogger(__name__)


@dataclass(frozen=True, eq=False)
class CompiledPredicate:
    """Predicate plan: optional context gate, then the strategy, scaled by rule confidence."""

    rule_id: str
    strategy_name: str
    strategy: PredicateStrategy
    params: Mapping[str, Any]
    confidence: float
    require: Mapping[str, Any] = field(default_factory=lambda: MappingProxyType({}))
    forbid: Mapping[str, Any] = field(default_factory=lambda: MappingProxyType({}))

    def __call__(self, words: Words, context: EvaluationContext) -> PredicateOutcome:
        if not context_satisfies(context, self.require, self.forbid):
            return PredicateOutcome.no_match(REASON_CONTEXT_GATE)
        outcome = self.strategy(words, context, self.params)
        if not outcome.matched:
            return outcome
        return replace(outcome, confidence=round(outcome.confidence * self.confidence, 6))


@dataclass(frozen=True, eq=False)
class CompiledAction:
    """Action plan: a registered action strategy plus its static parameters."""

    rule_id: str
    strategy_name: str
    strategy: ActionStrategy
    params: Mapping[str, Any]

    def __call__(self, words: Words, context: EvaluationContext, match: MatchResult) -> dict[str, Any]:
        return self.strategy(words, context, match, self.params)


def compile_rule(data: dict[str, Any], source_path: str) -> RuleDescriptor:
    """Validate and compile a YAML rule dict into a RuleDescriptor.

    Raises RuleSchemaError on schema violations, RuleCompileError on
    compilation failures.
    """
    validate_rule(data, source_path)

    rule_id = data["rule_id"]
    match_config = {key: value for key, value in data["match"].items() if key != "strategy"}
    action_config = {key: value for key, value in data["action"].items() if key != "strategy"}

    predicate_name = data["match"]["strategy"]
    action_name = data["action"]["strategy"]
    if predicate_name not in PREDICATE_REGISTRY:
        raise RuleCompileError(f"{source_path}: strategy '{predicate_name}' not found in predicate registry")
    if action_name not in ACTION_REGISTRY:
        raise RuleCompileError(f"{source_path}: strategy '{action_name}' not found in action registry")

    metadata = data["metadata"]
    context = data.get("context", {})
    predicate = CompiledPredicate(
        rule_id=rule_id,
        strategy_name=predicate_name,
        strategy=PREDICATE_REGISTRY[predicate_name],
        params=MappingProxyType(match_config),
        confidence=float(metadata["confidence"]),
        require=MappingProxyType(dict(context.get("require", {}))),
        forbid=MappingProxyType(dict(context.get("forbid", {}))),
    )
    action = CompiledAction(
        rule_id=rule_id,
        strategy_name=action_name,
        strategy=ACTION_REGISTRY[action_name],
        params=MappingProxyType(action_config),
    )
    logger.debug("Compiled rule %s (%s -> %s)", rule_id, predicate_name, action_name)

    return RuleDescriptor(
        rule_id=rule_id,
        priority_class=PriorityClass.parse(data["priority_class"]),
        scope_tags=frozenset(tag.strip() for tag in data["scope_tags"]),
        predicate=predicate,
        action=action,
        title=metadata["title"],
        description=metadata["description"],
        reason=metadata.get("reason", REASON_RULE_APPLIED),
        source=source_path,
        definition=data,
    )


def compile_rules(rules_data: list[tuple[str, dict[str, Any]]]) -> list[RuleDescriptor]:
    """Compile multiple rule dicts. Fail-fast on any error."""
    return [compile_rule(data, source_path) for source_path, data in rules_data]
