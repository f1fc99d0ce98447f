"""Sutra engine: one ``resolve`` call from raw input to result envelope.

Each call moves through UNEVALUATED, EVALUATED, RESOLVED, EXECUTED (only
when a rule governs) and RETURNED. The registry is frozen when the engine
is built and no call mutates shared state.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from functools import lru_cache
from typing import Any

from paribhasha.config import EngineConfig
from paribhasha.constants.context import KNOWN_CONTEXT_FLAGS
from paribhasha.constants.scripts import ERROR_CONTEXT
from paribhasha.dsl.loader import load_rule_pack
from paribhasha.engine.context import derive_active_tags
from paribhasha.engine.envelope import action_failure_result, applied_result, invalid_input_result, no_rule_result
from paribhasha.engine.evaluator import PredicateEvaluator
from paribhasha.engine.executor import ActionExecutor
from paribhasha.engine.registry import RuleRegistry
from paribhasha.engine.resolver import ConflictResolver
from paribhasha.model import EvaluationContext, InputValidation, ResolutionResult
from paribhasha.parsers.words import prepare_input

logger = logging.getLogger(__name__)


class SutraEngine:
    """Evaluates, arbitrates and applies the rules of one registry."""

    def __init__(self, registry: RuleRegistry, config: EngineConfig | None = None) -> None:
        self._config = config or EngineConfig()
        self._registry = registry.freeze()
        self._evaluator = PredicateEvaluator(self._config.max_candidates)
        self._resolver = ConflictResolver(self._config.tie_break)
        self._executor = ActionExecutor()

    @classmethod
    def from_config(
        cls,
        config: EngineConfig | None = None,
        *,
        rule_ids: frozenset[str] | None = None,
    ) -> SutraEngine:
        """Build an engine over the rule files named by *config* (bundled pack by default)."""
        config = config or EngineConfig()
        registry = load_rule_pack(
            rules_dir=config.rules_dir,
            rule_files=config.rule_files,
            rule_ids=rule_ids,
            disabled_rules=config.disabled_rules,
        )
        return cls(registry, config)

    @property
    def registry(self) -> RuleRegistry:
        return self._registry

    @property
    def config(self) -> EngineConfig:
        return self._config

    def resolve(
        self,
        words: Any,
        context: Mapping[str, Any] | None = None,
        *,
        scope: str | Iterable[str] | None = None,
    ) -> ResolutionResult:
        """Return the envelope for *words* under *context*.

        Raises only ``RegistryConfigurationError`` (ambiguous mandatory
        rules) and ``ResourceExhausted``; every other failure is reported
        inside the result.
        """
        prepared = prepare_input(words)
        if not prepared.validation.is_valid:
            logger.debug("RETURNED invalid input (%s)", prepared.validation.error_type)
            return invalid_input_result(prepared.validation)

        if context is not None and not isinstance(context, Mapping):
            logger.debug("RETURNED invalid context (%s)", type(context).__name__)
            return invalid_input_result(
                InputValidation(
                    is_valid=False,
                    error_type=ERROR_CONTEXT,
                    script=prepared.script,
                    message=f"context must be a mapping, got {type(context).__name__}",
                )
            )

        evaluation_context = EvaluationContext.from_mapping(context)
        ignored = sorted(set(evaluation_context.flags) - KNOWN_CONTEXT_FLAGS)
        if ignored:
            logger.debug("Context keys not read by any bundled rule: %s", ",".join(ignored))
        scope_tags = self._scope_tags(scope)
        candidates = self._registry.get_candidates(scope_tags)
        logger.debug(
            "UNEVALUATED %d word(s), %d candidate(s) for scope %s",
            len(prepared.words),
            len(candidates),
            ",".join(scope_tags),
        )

        evaluation = self._evaluator.evaluate(candidates, prepared.words, evaluation_context)
        logger.debug(
            "EVALUATED %d match(es): %s",
            len(evaluation.matched),
            ",".join(m.rule_id for m in evaluation.matched) or "-",
        )

        candidate_tags = frozenset(tag for descriptor in candidates for tag in descriptor.scope_tags)
        active_tags = derive_active_tags(prepared.words, evaluation_context, candidate_tags)
        resolution = self._resolver.resolve(
            evaluation.matches,
            {descriptor.rule_id: descriptor for descriptor in candidates},
            active_tags,
        )
        logger.debug("RESOLVED winner=%s", resolution.winner.rule_id if resolution.winner else None)

        if resolution.winner is None or resolution.match is None:
            result = no_rule_result(evaluation, script=prepared.script)
            logger.debug("RETURNED applied=False reason=%s", result.reason)
            return result

        execution = self._executor.execute(resolution.winner, prepared.words, evaluation_context, resolution.match)
        logger.debug("EXECUTED rule %s ok=%s", resolution.winner.rule_id, execution.ok)

        if execution.diagnostic is not None:
            result = action_failure_result(
                resolution.winner,
                trace=resolution.trace,
                diagnostics=(*evaluation.diagnostics, execution.diagnostic),
                script=prepared.script,
            )
        else:
            result = applied_result(
                resolution.winner,
                resolution.match,
                execution.payload,
                trace=resolution.trace,
                diagnostics=evaluation.diagnostics,
                script=prepared.script,
            )
        logger.debug("RETURNED applied=%s sutra=%s reason=%s", result.applied, result.sutra, result.reason)
        return result

    def _scope_tags(self, scope: str | Iterable[str] | None) -> tuple[str, ...]:
        if scope is None:
            return self._config.default_scope
        if isinstance(scope, str):
            return (scope,)
        return tuple(scope)


@lru_cache(maxsize=1)
def default_engine() -> SutraEngine:
    """Engine over the bundled rule pack with default settings. Built once per process."""
    return SutraEngine.from_config(EngineConfig())


def resolve(
    words: Any,
    context: Mapping[str, Any] | None = None,
    *,
    scope: str | Iterable[str] | None = None,
) -> ResolutionResult:
    """Resolve *words* with the default engine."""
    return default_engine().resolve(words, context, scope=scope)
