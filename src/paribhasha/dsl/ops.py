"""Strategy registries for rule files.

Maps strategy names to their implementation functions. Only registered
strategies can be referenced from YAML rules.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from typing import Any, TypeAlias

from paribhasha.dsl.operations.actions import run_retain_selection
from paribhasha.dsl.operations.attributes import run_attribute_pairing, run_attribute_selection
from paribhasha.dsl.operations.forms import run_identical_forms
from paribhasha.dsl.operations.lexical import run_lexical_retention, run_series_retention
from paribhasha.model import EvaluationContext, MatchResult, PredicateOutcome, Words

PredicateStrategy: TypeAlias = Callable[[Words, EvaluationContext, Mapping[str, Any]], PredicateOutcome]
ActionStrategy: TypeAlias = Callable[[Words, EvaluationContext, MatchResult, Mapping[str, Any]], dict[str, Any]]

PREDICATE_REGISTRY: dict[str, PredicateStrategy] = {
    "identical_forms": run_identical_forms,
    "lexical_retention": run_lexical_retention,
    "series_retention": run_series_retention,
    "attribute_pairing": run_attribute_pairing,
    "attribute_selection": run_attribute_selection,
}

ACTION_REGISTRY: dict[str, ActionStrategy] = {
    "retain_selection": run_retain_selection,
}
