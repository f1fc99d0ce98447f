"""Core rule, word and context entities."""

from __future__ import annotations

from collections.abc import Callable, Mapping
from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Any, TypeAlias

from paribhasha.constants.engine import REASON_NO_MATCH, REASON_RULE_APPLIED
from paribhasha.utils.naming import normalize_form, to_snake_case


class PriorityClass(str, Enum):
    """Coarse precedence tier of a rule. Higher rank always wins."""

    MANDATORY = "mandatory"
    SPECIFIC = "specific"
    DOMAIN_CONDITIONAL = "domain_conditional"
    GENERAL = "general"

    @property
    def rank(self) -> int:
        return _PRIORITY_RANKS[self]

    @classmethod
    def parse(cls, value: Any) -> PriorityClass:
        """Coerce ``"DomainConditional"``, ``"domain-conditional"`` etc. to a member."""
        if isinstance(value, cls):
            return value
        if not isinstance(value, str):
            raise ValueError(f"priority class must be a string, got {type(value).__name__}")
        return cls(to_snake_case(value))


_PRIORITY_RANKS: dict[PriorityClass, int] = {
    PriorityClass.MANDATORY: 3,
    PriorityClass.SPECIFIC: 2,
    PriorityClass.DOMAIN_CONDITIONAL: 1,
    PriorityClass.GENERAL: 0,
}


@dataclass(frozen=True)
class EvaluationContext:
    """Read-only linguistic flags for one call. Keys are snake_case."""

    flags: Mapping[str, Any] = field(default_factory=lambda: MappingProxyType({}))

    @classmethod
    def from_mapping(cls, raw: Mapping[str, Any] | None) -> EvaluationContext:
        if not raw:
            return cls()
        normalized = {to_snake_case(str(key)): value for key, value in raw.items()}
        return cls(flags=MappingProxyType(normalized))

    def get(self, key: str, default: Any = None) -> Any:
        return self.flags.get(key, default)

    def is_set(self, key: str) -> bool:
        return bool(self.flags.get(key))

    def __contains__(self, key: object) -> bool:
        return key in self.flags


@dataclass(frozen=True)
class WordRecord:
    """One member of the word group under evaluation."""

    index: int
    surface: str = ""
    lemma: str = ""
    base: str = ""
    case: str = ""
    gender: str = ""
    category: str = ""
    flags: Mapping[str, Any] = field(default_factory=lambda: MappingProxyType({}))

    @property
    def form(self) -> str:
        """Normalized surface form, falling back to the lemma."""
        return normalize_form(self.surface or self.lemma)

    @property
    def forms(self) -> frozenset[str]:
        """Normalized surface and lemma, whichever are present."""
        return frozenset(normalize_form(v) for v in (self.surface, self.lemma) if v)

    @property
    def group_key(self) -> str:
        """Key used to pair counterparts: the base when given, else the form."""
        return normalize_form(self.base) if self.base else self.form

    def get(self, key: str, default: Any = None) -> Any:
        if key in _WORD_FIELDS:
            value = getattr(self, key)
            return value if value else default
        return self.flags.get(key, default)

    def has(self, key: str) -> bool:
        return bool(self.get(key))


_WORD_FIELDS: frozenset[str] = frozenset({"surface", "lemma", "base", "case", "gender", "category"})


@dataclass(frozen=True)
class PredicateOutcome:
    """What a rule predicate reports for one input.

    ``near_miss`` marks a predicate whose preconditions held but whose
    decisive check failed; its reason is surfaced when no rule applies.
    """

    matched: bool
    confidence: float = 1.0
    extracted: Mapping[str, Any] = field(default_factory=dict)
    reason: str | None = None
    near_miss: bool = False

    @classmethod
    def no_match(cls, reason: str = REASON_NO_MATCH, *, near_miss: bool = False) -> PredicateOutcome:
        return cls(matched=False, confidence=0.0, reason=reason, near_miss=near_miss)


@dataclass(frozen=True)
class MatchResult:
    """Predicate outcome stamped with the rule that produced it."""

    rule_id: str
    matched: bool
    confidence: float = 0.0
    extracted: Mapping[str, Any] = field(default_factory=dict)
    reason: str | None = None
    near_miss: bool = False


Words: TypeAlias = tuple[WordRecord, ...]
Predicate: TypeAlias = Callable[[Words, EvaluationContext], PredicateOutcome]
Action: TypeAlias = Callable[[Words, EvaluationContext, MatchResult], Mapping[str, Any]]


@dataclass(frozen=True)
class RuleDescriptor:
    """Immutable catalog entry for one sutra."""

    rule_id: str
    priority_class: PriorityClass
    scope_tags: frozenset[str]
    predicate: Predicate
    action: Action
    declaration_index: int = -1
    title: str = ""
    description: str = ""
    reason: str = REASON_RULE_APPLIED
    source: str = ""
    definition: Mapping[str, Any] = field(default_factory=dict, compare=False, repr=False)

    @property
    def mandatory(self) -> bool:
        return self.priority_class is PriorityClass.MANDATORY
