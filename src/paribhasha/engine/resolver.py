"""Select the single governing rule among matched candidates.

1. Partition matches by priority class.
2. Keep the highest non-empty partition; none means no rule applies.
3. Rank it by specificity (scope tags satisfied by the call), then by the
   tie-break policy: ``confidence-first`` ranks confidence descending then
   declaration index ascending, ``declaration-first`` swaps the two.
4. The top-ranked descriptor wins.

More than one match in the mandatory partition is a rule-pack defect and
raises ``AmbiguousMandatoryRule``.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass
from typing import TypeAlias

from paribhasha.constants.engine import DEFAULT_TIE_BREAK, TIE_BREAK_CONFIDENCE_FIRST, VALID_TIE_BREAKS
from paribhasha.engine.context import specificity
from paribhasha.exceptions import AmbiguousMandatoryRule, ConfigError
from paribhasha.model import MatchResult, PriorityClass, RuleDescriptor, TraceEntry
from paribhasha.types.common import TieBreakPolicy

logger = logging.getLogger(__name__)

_Candidate: TypeAlias = tuple[RuleDescriptor, MatchResult]


@dataclass(frozen=True)
class Resolution:
    """Winner (or ``None``) plus the ranked trace of every matched candidate."""

    winner: RuleDescriptor | None
    match: MatchResult | None
    trace: tuple[TraceEntry, ...] = ()


class ConflictResolver:
    """Priority-class and specificity arbitration."""

    def __init__(self, tie_break: TieBreakPolicy = DEFAULT_TIE_BREAK) -> None:
        if tie_break not in VALID_TIE_BREAKS:
            raise ConfigError(f"tie_break must be one of {sorted(VALID_TIE_BREAKS)}, got {tie_break!r}")
        self._tie_break = tie_break

    @property
    def tie_break(self) -> TieBreakPolicy:
        return self._tie_break

    def resolve(
        self,
        matches: tuple[MatchResult, ...],
        descriptors: Mapping[str, RuleDescriptor],
        active_tags: frozenset[str],
    ) -> Resolution:
        partitions: dict[PriorityClass, list[_Candidate]] = {}
        for match in matches:
            if match.matched:
                descriptor = descriptors[match.rule_id]
                partitions.setdefault(descriptor.priority_class, []).append((descriptor, match))

        if not partitions:
            return Resolution(winner=None, match=None)

        ordered_classes = sorted(partitions, key=lambda pc: pc.rank, reverse=True)
        top_class = ordered_classes[0]
        if top_class is PriorityClass.MANDATORY and len(partitions[top_class]) > 1:
            raise AmbiguousMandatoryRule(tuple(d.rule_id for d, _ in partitions[top_class]))

        ranked: list[_Candidate] = []
        for priority_class in ordered_classes:
            ranked.extend(sorted(partitions[priority_class], key=lambda c: self._rank_key(c, active_tags)))

        trace = tuple(
            TraceEntry(
                rule_id=descriptor.rule_id,
                priority_class=descriptor.priority_class.value,
                specificity=specificity(descriptor.scope_tags, active_tags),
                confidence=match.confidence,
                rank=position,
            )
            for position, (descriptor, match) in enumerate(ranked, start=1)
        )
        winner, winning_match = ranked[0]
        logger.debug(
            "Rule %s governs (%s) over %d other match(es)",
            winner.rule_id,
            winner.priority_class.value,
            len(ranked) - 1,
        )
        return Resolution(winner=winner, match=winning_match, trace=trace)

    def _rank_key(self, candidate: _Candidate, active_tags: frozenset[str]) -> tuple[float, ...]:
        descriptor, match = candidate
        score = specificity(descriptor.scope_tags, active_tags)
        if self._tie_break == TIE_BREAK_CONFIDENCE_FIRST:
            return (-score, -match.confidence, descriptor.declaration_index)
        return (-score, descriptor.declaration_index, -match.confidence)
