"""Ordered, immutable catalog of rule descriptors.

Descriptors are registered once while the engine is assembled and the
registry is then frozen. Lookups never mutate state, so a frozen registry
can be shared freely between concurrent callers.
"""

from __future__ import annotations

import hashlib
import json
import logging
from collections.abc import Iterable, Iterator
from dataclasses import replace

from paribhasha.constants.engine import RULE_ID_PATTERN
from paribhasha.exceptions import DuplicateRuleId, InvalidDescriptor, RegistryConfigurationError
from paribhasha.model import PriorityClass, RuleDescriptor

logger = logging.getLogger(__name__)


class RuleRegistry:
    """Rule descriptors indexed by id and by scope tag."""

    def __init__(self, descriptors: Iterable[RuleDescriptor] = ()) -> None:
        self._rules: dict[str, RuleDescriptor] = {}
        self._by_tag: dict[str, list[RuleDescriptor]] = {}
        self._frozen = False
        for descriptor in descriptors:
            self.register(descriptor)

    def register(self, descriptor: RuleDescriptor) -> RuleDescriptor:
        """Validate and add *descriptor*, returning it stamped with its declaration index."""
        if self._frozen:
            raise RegistryConfigurationError(
                f"Cannot register rule {getattr(descriptor, 'rule_id', '?')}: registry is frozen"
            )
        priority_class, scope_tags = _validate_descriptor(descriptor)
        if descriptor.rule_id in self._rules:
            raise DuplicateRuleId(descriptor.rule_id)

        stamped = replace(
            descriptor,
            priority_class=priority_class,
            scope_tags=scope_tags,
            declaration_index=len(self._rules),
        )
        self._rules[stamped.rule_id] = stamped
        for tag in sorted(scope_tags):
            self._by_tag.setdefault(tag, []).append(stamped)
        logger.debug(
            "Registered rule %s (%s, tags=%s, index=%d)",
            stamped.rule_id,
            priority_class.value,
            ",".join(sorted(scope_tags)),
            stamped.declaration_index,
        )
        return stamped

    def freeze(self) -> RuleRegistry:
        """Reject further registration. Returns ``self`` for chaining."""
        self._frozen = True
        return self

    @property
    def frozen(self) -> bool:
        return self._frozen

    def get_candidates(self, scope_tags: Iterable[str]) -> tuple[RuleDescriptor, ...]:
        """Rules sharing at least one tag with *scope_tags*, by priority class then declaration order."""
        found: dict[str, RuleDescriptor] = {}
        for tag in scope_tags:
            for descriptor in self._by_tag.get(tag, ()):
                found[descriptor.rule_id] = descriptor
        return tuple(sorted(found.values(), key=lambda d: (-d.priority_class.rank, d.declaration_index)))

    def get(self, rule_id: str) -> RuleDescriptor:
        return self._rules[rule_id]

    @property
    def rule_ids(self) -> list[str]:
        """Rule ids in declaration order."""
        return list(self._rules)

    def __len__(self) -> int:
        return len(self._rules)

    def __iter__(self) -> Iterator[RuleDescriptor]:
        return iter(self._rules.values())

    def __contains__(self, rule_id: object) -> bool:
        return rule_id in self._rules

    def fingerprint(self) -> str:
        """Return a stable hash of the registered rules."""
        payload = [
            {
                "rule_id": d.rule_id,
                "priority_class": d.priority_class.value,
                "scope_tags": sorted(d.scope_tags),
                "declaration_index": d.declaration_index,
                "definition": dict(d.definition) if d.definition else _callable_name(d.predicate),
            }
            for d in self._rules.values()
        ]
        blob = json.dumps(payload, sort_keys=True, separators=(",", ":"), default=str).encode("utf-8")
        return hashlib.sha256(blob).hexdigest()


def _validate_descriptor(descriptor: object) -> tuple[PriorityClass, frozenset[str]]:
    if not isinstance(descriptor, RuleDescriptor):
        raise InvalidDescriptor(f"Expected RuleDescriptor, got {type(descriptor).__name__}")

    rule_id = descriptor.rule_id
    if not isinstance(rule_id, str) or not RULE_ID_PATTERN.match(rule_id):
        raise InvalidDescriptor(f"Rule id must be a dotted numeral like '1.2.64', got {rule_id!r}")

    try:
        priority_class = PriorityClass.parse(descriptor.priority_class)
    except ValueError as exc:
        raise InvalidDescriptor(f"Rule {rule_id}: unrecognized priority class {descriptor.priority_class!r}") from exc

    tags = descriptor.scope_tags
    if isinstance(tags, str) or not all(isinstance(tag, str) and tag.strip() for tag in tags):
        raise InvalidDescriptor(f"Rule {rule_id}: scope_tags must be a collection of non-empty strings")
    scope_tags = frozenset(tag.strip() for tag in tags)
    if not scope_tags:
        raise InvalidDescriptor(f"Rule {rule_id}: at least one scope tag is required")

    if not callable(descriptor.predicate):
        raise InvalidDescriptor(f"Rule {rule_id}: predicate must be callable")
    if not callable(descriptor.action):
        raise InvalidDescriptor(f"Rule {rule_id}: action must be callable")
    return priority_class, scope_tags


def _callable_name(fn: object) -> str:
    return f"{getattr(fn, '__module__', '')}.{getattr(fn, '__qualname__', type(fn).__name__)}"
