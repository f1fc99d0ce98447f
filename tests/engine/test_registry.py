"""Tests for rule registration, candidate lookup and fingerprinting."""

from __future__ import annotations

from dataclasses import replace

import pytest

from paribhasha.engine import RuleRegistry
from paribhasha.exceptions import DuplicateRuleId, InvalidDescriptor, RegistryConfigurationError
from paribhasha.model import PriorityClass

from .conftest import _descriptor


def test_register_assigns_declaration_index_in_order() -> None:
    registry = RuleRegistry()

    first = registry.register(_descriptor("1.2.70"))
    second = registry.register(_descriptor("1.2.64"))

    assert first.declaration_index == 0
    assert second.declaration_index == 1
    assert registry.rule_ids == ["1.2.70", "1.2.64"]
    assert len(registry) == 2
    assert "1.2.64" in registry


def test_register_rejects_duplicate_rule_id() -> None:
    registry = RuleRegistry([_descriptor("1.2.64")])

    with pytest.raises(DuplicateRuleId, match="1.2.64") as excinfo:
        registry.register(_descriptor("1.2.64", priority_class=PriorityClass.SPECIFIC))

    assert excinfo.value.rule_id == "1.2.64"


@pytest.mark.parametrize("rule_id", ["", "1", "1-2-64", "sutra", "1.2.", 1.2])
def test_register_rejects_malformed_rule_id(rule_id: object) -> None:
    with pytest.raises(InvalidDescriptor, match="dotted numeral"):
        RuleRegistry().register(_descriptor(rule_id))  # type: ignore[arg-type]


def test_register_coerces_priority_class_names() -> None:
    """String priority classes in any spelling resolve to the enum."""
    registry = RuleRegistry()

    stamped = registry.register(_descriptor("1.2.73", priority_class="DomainConditional"))

    assert stamped.priority_class is PriorityClass.DOMAIN_CONDITIONAL


def test_register_rejects_unknown_priority_class() -> None:
    with pytest.raises(InvalidDescriptor, match="priority class"):
        RuleRegistry().register(_descriptor("1.2.64", priority_class="optional"))


@pytest.mark.parametrize("field", ["predicate", "action"])
def test_register_rejects_non_callable(field: str) -> None:
    broken = replace(_descriptor("1.2.64"), **{field: "not callable"})

    with pytest.raises(InvalidDescriptor, match=field):
        RuleRegistry().register(broken)


def test_register_rejects_empty_scope_tags() -> None:
    with pytest.raises(InvalidDescriptor, match="scope tag"):
        RuleRegistry().register(_descriptor("1.2.64", scope_tags=()))


def test_register_rejects_non_descriptor() -> None:
    with pytest.raises(InvalidDescriptor, match="RuleDescriptor"):
        RuleRegistry().register({"rule_id": "1.2.64"})  # type: ignore[arg-type]


def test_frozen_registry_rejects_registration() -> None:
    registry = RuleRegistry([_descriptor("1.2.64")]).freeze()

    assert registry.frozen
    with pytest.raises(RegistryConfigurationError, match="frozen"):
        registry.register(_descriptor("1.2.65"))


def test_get_candidates_orders_by_class_then_declaration() -> None:
    registry = RuleRegistry(
        [
            _descriptor("1.2.64", PriorityClass.GENERAL),
            _descriptor("1.2.68", PriorityClass.SPECIFIC, scope_tags=("ekasesha", "kinship")),
            _descriptor("1.2.72", PriorityClass.MANDATORY),
            _descriptor("1.2.65", PriorityClass.SPECIFIC),
        ]
    )

    candidates = registry.get_candidates(["ekasesha", "kinship"])

    assert [c.rule_id for c in candidates] == ["1.2.72", "1.2.68", "1.2.65", "1.2.64"]


def test_get_candidates_excludes_disjoint_tags() -> None:
    registry = RuleRegistry(
        [
            _descriptor("1.2.64", scope_tags=("ekasesha",)),
            _descriptor("1.4.14", scope_tags=("pada",)),
        ]
    )

    assert [c.rule_id for c in registry.get_candidates(["pada"])] == ["1.4.14"]
    assert registry.get_candidates(["samasa"]) == ()


def test_get_candidates_has_no_side_effects() -> None:
    registry = RuleRegistry([_descriptor("1.2.64"), _descriptor("1.2.65")])

    first = registry.get_candidates(["ekasesha"])
    second = registry.get_candidates(["ekasesha"])

    assert first == second
    assert registry.rule_ids == ["1.2.64", "1.2.65"]


def test_fingerprint_is_stable_and_order_sensitive() -> None:
    one = RuleRegistry([_descriptor("1.2.64"), _descriptor("1.2.65")])
    same = RuleRegistry([_descriptor("1.2.64"), _descriptor("1.2.65")])
    swapped = RuleRegistry([_descriptor("1.2.65"), _descriptor("1.2.64")])

    assert one.fingerprint() == same.fingerprint()
    assert one.fingerprint() != swapped.fingerprint()
