"""Registry configuration defects.

These are programmer or rule-pack errors. They are raised at registration
time, or at resolution time for ambiguous mandatory rules, and are never
folded into a resolution result.
"""

from __future__ import annotations

from paribhasha.exceptions.base import ParibhashaError


class RegistryConfigurationError(ParibhashaError):
    """Raised when the rule registry is misconfigured."""


class DuplicateRuleId(RegistryConfigurationError):
    """Raised when two descriptors share a rule id."""

    def __init__(self, rule_id: str) -> None:
        super().__init__(f"Duplicate rule id registered: {rule_id}")
        self.rule_id = rule_id


class InvalidDescriptor(RegistryConfigurationError):
    """Raised when a descriptor is malformed."""


class AmbiguousMandatoryRule(RegistryConfigurationError):
    """Raised when more than one mandatory rule matches the same input."""

    def __init__(self, rule_ids: tuple[str, ...]) -> None:
        super().__init__(
            f"Mandatory rules {', '.join(rule_ids)} matched the same input; mandatory rules must be mutually exclusive"
        )
        self.rule_ids = rule_ids
