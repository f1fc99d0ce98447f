"""Runtime limits."""

from __future__ import annotations

from paribhasha.exceptions.base import ParibhashaError


class ResourceExhausted(ParibhashaError):
    """Raised when a call fans out to more candidate rules than the configured ceiling."""

    def __init__(self, candidate_count: int, ceiling: int) -> None:
        super().__init__(f"{candidate_count} candidate rules exceed the configured ceiling of {ceiling}")
        self.candidate_count = candidate_count
        self.ceiling = ceiling
