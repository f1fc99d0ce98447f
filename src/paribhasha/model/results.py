"""Per-call result types: input validation, trace, diagnostics and the envelope."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from paribhasha.types.common import InputErrorType, JsonObject, Script


@dataclass(frozen=True)
class InputValidation:
    """Outcome of validating caller input before evaluation."""

    is_valid: bool
    error_type: InputErrorType | None = None
    script: Script | None = None
    message: str = ""


@dataclass(frozen=True)
class Diagnostic:
    """A recovered failure recorded during one call."""

    code: str
    rule_id: str
    message: str

    def to_dict(self) -> JsonObject:
        return {"code": self.code, "rule_id": self.rule_id, "message": self.message}


@dataclass(frozen=True)
class TraceEntry:
    """One matched candidate as ranked by the resolver."""

    rule_id: str
    priority_class: str
    specificity: int
    confidence: float
    rank: int

    def to_dict(self) -> JsonObject:
        return {
            "rule_id": self.rule_id,
            "priority_class": self.priority_class,
            "specificity": self.specificity,
            "confidence": self.confidence,
            "rank": self.rank,
        }


@dataclass(frozen=True)
class ResolutionResult:
    """Uniform envelope returned by every ``resolve`` call."""

    applied: bool
    sutra: str | None
    reason: str
    mandatory: bool = False
    confidence: float = 0.0
    priority_class: str | None = None
    explanation: str = ""
    script: Script | None = None
    error: InputErrorType | None = None
    payload: dict[str, Any] = field(default_factory=dict)
    trace: tuple[TraceEntry, ...] = ()
    diagnostics: tuple[Diagnostic, ...] = ()

    @property
    def retained_index(self) -> int | None:
        return self.payload.get("retained_index")

    @property
    def retained_indices(self) -> list[int]:
        return list(self.payload.get("retained_indices", []))

    @property
    def dropped_indices(self) -> list[int]:
        return list(self.payload.get("dropped_indices", []))

    def to_dict(self) -> JsonObject:
        """Serialize to a JSON-ready mapping with the payload merged in."""
        data: JsonObject = {
            "applied": self.applied,
            "sutra": self.sutra,
            "mandatory": self.mandatory,
            "reason": self.reason,
            "confidence": self.confidence,
            "priority_class": self.priority_class,
            "explanation": self.explanation,
            "script": self.script,
        }
        if self.error is not None:
            data["error"] = self.error
        data.update(self.payload)
        data["trace"] = [entry.to_dict() for entry in self.trace]
        data["diagnostics"] = [diag.to_dict() for diag in self.diagnostics]
        return data
