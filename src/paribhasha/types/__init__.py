"""Shared type aliases for paribhasha."""

from .common import InputErrorType, JsonObject, JsonScalar, JsonValue, Script, TieBreakPolicy

__all__ = [
    "InputErrorType",
    "JsonObject",
    "JsonScalar",
    "JsonValue",
    "Script",
    "TieBreakPolicy",
]
