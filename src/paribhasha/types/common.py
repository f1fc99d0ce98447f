"""Cross-module type aliases."""

from __future__ import annotations

from typing import Literal, TypeAlias

Script: TypeAlias = Literal["Devanagari", "IAST", "Unknown"]
TieBreakPolicy: TypeAlias = Literal["confidence-first", "declaration-first"]
InputErrorType: TypeAlias = Literal["TYPE_ERROR", "EMPTY_INPUT", "INVALID_SCRIPT", "INVALID_CONTEXT"]

JsonScalar: TypeAlias = str | int | float | bool | None
JsonValue: TypeAlias = JsonScalar | list["JsonValue"] | dict[str, "JsonValue"]
JsonObject: TypeAlias = dict[str, JsonValue]
