"""String normalization helpers for word forms and context keys."""

from __future__ import annotations

import re
import unicodedata
from re import Pattern

_CAMEL_BOUNDARY: Pattern[str] = re.compile(r"(?<=[a-z0-9])(?=[A-Z])")


def normalize_form(value: str) -> str:
    """Normalize a word form for comparisons (NFC, trimmed, lowercased)."""
    return unicodedata.normalize("NFC", value).strip().lower()


def to_snake_case(key: str) -> str:
    """Convert ``forceCaseCheck`` / ``force-case-check`` style keys to ``force_case_check``."""
    key = _CAMEL_BOUNDARY.sub("_", key.strip())
    return key.replace("-", "_").lower()
