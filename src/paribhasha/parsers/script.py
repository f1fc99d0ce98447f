"""Script detection for Sanskrit word forms."""

from __future__ import annotations

import unicodedata

from paribhasha.constants.scripts import (
    DEVANAGARI_PATTERN,
    IAST_PATTERN,
    SCRIPT_DEVANAGARI,
    SCRIPT_IAST,
    SCRIPT_UNKNOWN,
    WORD_SEPARATOR_PATTERN,
)
from paribhasha.types.common import Script


def detect_script(text: str) -> Script:
    """Return ``'Devanagari'``, ``'IAST'`` or ``'Unknown'`` for *text*.

    Whitespace and ``+`` separators are ignored. Mixed-script text and
    anything outside both alphabets is ``'Unknown'``.
    """
    if not isinstance(text, str):
        return SCRIPT_UNKNOWN
    compact = WORD_SEPARATOR_PATTERN.sub("", unicodedata.normalize("NFC", text))
    if not compact:
        return SCRIPT_UNKNOWN
    if DEVANAGARI_PATTERN.match(compact):
        return SCRIPT_DEVANAGARI
    if IAST_PATTERN.match(compact):
        return SCRIPT_IAST
    return SCRIPT_UNKNOWN
