"""Script detection patterns and input validation error codes."""

from __future__ import annotations

import re
from re import Pattern

from paribhasha.types.common import InputErrorType

SCRIPT_DEVANAGARI: str = "Devanagari"
SCRIPT_IAST: str = "IAST"
SCRIPT_UNKNOWN: str = "Unknown"

# Lexicon table keys used in rule files, by detected script.
SCRIPT_TABLE_KEYS: dict[str, str] = {
    SCRIPT_DEVANAGARI: "devanagari",
    SCRIPT_IAST: "iast",
}

DEVANAGARI_PATTERN: Pattern[str] = re.compile(r"^[\u0900-\u097F\u200c\u200d]+$")
IAST_PATTERN: Pattern[str] = re.compile(
    r"^[a-zA-Z'āīūṛṝḷḹēōṃṁḥṅñṭḍṇśṣĀĪŪṚṜḶḸĒŌṂṀḤṄÑṬḌṆŚṢ]+$"
)

WORD_SEPARATOR_PATTERN: Pattern[str] = re.compile(r"[+\s]+")

ERROR_TYPE: InputErrorType = "TYPE_ERROR"
ERROR_EMPTY: InputErrorType = "EMPTY_INPUT"
ERROR_SCRIPT: InputErrorType = "INVALID_SCRIPT"
ERROR_CONTEXT: InputErrorType = "INVALID_CONTEXT"

GENDER_ALIASES: dict[str, str] = {
    "m": "m",
    "masc": "m",
    "masculine": "m",
    "pum": "m",
    "f": "f",
    "fem": "f",
    "feminine": "f",
    "stri": "f",
    "n": "n",
    "neut": "n",
    "neuter": "n",
    "napumsaka": "n",
}
