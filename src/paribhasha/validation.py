"""Input validation performed before any rule is evaluated."""

from __future__ import annotations

from paribhasha.constants.scripts import ERROR_EMPTY, ERROR_SCRIPT, ERROR_TYPE, SCRIPT_UNKNOWN
from paribhasha.model import InputValidation
from paribhasha.parsers.script import detect_script


def validate_text(text: object) -> InputValidation:
    """Validate one surface form: a non-empty string in Devanagari or IAST."""
    if not isinstance(text, str):
        return InputValidation(
            is_valid=False,
            error_type=ERROR_TYPE,
            message=f"word form must be a string, got {type(text).__name__}",
        )
    if not text.strip():
        return InputValidation(is_valid=False, error_type=ERROR_EMPTY, message="word form is empty")

    script = detect_script(text)
    if script == SCRIPT_UNKNOWN:
        return InputValidation(
            is_valid=False,
            error_type=ERROR_SCRIPT,
            script=script,
            message=f"{text.strip()!r} is neither Devanagari nor IAST",
        )
    return InputValidation(is_valid=True, script=script)
