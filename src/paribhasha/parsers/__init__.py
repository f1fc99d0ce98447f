"""Input parsers: script detection and word-group normalization."""

from .script import detect_script

__all__ = ["detect_script"]
