"""Configuration-related exceptions."""

from __future__ import annotations

from paribhasha.exceptions.base import ParibhashaError


class ConfigError(ParibhashaError, ValueError):
    """Raised when engine configuration or a rule source is invalid."""
