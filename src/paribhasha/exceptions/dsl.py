"""Exceptions raised while loading and compiling rule files."""

from __future__ import annotations

from paribhasha.exceptions.config import ConfigError


class RuleSchemaError(ConfigError):
    """Raised when a rule file violates the v1 schema."""


class RuleCompileError(ConfigError):
    """Raised when a schema-valid rule cannot be bound to its strategies."""
