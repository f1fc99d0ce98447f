"""Shared exception hierarchy for paribhasha."""

from __future__ import annotations

from .base import ParibhashaError
from .config import ConfigError
from .dsl import RuleCompileError, RuleSchemaError
from .registry import (
    AmbiguousMandatoryRule,
    DuplicateRuleId,
    InvalidDescriptor,
    RegistryConfigurationError,
)
from .runtime import ResourceExhausted

__all__ = [
    "AmbiguousMandatoryRule",
    "ConfigError",
    "DuplicateRuleId",
    "InvalidDescriptor",
    "ParibhashaError",
    "RegistryConfigurationError",
    "ResourceExhausted",
    "RuleCompileError",
    "RuleSchemaError",
]
