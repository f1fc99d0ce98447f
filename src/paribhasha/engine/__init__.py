"""Conflict-resolution engine: registry, evaluation, arbitration and execution."""

from __future__ import annotations

from .registry import RuleRegistry
from .runtime import SutraEngine, default_engine, resolve

__all__ = ["RuleRegistry", "SutraEngine", "default_engine", "resolve"]
