"""paribhasha: precedence engine for sutra rules."""

from __future__ import annotations

import logging
from importlib.metadata import PackageNotFoundError, version

from paribhasha.engine import RuleRegistry, SutraEngine, default_engine, resolve
from paribhasha.model import EvaluationContext, PriorityClass, ResolutionResult, RuleDescriptor

__all__ = [
    "EvaluationContext",
    "PriorityClass",
    "ResolutionResult",
    "RuleDescriptor",
    "RuleRegistry",
    "SutraEngine",
    "__version__",
    "default_engine",
    "resolve",
]

try:
    __version__ = version("paribhasha")
except PackageNotFoundError:
    __version__ = "0.0.0"

logging.getLogger(__name__).addHandler(logging.NullHandler())
