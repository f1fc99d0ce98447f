"""Engine configuration loading and validation."""

from __future__ import annotations

from paribhasha.config.loader import load_config
from paribhasha.config.model import EngineConfig

__all__ = ["EngineConfig", "load_config"]
