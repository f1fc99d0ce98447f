"""Shared pytest fixtures for repository-local test data."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import pytest

from paribhasha.engine import SutraEngine, default_engine

SCHEMAS_DIR: Path = Path(__file__).resolve().parents[1] / "schemas"


@pytest.fixture(scope="session")
def bundled_engine() -> SutraEngine:
    """Return the cached engine over the bundled rule pack."""
    return default_engine()


@pytest.fixture(scope="session")
def resolution_schema() -> dict[str, Any]:
    """Load the resolution envelope JSON Schema."""
    return json.loads((SCHEMAS_DIR / "resolution.schema.json").read_text(encoding="utf-8"))
