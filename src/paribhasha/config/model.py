"""Config data model for the sutra engine."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from paribhasha.constants.context import DEFAULT_SCOPE
from paribhasha.constants.engine import DEFAULT_MAX_CANDIDATES, DEFAULT_TIE_BREAK
from paribhasha.types.common import TieBreakPolicy


@dataclass(frozen=True)
class EngineConfig:
    """Resolved engine config."""

    max_candidates: int = DEFAULT_MAX_CANDIDATES
    tie_break: TieBreakPolicy = DEFAULT_TIE_BREAK
    default_scope: tuple[str, ...] = DEFAULT_SCOPE
    rules_dir: Path | None = None
    rule_files: tuple[Path, ...] | None = None
    disabled_rules: tuple[str, ...] = ()
