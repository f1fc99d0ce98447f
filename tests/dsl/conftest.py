"""Shared fixtures and helpers for DSL test modules."""

from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml

from paribhasha.model import WordRecord, Words
from paribhasha.parsers.words import prepare_input


def _minimal_rule(**overrides: Any) -> dict[str, Any]:
    """Return a minimal valid rule dict, merged with *overrides*."""
    base: dict[str, Any] = {
        "rule_id": "9.9.1",
        "version": 1,
        "priority_class": "general",
        "scope_tags": ["ekasesha"],
        "metadata": {
            "title": "Test rule",
            "description": "Test description",
            "confidence": 0.5,
        },
        "match": {"strategy": "identical_forms"},
        "action": {"strategy": "retain_selection"},
    }
    base.update(overrides)
    return base


def _write_rule_file(directory: Path, name: str, data: Any) -> Path:
    """Write *data* as YAML to ``directory/name`` and return the path."""
    directory.mkdir(parents=True, exist_ok=True)
    path = directory / name
    path.write_text(yaml.safe_dump(data, allow_unicode=True, sort_keys=False), encoding="utf-8")
    return path


def _words(*items: Any) -> Words:
    """Normalize word items the same way ``resolve`` does."""
    prepared = prepare_input(list(items))
    assert prepared.validation.is_valid, prepared.validation.message
    return prepared.words


def _word(**fields: Any) -> WordRecord:
    return _words(fields)[0]
