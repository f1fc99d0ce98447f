"""Config loading and normalization for ``paribhasha.yaml``."""

from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml

from paribhasha.config.model import EngineConfig
from paribhasha.constants.config import ALLOWED_CONFIG_KEYS, CONFIG_FILENAME
from paribhasha.constants.context import DEFAULT_SCOPE
from paribhasha.constants.engine import DEFAULT_MAX_CANDIDATES, DEFAULT_TIE_BREAK, VALID_TIE_BREAKS
from paribhasha.exceptions import ConfigError


def load_config(root: Path, config_path: Path | None = None) -> EngineConfig:
    """Load and validate engine config from ``paribhasha.yaml`` or an explicit path.

    Relative ``rules_dir`` and ``rule_files`` entries resolve against the
    directory holding the config file.
    """
    root = root.resolve()
    path = config_path.resolve() if config_path else (root / CONFIG_FILENAME)
    if not path.exists():
        if config_path is not None:
            raise ConfigError(f"Config file not found: {path}")
        return EngineConfig()

    try:
        raw = yaml.safe_load(path.read_text(encoding="utf-8"))
    except yaml.YAMLError as exc:
        raise ConfigError(f"Invalid YAML config file at {path}: {exc}") from exc

    if raw is None:
        raw = {}
    if not isinstance(raw, dict):
        raise ConfigError(f"Config file at {path} must be a YAML mapping")

    unknown = set(raw) - ALLOWED_CONFIG_KEYS
    if unknown:
        raise ConfigError(f"Unknown config keys in {path}: {sorted(unknown)}")

    max_candidates = raw.get("max_candidates", DEFAULT_MAX_CANDIDATES)
    if isinstance(max_candidates, bool) or not isinstance(max_candidates, int) or max_candidates <= 0:
        raise ConfigError("max_candidates must be a positive integer")

    tie_break = raw.get("tie_break", DEFAULT_TIE_BREAK)
    if not isinstance(tie_break, str) or tie_break not in VALID_TIE_BREAKS:
        raise ConfigError(f"tie_break must be one of {sorted(VALID_TIE_BREAKS)}, got {tie_break!r}")

    default_scope = tuple(
        tag.strip()
        for tag in _ensure_string_list(raw.get("default_scope", list(DEFAULT_SCOPE)), "default_scope")
        if tag.strip()
    )
    if not default_scope:
        raise ConfigError("default_scope must name at least one scope tag")

    base_dir = path.parent
    rules_dir_raw = raw.get("rules_dir")
    if rules_dir_raw is not None and not isinstance(rules_dir_raw, str):
        raise ConfigError("rules_dir must be a string path")
    rule_files_raw = raw.get("rule_files")
    if rules_dir_raw is not None and rule_files_raw is not None:
        raise ConfigError("Rules source conflict: choose either rules_dir or rule_files, not both.")

    rule_files: tuple[Path, ...] | None = None
    if rule_files_raw is not None:
        rule_files = tuple(base_dir / entry for entry in _ensure_string_list(rule_files_raw, "rule_files"))

    return EngineConfig(
        max_candidates=max_candidates,
        tie_break=tie_break,
        default_scope=default_scope,
        rules_dir=(base_dir / rules_dir_raw) if rules_dir_raw is not None else None,
        rule_files=rule_files,
        disabled_rules=tuple(_ensure_string_list(raw.get("disabled_rules", []), "disabled_rules")),
    )


def _ensure_string_list(value: Any, key_name: str) -> list[str]:
    """Coerce a value to a list of strings, raising ConfigError on type mismatch."""
    if value is None:
        return []
    if not isinstance(value, (list, tuple)) or not all(isinstance(item, str) for item in value):
        raise ConfigError(f"{key_name} must be a list of strings")
    return list(value)
