"""Configuration defaults and filenames."""

from __future__ import annotations

CONFIG_FILENAME: str = "paribhasha.yaml"

ALLOWED_CONFIG_KEYS: frozenset[str] = frozenset(
    {
        "max_candidates",
        "tie_break",
        "default_scope",
        "rules_dir",
        "rule_files",
        "disabled_rules",
    }
)
