"""Stable error codes for collect-all rule validation."""

from __future__ import annotations

RULE001: str = "RULE001"  # rule source missing or unreadable
RULE002: str = "RULE002"  # wrong file extension
RULE003: str = "RULE003"  # invalid YAML
RULE004: str = "RULE004"  # rule file is not a mapping
RULE005: str = "RULE005"  # schema violation
RULE006: str = "RULE006"  # duplicate rule_id
RULE007: str = "RULE007"  # rules_dir and rule_files both given
