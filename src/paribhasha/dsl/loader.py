"""Load YAML rule files into a rule registry.

Sources are either the bundled rule pack, a custom directory, or an
explicit list of files. Rules register in sutra order, which becomes
their declaration order.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from pathlib import Path
from typing import Any

import yaml

from paribhasha.constants.dsl_schema import RULE_FILE_SUFFIX
from paribhasha.dsl.compiler import compile_rule
from paribhasha.engine.registry import RuleRegistry
from paribhasha.exceptions import ConfigError
from paribhasha.model import RuleDescriptor
from paribhasha.utils.sorting import sutra_sort_key

logger = logging.getLogger(__name__)

RULES_DIR: Path = Path(__file__).parent / "rules"


def load_rule_pack(
    rules_dir: Path | None = None,
    rule_files: tuple[Path, ...] | None = None,
    rule_ids: frozenset[str] | None = None,
    disabled_rules: Iterable[str] = (),
) -> RuleRegistry:
    """Compile rule files into an unfrozen registry.

    Raises ConfigError on unreadable sources, schema violations and
    duplicate rule ids.
    """
    disabled = frozenset(disabled_rules)
    loaded_sources: dict[str, Path] = {}
    compiled: list[RuleDescriptor] = []

    for path in collect_rule_paths(rules_dir, rule_files):
        raw = load_rule_file(path)
        rule_id = raw.get("rule_id")

        if rule_ids is not None and rule_id not in rule_ids:
            continue
        if rule_id in disabled:
            logger.info("Rule %s disabled by config", rule_id)
            continue

        descriptor = compile_rule(raw, str(path))
        previous_source = loaded_sources.get(descriptor.rule_id)
        if previous_source is not None:
            raise ConfigError(
                f"Duplicate rule_id '{descriptor.rule_id}' loaded from {previous_source} and {path}"
            )
        loaded_sources[descriptor.rule_id] = path
        compiled.append(descriptor)
        logger.debug("Loaded rule %s from %s", descriptor.rule_id, path.name)

    for unknown in sorted(disabled - set(loaded_sources)):
        logger.warning("Unknown rule id in disabled_rules ignored: %s", unknown)

    compiled.sort(key=lambda d: sutra_sort_key(d.rule_id))
    return RuleRegistry(compiled)


def collect_rule_paths(
    rules_dir: Path | None = None,
    rule_files: tuple[Path, ...] | None = None,
) -> list[Path]:
    """Resolve the YAML files to load. Defaults to the bundled pack."""
    if rules_dir is not None and rule_files is not None:
        raise ConfigError("Rules source conflict: choose either rules_dir or rule_files, not both.")

    if rule_files is not None:
        paths: list[Path] = []
        for rule_file in rule_files:
            resolved = rule_file.resolve()
            if not resolved.is_file():
                raise ConfigError(f"Rule file not found: {resolved}")
            if resolved.suffix.lower() != RULE_FILE_SUFFIX:
                raise ConfigError(f"Rule file must use {RULE_FILE_SUFFIX} extension: {resolved.name}")
            paths.append(resolved)
        return paths

    directory = (rules_dir if rules_dir is not None else RULES_DIR).resolve()
    if not directory.is_dir():
        raise ConfigError(f"Rules directory not found: {directory}")
    return sorted(directory.glob(f"*{RULE_FILE_SUFFIX}"))


def load_rule_file(path: Path) -> dict[str, Any]:
    try:
        raw = yaml.safe_load(path.read_text(encoding="utf-8"))
    except OSError as exc:
        raise ConfigError(f"Failed to read rule file {path}: {exc}") from exc
    except yaml.YAMLError as exc:
        raise ConfigError(f"Invalid YAML in {path}: {exc}") from exc

    if not isinstance(raw, dict):
        raise ConfigError(f"Rule file {path} must contain a mapping")
    return raw
