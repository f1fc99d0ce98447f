"""Schema constants for v1 sutra rule files."""

from __future__ import annotations

VALID_PRIORITY_CLASSES: frozenset[str] = frozenset({"mandatory", "specific", "domain_conditional", "general"})

REQUIRED_TOP_KEYS: frozenset[str] = frozenset(
    {"rule_id", "version", "priority_class", "scope_tags", "metadata", "match", "action"}
)
ALLOWED_TOP_KEYS: frozenset[str] = REQUIRED_TOP_KEYS | {"context"}

REQUIRED_METADATA_KEYS: frozenset[str] = frozenset({"title", "description", "confidence"})
ALLOWED_METADATA_KEYS: frozenset[str] = REQUIRED_METADATA_KEYS | {"text", "reason"}

ALLOWED_CONTEXT_KEYS: frozenset[str] = frozenset({"require", "forbid"})

RULE_FILE_SUFFIX: str = ".yaml"

VALID_PREDICATE_STRATEGIES: frozenset[str] = frozenset(
    {
        "identical_forms",
        "lexical_retention",
        "series_retention",
        "attribute_pairing",
        "attribute_selection",
    }
)
VALID_ACTION_STRATEGIES: frozenset[str] = frozenset({"retain_selection"})

# Match parameters each predicate strategy cannot run without.
REQUIRED_MATCH_PARAMS: dict[str, frozenset[str]] = {
    "identical_forms": frozenset(),
    "lexical_retention": frozenset({"pairs"}),
    "series_retention": frozenset(),
    "attribute_pairing": frozenset({"retain", "against"}),
    "attribute_selection": frozenset({"retain"}),
}

VALID_LEXICON_SCRIPTS: frozenset[str] = frozenset({"iast", "devanagari"})
ACTION_OVERRIDE_KEYS: frozenset[str] = frozenset({"domain", "gender_override", "number_override", "optional"})

# Every match parameter a predicate strategy reads. Anything else is rejected.
ALLOWED_MATCH_PARAMS: dict[str, frozenset[str]] = {
    "identical_forms": frozenset({"strategy", "min_words", "case_check_flag"}),
    "lexical_retention": frozenset({"strategy", "min_words", "pairs", "flag", "flag_confidence"}),
    "series_retention": frozenset({"strategy", "min_words", "series", "flag"}),
    "attribute_pairing": frozenset({"strategy", "min_words", "retain", "against"}),
    "attribute_selection": frozenset({"strategy", "min_words", "retain"}),
}
