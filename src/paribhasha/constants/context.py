"""Context flags and scope-tag signals for the ekaśeṣa rule family."""

from __future__ import annotations

FAMILY_TAG: str = "ekasesha"
DEFAULT_SCOPE: tuple[str, ...] = (FAMILY_TAG,)

# A scope tag is satisfied when the context or a word carries a truthy value
# under the tag itself or one of these aliases.
TAG_ALIASES: dict[str, tuple[str, ...]] = {
    "case": ("vibhakti", "force_case_check"),
    "gotra": ("category",),
    "kinship": ("kin",),
    "pronoun": ("sarvanama",),
}

# Flags read by the bundled rules. Anything else in a context is ignored.
KNOWN_CONTEXT_FLAGS: frozenset[str] = frozenset(
    {
        "collection",
        "domain",
        "force_case_check",
        "young",
        "gender",
        *TAG_ALIASES,
        *(alias for aliases in TAG_ALIASES.values() for alias in aliases),
    }
)

FAMILY_MIN_WORDS: int = 2
