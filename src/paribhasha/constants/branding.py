"""CLI branding strings."""

from __future__ import annotations

CLI_DESCRIPTION: str = (
    "paribhasha: decide which sutra governs a word group.\n"
    "Evaluates every candidate rule, arbitrates by priority class and specificity, "
    "and reports the winning rule together with its retained and dropped forms."
)
