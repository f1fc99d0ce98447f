"""Canonical ordering of dotted sutra numerals."""

from __future__ import annotations


def sutra_sort_key(rule_id: str) -> tuple[int, ...]:
    """``"1.2.9"`` sorts before ``"1.2.64"``; non-numeric ids sort last."""
    try:
        return tuple(int(part) for part in rule_id.split("."))
    except ValueError:
        return (10**9,)
