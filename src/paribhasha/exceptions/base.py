"""Root exception for paribhasha."""

from __future__ import annotations


class ParibhashaError(Exception):
    """Base class for all errors raised by paribhasha."""
