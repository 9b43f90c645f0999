"""Magnitude suffix detection (K/M/B/T)."""

from __future__ import annotations

import re

from moneylex.constants import MULTIPLIER_SUFFIXES

__all__ = ["extract_multiplier"]

# A digit, then the suffix as a whole word, then no further digits.
_SUFFIX_ALTERNATION = "|".join(MULTIPLIER_SUFFIXES)
_MULTIPLIER_PATTERN = re.compile(rf"\d({_SUFFIX_ALTERNATION})\b[^\d]*$", re.IGNORECASE)


def extract_multiplier(text: str) -> int:
    """Return the power-of-ten exponent of a trailing magnitude suffix.

    Example:
        >>> extract_multiplier("$1.5M")
        6
        >>> extract_multiplier("2k USD")
        3
        >>> extract_multiplier("5M 10")
        0
    """
    found = _MULTIPLIER_PATTERN.search(text)
    if found is None:
        return 0
    return MULTIPLIER_SUFFIXES[found.group(1).upper()]
