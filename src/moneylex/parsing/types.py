"""Value types produced while parsing an amount.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from typing import TypeAlias

__all__ = ["AmountResult", "ParsedAmount", "Subunits"]

Subunits: TypeAlias = int | Decimal
"""Signed subunit count. Decimal only under infinite precision."""


@dataclass(frozen=True, slots=True)
class ParsedAmount:
    """Intermediate split of an amount into digit strings.

    Attributes:
        major_digits: Whole-unit digits (may be empty, read as 0)
        minor_digits: Fractional digits (may be empty, read as 0)
        is_negative: Whether a leading or trailing minus sign was present
        multiplier_exponent: Power of ten from a K/M/B/T suffix (0 if none)
    """

    major_digits: str
    minor_digits: str
    is_negative: bool = False
    multiplier_exponent: int = 0


@dataclass(frozen=True, slots=True)
class AmountResult:
    """Parsed amount as a subunit count plus its currency.

    Attributes:
        subunits: Signed count of the currency's smallest unit (cents for USD)
        currency: Resolved currency identifier
    """

    subunits: Subunits
    currency: str
