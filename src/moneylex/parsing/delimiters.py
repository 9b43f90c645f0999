"""Separator disambiguation: thousands separator vs. decimal mark.

Splits an amount into whole-unit (major) and fractional (minor) digit
strings. The same character can group thousands in one amount and mark the
decimal point in another, so the split depends on how many distinct
separators appear, how often, and how wide the digit groups are.

Rules for a single distinct separator that differs from the currency's own
decimal mark (e.g. "1,234" for a "." currency):
    - Fraction part not exactly 3 digits      -> decimal mark ("1,5")
    - Whole part longer than 3 digits         -> decimal mark ("1234,567")
    - Separator is "."                        -> decimal mark ("1.234")
    - Otherwise                               -> thousands separator ("1,234")

Thread-safe. Pure functions.

Python 3.13+.
"""

from __future__ import annotations

import re

from moneylex.diagnostics import ErrorTemplate, InvalidAmountError

__all__ = ["clean_amount", "disambiguate"]

# Everything except ASCII digits, the three separators, and the minus sign.
_NON_AMOUNT_CHARS = re.compile(r"[^0-9.,'-]")
_EDGE_MINUS = re.compile(r"^-|-$")
_TRAILING_SEPARATOR = re.compile(r"[.,]$")
_SEPARATOR = re.compile(r"[^0-9]")

# A group of exactly this many digits after a lone separator reads as thousands.
_THOUSANDS_GROUP_WIDTH = 3


def clean_amount(text: str) -> tuple[str, bool]:
    """Reduce text to digits and separators, extracting the sign.

    Args:
        text: Trimmed amount text (symbols, codes, suffixes are dropped)

    Returns:
        Tuple of (cleaned, is_negative). A leading or trailing '-' marks the
        amount negative; one trailing '.' or ',' is dropped.

    Raises:
        InvalidAmountError: If a '-' remains anywhere but the edges

    Example:
        >>> clean_amount("-$1,234.56")
        ('1,234.56', True)
        >>> clean_amount("12. EUR")
        ('12', False)
    """
    num = _NON_AMOUNT_CHARS.sub("", text)

    is_negative = _EDGE_MINUS.search(num) is not None
    if is_negative:
        num = _EDGE_MINUS.sub("", num, count=1)

    if "-" in num:
        raise InvalidAmountError(ErrorTemplate.amount_hyphen(text), input_value=text)

    if _TRAILING_SEPARATOR.search(num):
        num = num[:-1]

    return num, is_negative


def _split(num: str, mark: str) -> tuple[str, str]:
    """Split on mark, keeping the first two fields ("" when missing)."""
    parts = num.split(mark)
    major = parts[0]
    minor = parts[1] if len(parts) > 1 else ""
    return major, minor


def disambiguate(num: str, decimal_mark: str) -> tuple[str, str]:
    """Split a cleaned amount into major and minor digit strings.

    Args:
        num: Output of clean_amount() (digits plus '.', ',' or "'")
        decimal_mark: The currency's own decimal mark

    Returns:
        Tuple of (major, minor) digit strings. Either may be empty, which
        reads as zero.

    Raises:
        InvalidAmountError: If three or more distinct separators appear

    Example:
        >>> disambiguate("1,234.56", ".")
        ('1234', '56')
        >>> disambiguate("1.234,56", ",")
        ('1234', '56')
        >>> disambiguate("1,234", ".")
        ('1234', '0')
        >>> disambiguate("1.234", ",")
        ('1', '234')
    """
    used = list(dict.fromkeys(_SEPARATOR.findall(num)))

    match len(used):
        case 0:
            return num, "0"

        case 1:
            sep = used[0]

            if sep == decimal_mark:
                return _split(num, sep)

            if num.count(sep) > 1:
                # Repeated separator can only be grouping
                return num.replace(sep, ""), "0"

            possible_major, possible_minor = _split(num, sep)
            possible_major = possible_major or "0"
            possible_minor = possible_minor or "00"

            if (
                len(possible_minor) != _THOUSANDS_GROUP_WIDTH
                or len(possible_major) > _THOUSANDS_GROUP_WIDTH
                or sep == "."
            ):
                return possible_major, possible_minor
            return possible_major + possible_minor, "0"

        case 2:
            # Positional: grouping comes before the fraction
            thousands_separator, mark = used
            return _split(num.replace(thousands_separator, ""), mark)

        case _:
            diagnostic = ErrorTemplate.amount_too_many_separators(num, "".join(used))
            raise InvalidAmountError(diagnostic, input_value=num)
