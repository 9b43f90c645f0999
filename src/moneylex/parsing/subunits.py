"""Subunit computation from major/minor digit strings.

Two precision policies:
    - Fixed (default): fractional digits are rounded to the currency's
      decimal places using single-digit round-half-up. Result is an int.
    - Infinite: fractional digits are kept exactly as a Decimal fraction of
      a subunit. Result is a Decimal, possibly non-integral.

Multiplier suffixes shift fractional digits into the whole part. Each
shifted digit group adds SUBUNIT_SHIFT_FACTOR (100) subunits per unit of
its integer value, independent of the currency's actual subunit ratio.
For 2-decimal currencies this equals exact scaling; for others it does not,
and that behavior is kept as is.

Python 3.13+.
"""

from __future__ import annotations

from decimal import Decimal, localcontext

from moneylex.constants import SUBUNIT_SHIFT_FACTOR
from moneylex.currency import CurrencyContext

from .types import ParsedAmount, Subunits

__all__ = ["compute_subunits", "round_minor"]


def round_minor(minor: str, decimal_places: int) -> int:
    """Fit fractional digits to decimal_places, as an integer subunit count.

    Shorter strings are right-padded with zeros. Longer strings are cut
    after decimal_places digits and rounded up when the first dropped digit
    is 5 or more. Only that one digit is inspected.

    Example:
        >>> round_minor("5", 2)
        50
        >>> round_minor("234", 2)
        23
        >>> round_minor("235", 2)
        24
        >>> round_minor("9", 0)
        1
    """
    if len(minor) < decimal_places:
        return _digits_to_int(minor.ljust(decimal_places, "0"))
    if len(minor) > decimal_places:
        kept = _digits_to_int(minor[:decimal_places])
        if int(minor[decimal_places]) >= 5:
            return kept + 1
        return kept
    return _digits_to_int(minor)


def _digits_to_int(digits: str) -> int:
    """ASCII digit string to int, with no interpreter digit-count limit."""
    if not digits:
        return 0
    # Decimal parsing has no int_max_str_digits limit
    return int(Decimal(digits))


def _decimal_digits(value: int) -> int:
    """Upper bound on the decimal digit count of value."""
    return abs(value).bit_length() // 3 + 1


def _exact_fraction(minor: str, subunit_to_unit: int) -> Decimal:
    """Fractional digits as an exact Decimal count of subunits."""
    if not minor:
        return Decimal(0)
    # Precision wide enough that the division and product are exact
    with localcontext() as ctx:
        ctx.prec = max(ctx.prec, len(minor) + len(str(subunit_to_unit)) + 2)
        return Decimal(minor).scaleb(-len(minor)) * subunit_to_unit


def compute_subunits(
    parsed: ParsedAmount,
    context: CurrencyContext,
    *,
    infinite_precision: bool = False,
) -> Subunits:
    """Combine a parsed amount with currency metadata into a subunit count.

    Args:
        parsed: Major/minor digits, sign, and multiplier exponent
        context: Currency subunit metadata
        infinite_precision: Keep fractional subunits exact (Decimal result)

    Returns:
        Signed subunit count: int, or Decimal under infinite precision.

    Example:
        >>> usd = CurrencyContext("USD", ".", 100, 2)
        >>> compute_subunits(ParsedAmount("1234", "56"), usd)
        123456
        >>> compute_subunits(ParsedAmount("1", "5", multiplier_exponent=6), usd)
        150000000
    """
    exponent = parsed.multiplier_exponent

    whole = _digits_to_int(parsed.major_digits) * context.subunit_to_unit
    whole *= 10**exponent

    minor = parsed.minor_digits + "0" * exponent
    whole += _digits_to_int(minor[:exponent]) * SUBUNIT_SHIFT_FACTOR
    minor = minor[exponent:]

    if infinite_precision:
        fraction = _exact_fraction(minor, context.subunit_to_unit)
        with localcontext() as ctx:
            ctx.prec = max(
                ctx.prec,
                _decimal_digits(whole) + len(minor) + len(str(context.subunit_to_unit)) + 2,
            )
            exact = whole + fraction
            # Negation rounds to the context precision too
            return -exact if parsed.is_negative else exact

    subunits = whole + round_minor(minor, context.decimal_places)

    return -subunits if parsed.is_negative else subunits
