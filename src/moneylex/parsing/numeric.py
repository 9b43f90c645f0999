"""Numeric entry points: numbers (not text) to a subunit count.

- from_integer: whole units, exact
- from_decimal: rounded half-up to whole subunits (exact under infinite precision)
- from_float: via the float's shortest repr, so 0.1 means Decimal("0.1")
- from_string: plain decimal literal, no grouping or symbols
- from_numeric: dispatch on type, rejecting non-numeric kinds

Python 3.13+.
"""

from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal, InvalidOperation, localcontext
from fractions import Fraction

from moneylex.config import DEFAULT_CONFIG, ParserConfig
from moneylex.currency import CurrencyCode, CurrencyContext, CurrencyRegistry, get_default_registry
from moneylex.diagnostics import ErrorTemplate, InvalidAmountError, UnsupportedValueTypeError

from .types import AmountResult

__all__ = [
    "from_decimal",
    "from_float",
    "from_integer",
    "from_numeric",
    "from_string",
]

_NUMERIC_KINDS = "int, float, Decimal, or Fraction"

# Significant digits kept beyond the whole part when a Fraction does not terminate.
_FRACTION_EXTRA_DIGITS = 50


def _resolve_context(
    currency: CurrencyCode | None,
    registry: CurrencyRegistry | None,
) -> CurrencyContext:
    registry = registry or get_default_registry()
    return registry.lookup(currency or registry.default_identifier())


def from_integer(
    value: int,
    currency: CurrencyCode | None = None,
    *,
    registry: CurrencyRegistry | None = None,
) -> AmountResult:
    """Convert a whole number of units to subunits.

    Example:
        >>> from_integer(12, "USD")
        AmountResult(subunits=1200, currency='USD')
    """
    context = _resolve_context(currency, registry)
    return AmountResult(subunits=value * context.subunit_to_unit, currency=context.code)


def from_decimal(
    value: Decimal,
    currency: CurrencyCode | None = None,
    *,
    config: ParserConfig | None = None,
    registry: CurrencyRegistry | None = None,
) -> AmountResult:
    """Convert a Decimal number of units to subunits.

    Rounds half-up to a whole subunit unless ``config.infinite_precision``
    is set, in which case the exact Decimal product is returned.

    Raises:
        InvalidAmountError: If value is NaN or infinite

    Example:
        >>> from_decimal(Decimal("1.005"), "USD")
        AmountResult(subunits=101, currency='USD')
    """
    if not value.is_finite():
        raise InvalidAmountError(ErrorTemplate.amount_not_finite(str(value)), input_value=str(value))

    config = config or DEFAULT_CONFIG
    context = _resolve_context(currency, registry)

    digits = len(value.as_tuple().digits)
    with localcontext() as ctx:
        ctx.prec = max(ctx.prec, digits + len(str(context.subunit_to_unit)) + 2)
        scaled = value * context.subunit_to_unit
        if config.infinite_precision:
            return AmountResult(subunits=scaled, currency=context.code)
        rounded = scaled.to_integral_value(rounding=ROUND_HALF_UP)
    return AmountResult(subunits=int(rounded), currency=context.code)


def from_float(
    value: float,
    currency: CurrencyCode | None = None,
    *,
    config: ParserConfig | None = None,
    registry: CurrencyRegistry | None = None,
) -> AmountResult:
    """Convert a float number of units to subunits.

    The float's shortest round-trip repr is used, not its binary expansion.

    Example:
        >>> from_float(0.1, "USD")
        AmountResult(subunits=10, currency='USD')
    """
    return from_decimal(Decimal(repr(value)), currency, config=config, registry=registry)


def from_string(
    value: str,
    currency: CurrencyCode | None = None,
    *,
    config: ParserConfig | None = None,
    registry: CurrencyRegistry | None = None,
) -> AmountResult:
    """Convert a plain decimal literal ("12.34", "-5", "1e3") to subunits.

    Unlike parse_amount(), no symbols, codes, grouping, or suffixes are
    understood.

    Raises:
        InvalidAmountError: If value is not a finite decimal literal
    """
    try:
        number = Decimal(value.strip())
    except InvalidOperation as e:
        diagnostic = ErrorTemplate.amount_invalid(value, "not a decimal literal")
        raise InvalidAmountError(diagnostic, input_value=value) from e
    return from_decimal(number, currency, config=config, registry=registry)


def from_numeric(
    value: object,
    currency: CurrencyCode | None = None,
    *,
    config: ParserConfig | None = None,
    registry: CurrencyRegistry | None = None,
) -> AmountResult:
    """Convert any supported number of units to subunits.

    Raises:
        UnsupportedValueTypeError: If value is not int, float, Decimal, or
            Fraction. bool is rejected even though it subclasses int.
    """
    match value:
        case bool():
            pass
        case int():
            return from_integer(value, currency, registry=registry)
        case float():
            return from_float(value, currency, config=config, registry=registry)
        case Decimal():
            return from_decimal(value, currency, config=config, registry=registry)
        case Fraction() if value.denominator == 1:
            return from_integer(value.numerator, currency, registry=registry)
        case Fraction():
            with localcontext() as ctx:
                ctx.prec = max(
                    ctx.prec, value.numerator.bit_length() // 3 + 1 + _FRACTION_EXTRA_DIGITS
                )
                number = Decimal(value.numerator) / Decimal(value.denominator)
            return from_decimal(number, currency, config=config, registry=registry)

    received = type(value).__name__
    diagnostic = ErrorTemplate.value_type_unsupported(received, _NUMERIC_KINDS)
    raise UnsupportedValueTypeError(diagnostic, received_type=received)
