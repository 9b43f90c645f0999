"""Amount parsing: free-form monetary text to a subunit count.

Pipeline:
    1. Trim the input
    2. Resolve the currency (symbol, ISO code, caller default, registry default)
    3. Detect a K/M/B/T multiplier suffix
    4. Clean to digits/separators and extract the sign
    5. Split into major/minor digits (thousands separator vs. decimal mark)
    6. Compute the subunit count under the configured precision policy

Errors from any step propagate unchanged.

Thread-safe. No shared mutable state beyond the registry.

Python 3.13+.
"""

from __future__ import annotations

import logging

from moneylex.config import DEFAULT_CONFIG, ParserConfig
from moneylex.currency import CurrencyCode, CurrencyRegistry, get_default_registry
from moneylex.diagnostics import ErrorTemplate, UnsupportedValueTypeError

from .delimiters import clean_amount, disambiguate
from .multiplier import extract_multiplier
from .subunits import compute_subunits
from .symbols import resolve_currency, scan_iso_code
from .types import AmountResult, ParsedAmount

__all__ = ["parse_amount"]

logger = logging.getLogger(__name__)


def parse_amount(
    value: str,
    currency: CurrencyCode | None = None,
    *,
    config: ParserConfig | None = None,
    registry: CurrencyRegistry | None = None,
) -> AmountResult:
    """Parse monetary text into a subunit count and currency.

    A currency found in the text takes precedence over the currency
    argument. With ``config.assume_from_symbol`` a leading symbol ("$",
    "R$", "€", ...) is tried first; an embedded 2-3 letter uppercase code
    is always tried. When neither is present the currency argument is used,
    then the registry's default.

    Args:
        value: Amount text (e.g., "$1,234.56", "1.234,56 EUR", "-1.5M")
        currency: Currency to use when the text names none
        config: Parse policy (default: DEFAULT_CONFIG)
        registry: Currency metadata source (default: get_default_registry())

    Returns:
        AmountResult with the signed subunit count and resolved currency.

    Raises:
        InvalidAmountError: If the text has a stray hyphen or 3+ separators
        UnknownCurrencyError: If the resolved currency is not in the registry
        UnsupportedValueTypeError: If value is not a string

    Examples:
        >>> parse_amount("$1,234.56")
        AmountResult(subunits=123456, currency='USD')

        >>> parse_amount("1.234,56 EUR")
        AmountResult(subunits=123456, currency='EUR')

        >>> parse_amount("R$ 10", config=ParserConfig(assume_from_symbol=True))
        AmountResult(subunits=1000, currency='BRL')

        >>> parse_amount("1.5M")
        AmountResult(subunits=150000000, currency='USD')

    Thread Safety:
        Thread-safe.
    """
    # Type check: value must be string (runtime defense for untyped callers)
    if not isinstance(value, str):
        diagnostic = ErrorTemplate.value_type_unsupported(  # type: ignore[unreachable]
            type(value).__name__, "str"
        )
        raise UnsupportedValueTypeError(diagnostic, received_type=type(value).__name__)

    config = config or DEFAULT_CONFIG
    registry = registry or get_default_registry()

    text = value.strip()

    if config.assume_from_symbol:
        computed = resolve_currency(text)
    else:
        computed = scan_iso_code(text)

    if computed is None:
        code = currency or registry.default_identifier()
        logger.debug("No currency in '%s', using %s", text, code)
    else:
        code = computed

    context = registry.lookup(code)

    exponent = extract_multiplier(text)
    num, is_negative = clean_amount(text)
    major, minor = disambiguate(num, context.decimal_mark)

    parsed = ParsedAmount(
        major_digits=major,
        minor_digits=minor,
        is_negative=is_negative,
        multiplier_exponent=exponent,
    )
    subunits = compute_subunits(
        parsed, context, infinite_precision=config.infinite_precision
    )
    return AmountResult(subunits=subunits, currency=context.code)
