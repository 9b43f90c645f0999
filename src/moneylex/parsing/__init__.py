"""Monetary text and numbers to exact subunit counts.

- parse_amount() raises on malformed input; there are no partial results
- All functions are pure apart from registry lookups and are thread-safe
- Integer results are Python ints (no overflow); Decimal only under
  infinite precision

Public API:
    Parsing Functions:
        parse_amount - Free-form text ("$1,234.56", "1.5M", "R$ 10") -> AmountResult
        from_integer - Whole units -> AmountResult
        from_decimal - Decimal units -> AmountResult
        from_float - float units -> AmountResult
        from_string - Plain decimal literal -> AmountResult
        from_numeric - Any supported number -> AmountResult

    Building Blocks:
        resolve_currency / scan_iso_code / SymbolTable - Currency detection
        extract_multiplier - K/M/B/T suffix exponent
        clean_amount / disambiguate - Thousands separator vs. decimal mark
        compute_subunits - Digit strings -> subunit count

Example:
    >>> from moneylex.parsing import parse_amount
    >>> parse_amount("1.234,56 EUR")
    AmountResult(subunits=123456, currency='EUR')

Python 3.13+. Uses Babel CLDR data for currency metadata.
"""

from .amount import parse_amount
from .delimiters import clean_amount, disambiguate
from .multiplier import extract_multiplier
from .numeric import from_decimal, from_float, from_integer, from_numeric, from_string
from .subunits import compute_subunits, round_minor
from .symbols import DEFAULT_SYMBOL_TABLE, SymbolTable, resolve_currency, scan_iso_code
from .types import AmountResult, ParsedAmount, Subunits

__all__ = [
    # Types
    "AmountResult",
    "ParsedAmount",
    "Subunits",
    # Building blocks
    "DEFAULT_SYMBOL_TABLE",
    "SymbolTable",
    "clean_amount",
    "compute_subunits",
    "disambiguate",
    "extract_multiplier",
    "resolve_currency",
    "round_minor",
    "scan_iso_code",
    # Parsing functions
    "from_decimal",
    "from_float",
    "from_integer",
    "from_numeric",
    "from_string",
    "parse_amount",
]
