"""moneylex - Free-form monetary text to exact subunit counts.

Parses human-authored amounts such as "$1,234.56", "R$ 1.234,56", "1.5M"
or "-£12" into an integer count of the currency's smallest unit plus the
currency it names. Resolves thousands-separator vs. decimal-mark ambiguity,
magnitude suffixes (K/M/B/T), and currency symbols that prefix one another.

Public API:
    parse_amount - Text -> AmountResult
    from_numeric - int/float/Decimal/Fraction -> AmountResult
    AmountResult - (subunits, currency) pair
    ParserConfig - Per-call parse policy (symbol inference, precision)
    CurrencyRegistry - Currency metadata lookup (CLDR plus custom currencies)

Exceptions:
    MoneyLexError - Base exception class
    InvalidAmountError - Text does not match the amount grammar
    UnsupportedValueTypeError - Value is not a supported kind
    UnknownCurrencyError - Currency not known to the registry

Submodules:
    moneylex.parsing - Parsing functions and their building blocks
    moneylex.currency - CurrencyContext and CurrencyRegistry
    moneylex.diagnostics - Error types, codes, and formatting
"""

from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _get_version

from .config import DEFAULT_CONFIG, ParserConfig
from .currency import CurrencyContext, CurrencyRegistry
from .diagnostics import (
    InvalidAmountError,
    MoneyLexError,
    UnknownCurrencyError,
    UnsupportedValueTypeError,
)
from .parsing import (
    AmountResult,
    from_decimal,
    from_float,
    from_integer,
    from_numeric,
    from_string,
    parse_amount,
)

# Version information - Auto-populated from package metadata
# SINGLE SOURCE OF TRUTH: pyproject.toml [project] version
try:
    __version__ = _get_version("moneylex")
except PackageNotFoundError:
    # Development mode: package not installed yet
    # Run: uv sync
    __version__ = "0.0.0+dev"

__all__ = [
    "DEFAULT_CONFIG",
    "AmountResult",
    "CurrencyContext",
    "CurrencyRegistry",
    "InvalidAmountError",
    "MoneyLexError",
    "ParserConfig",
    "UnknownCurrencyError",
    "UnsupportedValueTypeError",
    "__version__",
    "from_decimal",
    "from_float",
    "from_integer",
    "from_numeric",
    "from_string",
    "parse_amount",
]
