"""Shared constants for moneylex.

This module provides centralized configuration constants used across the
currency and parsing packages. Placing constants here avoids circular
imports and provides a single source of truth.

Constants are grouped by domain:
- Symbol data: Currency symbol to ISO 4217 code table
- Multiplier data: Magnitude suffixes and their power-of-ten exponents
- Currency data: Decimal mark conventions and non-decimal subunits
- Cache limits: Memory bounds for registry caching

Python 3.13+. Zero external dependencies.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Symbol data
    "CURRENCY_SYMBOLS",
    # Multiplier data
    "MULTIPLIER_SUFFIXES",
    # Currency data
    "COMMA_DECIMAL_MARK_CURRENCIES",
    "DEFAULT_CURRENCY",
    "DEFAULT_DECIMAL_MARK",
    "DEFAULT_DECIMAL_PLACES",
    "NON_DECIMAL_SUBUNITS",
    "SUBUNIT_SHIFT_FACTOR",
    # Cache limits
    "MAX_CURRENCY_CACHE_SIZE",
    "MAX_LOCALE_CACHE_SIZE",
]

# ============================================================================
# SYMBOL DATA
# ============================================================================

# Literal symbol -> ISO 4217 code, in reference order.
# "R$" is a textual extension of "R" and "C$" of "$"; SymbolTable sorts
# longest-first, so the order here only matters among equal-length symbols.
CURRENCY_SYMBOLS: tuple[tuple[str, str], ...] = (
    ("$", "USD"),
    ("€", "EUR"),  # Euro sign
    ("£", "GBP"),  # Pound sign
    ("₤", "GBP"),  # Lira sign, used for GBP
    ("R$", "BRL"),
    ("R", "ZAR"),
    ("¥", "JPY"),  # Yen sign
    ("C$", "CAD"),
)

# ============================================================================
# MULTIPLIER DATA
# ============================================================================

# Magnitude suffix -> power-of-ten exponent. Matched case-insensitively.
MULTIPLIER_SUFFIXES: dict[str, int] = {
    "K": 3,
    "M": 6,
    "B": 9,
    "T": 12,
}

# Subunits added per digit group pulled up by a multiplier suffix.
# Fixed at 100 regardless of the currency's real subunit ratio.
SUBUNIT_SHIFT_FACTOR: int = 100

# ============================================================================
# CURRENCY DATA
# ============================================================================

DEFAULT_CURRENCY: str = "USD"

DEFAULT_DECIMAL_MARK: str = "."

# Used for registered currencies that do not state their own precision.
DEFAULT_DECIMAL_PLACES: int = 2

# Currencies whose conventional decimal mark is a comma.
COMMA_DECIMAL_MARK_CURRENCIES: frozenset[str] = frozenset({
    "ANG", "ARS", "BRL", "CLP", "COP", "CRC", "CZK", "DKK",
    "EUR", "HRK", "HUF", "IDR", "ISK", "NOK", "PLN", "PYG",
    "RON", "RUB", "SEK", "TRY", "UYU", "VND",
})

# Currencies whose subunit is not a power of ten: code -> (subunit_to_unit, decimal_places).
NON_DECIMAL_SUBUNITS: dict[str, tuple[int, int]] = {
    "MGA": (5, 1),  # Malagasy ariary: 1 ariary = 5 iraimbilanja
    "MRU": (5, 1),  # Mauritanian ouguiya: 1 ouguiya = 5 khoums
}

# ============================================================================
# CACHE LIMITS
# ============================================================================

# Maximum CLDR currency contexts kept by the registry lookup cache.
MAX_CURRENCY_CACHE_SIZE: int = 256

# Maximum parsed Babel locales kept for decimal-mark overrides.
MAX_LOCALE_CACHE_SIZE: int = 128
