"""Currency metadata consumed by the amount parser.

Public API:
    CurrencyContext - Decimal mark, subunit ratio, and decimal places
    CurrencyRegistry - Identifier lookup over CLDR plus custom currencies
    get_default_registry - Process-wide registry (default currency USD)
    clear_registry_cache - Drop cached CLDR lookups

Python 3.13+. Uses Babel for CLDR currency data.
"""

from .registry import (
    CurrencyCode,
    CurrencyContext,
    CurrencyRegistry,
    clear_registry_cache,
    get_default_registry,
)

__all__ = [
    "CurrencyCode",
    "CurrencyContext",
    "CurrencyRegistry",
    "clear_registry_cache",
    "get_default_registry",
]
