"""Currency registry backed by Babel CLDR data.

Maps a currency identifier to the subunit metadata the amount parser needs:
decimal mark, subunit-to-unit ratio, and decimal places. All types are
immutable, hashable, and thread-safe. CLDR lookups are cached.

Lookup order:
    1. Currencies registered on the registry instance (custom or overridden)
    2. ISO 4217 currencies known to CLDR (via Babel)

Python 3.13+.
"""

from __future__ import annotations

import logging
import threading
from dataclasses import dataclass, replace
from functools import lru_cache
from typing import TypeAlias

from babel import Locale
from babel.numbers import get_currency_precision, get_decimal_symbol

from moneylex.constants import (
    COMMA_DECIMAL_MARK_CURRENCIES,
    DEFAULT_CURRENCY,
    DEFAULT_DECIMAL_MARK,
    DEFAULT_DECIMAL_PLACES,
    MAX_CURRENCY_CACHE_SIZE,
    MAX_LOCALE_CACHE_SIZE,
    NON_DECIMAL_SUBUNITS,
)
from moneylex.diagnostics import ErrorTemplate, UnknownCurrencyError

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Type aliases
    "CurrencyCode",
    # Data classes
    "CurrencyContext",
    # Registry
    "CurrencyRegistry",
    "get_default_registry",
    # Cache management
    "clear_registry_cache",
]

logger = logging.getLogger(__name__)

# ISO 4217 currency codes are exactly 3 uppercase ASCII letters.
ISO_CURRENCY_CODE_LENGTH: int = 3


# ============================================================================
# TYPE ALIASES (PEP 695)
# ============================================================================

CurrencyCode: TypeAlias = str
"""ISO 4217 currency code (e.g., 'USD', 'EUR', 'BRL') or a registered identifier."""


# ============================================================================
# DATA CLASSES
# ============================================================================


@dataclass(frozen=True, slots=True)
class CurrencyContext:
    """Subunit metadata for one currency.

    Immutable, thread-safe, hashable.

    Attributes:
        code: Currency identifier (e.g., 'USD').
        decimal_mark: Character separating whole and fractional parts.
        subunit_to_unit: Subunits per major unit (100 for USD, 1 for JPY).
        decimal_places: Fractional digits kept when rounding (2 for USD).
    """

    code: CurrencyCode
    decimal_mark: str
    subunit_to_unit: int
    decimal_places: int

    def __post_init__(self) -> None:
        """Validate CurrencyContext invariants.

        Raises:
            ValueError: If decimal_mark is not a single character,
                subunit_to_unit is less than 1, or decimal_places is negative.
        """
        if len(self.decimal_mark) != 1:
            msg = f"CurrencyContext.decimal_mark must be one character, got {self.decimal_mark!r}"
            raise ValueError(msg)
        if self.subunit_to_unit < 1:
            msg = f"CurrencyContext.subunit_to_unit must be >= 1, got {self.subunit_to_unit}"
            raise ValueError(msg)
        if self.decimal_places < 0:
            msg = f"CurrencyContext.decimal_places must be >= 0, got {self.decimal_places}"
            raise ValueError(msg)


# ============================================================================
# CACHED CLDR LOOKUPS
# ============================================================================


@lru_cache(maxsize=MAX_LOCALE_CACHE_SIZE)
def _get_locale(locale_code: str) -> Locale:
    """Babel Locale for a BCP-47 ("de-DE") or POSIX ("de_DE") code.

    Raises:
        babel.core.UnknownLocaleError: If the locale is not in CLDR
    """
    return Locale.parse(locale_code.replace("-", "_"))


@lru_cache(maxsize=1)
def _get_cldr_currency_codes() -> frozenset[str]:
    """All ISO 4217 codes CLDR knows (English locale has the complete list)."""
    currencies = _get_locale("en").currencies
    return frozenset(
        code for code in currencies
        if len(code) == ISO_CURRENCY_CODE_LENGTH and code.isalpha() and code.isupper()
    )


@lru_cache(maxsize=MAX_CURRENCY_CACHE_SIZE)
def _get_cldr_context(code_upper: str) -> CurrencyContext | None:
    """Internal cached CLDR lookup.

    Args:
        code_upper: Pre-uppercased currency code.

    Returns:
        CurrencyContext if CLDR knows the code, None otherwise.
    """
    if code_upper not in _get_cldr_currency_codes():
        return None

    if code_upper in NON_DECIMAL_SUBUNITS:
        subunit_to_unit, decimal_places = NON_DECIMAL_SUBUNITS[code_upper]
    else:
        decimal_places = get_currency_precision(code_upper)
        subunit_to_unit = 10**decimal_places

    if code_upper in COMMA_DECIMAL_MARK_CURRENCIES:
        decimal_mark = ","
    else:
        decimal_mark = DEFAULT_DECIMAL_MARK

    return CurrencyContext(
        code=code_upper,
        decimal_mark=decimal_mark,
        subunit_to_unit=subunit_to_unit,
        decimal_places=decimal_places,
    )


# ============================================================================
# REGISTRY
# ============================================================================


class CurrencyRegistry:
    """Currency identifier to CurrencyContext lookup.

    Holds the caller's default currency and any custom currencies registered
    at runtime. ISO 4217 currencies come from CLDR and need no registration.

    Attributes:
        _custom: Registered currencies, keyed by uppercased identifier
        _decimal_mark: Locale decimal mark overriding CLDR currencies (or None)
        _default_code: Identifier returned by default_identifier()
        _lock: Guards _custom

    Example:
        >>> registry = CurrencyRegistry("EUR")
        >>> registry.lookup("brl")
        CurrencyContext(code='BRL', decimal_mark=',', subunit_to_unit=100, decimal_places=2)
        >>> registry.register("BTC", decimal_places=8)
        >>> registry.lookup("BTC").subunit_to_unit
        100000000
    """

    __slots__ = ("_custom", "_decimal_mark", "_default_code", "_lock")

    def __init__(
        self,
        default_currency: CurrencyCode = DEFAULT_CURRENCY,
        *,
        decimal_mark_locale: str | None = None,
    ) -> None:
        """Initialize registry.

        Args:
            default_currency: Identifier used when text names no currency.
            decimal_mark_locale: Optional locale (BCP-47 or POSIX) whose
                decimal symbol replaces the per-currency decimal mark of
                CLDR currencies. Registered currencies keep their own mark.

        Raises:
            babel.core.UnknownLocaleError: If decimal_mark_locale is unknown
        """
        self._default_code: CurrencyCode = default_currency.upper()
        self._custom: dict[str, CurrencyContext] = {}
        self._lock = threading.Lock()
        self._decimal_mark: str | None = None
        if decimal_mark_locale is not None:
            self._decimal_mark = get_decimal_symbol(_get_locale(decimal_mark_locale))

    def default_identifier(self) -> CurrencyCode:
        """Return the identifier used when no currency is found or supplied."""
        return self._default_code

    def lookup(self, identifier: CurrencyCode) -> CurrencyContext:
        """Look up subunit metadata for a currency.

        Args:
            identifier: Currency identifier. Case-insensitive.

        Returns:
            CurrencyContext for the currency.

        Raises:
            UnknownCurrencyError: If neither the registry nor CLDR knows it.

        Thread-safe.
        """
        code = identifier.strip().upper()

        with self._lock:
            custom = self._custom.get(code)
        if custom is not None:
            return custom

        context = _get_cldr_context(code)
        if context is None:
            diagnostic = ErrorTemplate.currency_unknown(identifier)
            raise UnknownCurrencyError(diagnostic, currency_code=identifier)

        if self._decimal_mark is not None and self._decimal_mark != context.decimal_mark:
            return replace(context, decimal_mark=self._decimal_mark)
        return context

    def register(
        self,
        code: CurrencyCode,
        *,
        decimal_places: int = DEFAULT_DECIMAL_PLACES,
        decimal_mark: str = DEFAULT_DECIMAL_MARK,
        subunit_to_unit: int | None = None,
    ) -> None:
        """Register a custom currency, or override a CLDR one.

        Args:
            code: Currency identifier. Stored uppercased.
            decimal_places: Fractional digits kept when rounding.
            decimal_mark: Character separating whole and fractional parts.
            subunit_to_unit: Subunits per major unit. Defaults to
                10 ** decimal_places.

        Raises:
            ValueError: If the metadata violates CurrencyContext invariants.

        Thread-safe.
        """
        code_upper = code.strip().upper()
        if subunit_to_unit is None:
            subunit_to_unit = 10**decimal_places

        context = CurrencyContext(
            code=code_upper,
            decimal_mark=decimal_mark,
            subunit_to_unit=subunit_to_unit,
            decimal_places=decimal_places,
        )
        with self._lock:
            self._custom[code_upper] = context
        logger.debug("Registered currency: %s", context)


# Module-level default registry
_default_registry = CurrencyRegistry()


def get_default_registry() -> CurrencyRegistry:
    """Return the process-wide default registry (default currency USD)."""
    return _default_registry


# ============================================================================
# CACHE MANAGEMENT
# ============================================================================


def clear_registry_cache() -> None:
    """Clear the CLDR lookup caches.

    Registered custom currencies are kept. Thread-safe.
    """
    _get_cldr_currency_codes.cache_clear()
    _get_cldr_context.cache_clear()
    _get_locale.cache_clear()
