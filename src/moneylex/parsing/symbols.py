"""Currency symbol and ISO code detection.

Finds the currency an amount string names, either by a leading currency
symbol ("R$ 10", "-€5") or by an embedded ISO code ("10 USD").

Symbols that are textual prefixes of other symbols ("R" of "R$", "$" of
"C$") are resolved longest-first. SymbolTable enforces this by sorting its
entries on construction, so callers may supply entries in any order.

Thread-safe. Pure functions over immutable data.

Python 3.13+.
"""

from __future__ import annotations

import re
from collections.abc import Iterable

from moneylex.constants import CURRENCY_SYMBOLS

__all__ = [
    "DEFAULT_SYMBOL_TABLE",
    "SymbolTable",
    "resolve_currency",
    "scan_iso_code",
]

# First run of 2-3 uppercase ASCII letters. Not validated as a real code.
_ISO_CODE_PATTERN = re.compile(r"[A-Z]{2,3}")


class SymbolTable:
    """Ordered symbol -> currency code table with longest-match-first lookup.

    Entries are stably sorted by symbol length, descending. Among symbols of
    equal length the supplied order is kept, and the first occurrence of a
    duplicate symbol wins.

    Attributes:
        _entries: Sorted (symbol, code) pairs
        _codes: Symbol -> code mapping
        _pattern: Compiled regex anchored at start with an optional sign
    """

    __slots__ = ("_codes", "_entries", "_pattern")

    def __init__(self, entries: Iterable[tuple[str, str]]) -> None:
        """Build the table and its matching pattern.

        Args:
            entries: (symbol, currency_code) pairs

        Raises:
            ValueError: If entries is empty or contains an empty symbol
        """
        codes: dict[str, str] = {}
        for symbol, code in entries:
            if not symbol:
                msg = "SymbolTable symbols must be non-empty"
                raise ValueError(msg)
            codes.setdefault(symbol, code)
        if not codes:
            msg = "SymbolTable requires at least one entry"
            raise ValueError(msg)

        self._codes = codes
        self._entries = tuple(sorted(codes.items(), key=lambda item: len(item[0]), reverse=True))
        alternation = "|".join(re.escape(symbol) for symbol, _ in self._entries)
        self._pattern = re.compile(rf"\A[+-]?(?P<symbol>{alternation})")

    @property
    def entries(self) -> tuple[tuple[str, str], ...]:
        """(symbol, code) pairs in match order."""
        return self._entries

    def match(self, text: str) -> str | None:
        """Return the code of the symbol at the start of text, if any.

        An optional leading '+' or '-' may precede the symbol.

        Example:
            >>> DEFAULT_SYMBOL_TABLE.match("R$ 1.234,56")
            'BRL'
            >>> DEFAULT_SYMBOL_TABLE.match("-R 12")
            'ZAR'
            >>> DEFAULT_SYMBOL_TABLE.match("12 R$") is None
            True
        """
        found = self._pattern.match(text)
        if found is None:
            return None
        return self._codes[found.group("symbol")]

    def __contains__(self, symbol: object) -> bool:
        return symbol in self._codes

    def __len__(self) -> int:
        return len(self._entries)


DEFAULT_SYMBOL_TABLE = SymbolTable(CURRENCY_SYMBOLS)


def scan_iso_code(text: str) -> str | None:
    """Return the first run of 2-3 uppercase letters in text, verbatim.

    Example:
        >>> scan_iso_code("1,234.56 EUR")
        'EUR'
        >>> scan_iso_code("$10") is None
        True
    """
    found = _ISO_CODE_PATTERN.search(text)
    return found.group() if found else None


def resolve_currency(text: str, table: SymbolTable = DEFAULT_SYMBOL_TABLE) -> str | None:
    """Resolve the currency named by text.

    Resolution order:
    1. Currency symbol at the start of text (optional sign before it)
    2. First 2-3 letter uppercase run anywhere in text
    3. None (caller applies its own default)

    Args:
        text: Trimmed amount text
        table: Symbol table to match against

    Returns:
        Currency code, or None if text names no currency
    """
    code = table.match(text)
    if code is not None:
        return code
    return scan_iso_code(text)
