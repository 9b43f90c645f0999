"""Parser configuration.

Provides a single frozen dataclass that carries the parse policies a caller
chooses per call. Replaces process-wide mutable flags with an explicit,
typed object passed into the parsing entry points.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from dataclasses import dataclass

__all__ = ["DEFAULT_CONFIG", "ParserConfig"]


@dataclass(frozen=True, slots=True)
class ParserConfig:
    """Immutable parse policy for amount parsing.

    Constructing ``ParserConfig()`` with no arguments gives the default
    policy: currency is only inferred from an ISO code embedded in the text,
    and fractional subunits are rounded to the currency's decimal places.

    Attributes:
        assume_from_symbol: Infer the currency from a leading currency symbol
            (e.g. "R$", "€") before falling back to ISO code scanning and
            then to the caller's default (default: False).
        infinite_precision: Keep fractional subunits as an exact Decimal
            instead of rounding to the currency's decimal places
            (default: False).

    Example:
        >>> from moneylex import ParserConfig, parse_amount
        >>> config = ParserConfig(assume_from_symbol=True)
        >>> parse_amount("R$ 1.234,56", config=config)
        AmountResult(subunits=123456, currency='BRL')
    """

    assume_from_symbol: bool = False
    infinite_precision: bool = False


DEFAULT_CONFIG = ParserConfig()
