"""Diagnostic system for moneylex errors.

Provides structured error diagnostics with codes, hints, and input context.
Inspired by Rust compiler diagnostics and Elm error messages.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode
from .errors import (
    InvalidAmountError,
    MoneyLexError,
    UnknownCurrencyError,
    UnsupportedValueTypeError,
)
from .formatter import DiagnosticFormatter, OutputFormat
from .templates import ErrorTemplate

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
    "DiagnosticFormatter",
    "ErrorTemplate",
    "InvalidAmountError",
    "MoneyLexError",
    "OutputFormat",
    "UnknownCurrencyError",
    "UnsupportedValueTypeError",
]
