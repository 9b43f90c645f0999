"""Diagnostic codes and data structures.

Defines error codes and diagnostic messages.
Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Literal

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
]


class DiagnosticCode(Enum):
    """Error codes with unique identifiers.

    Organized by category:
        1000-1999: Amount errors (text that does not match the amount grammar)
        2000-2999: Value errors (non-string numeric entry points)
        3000-3999: Currency errors (registry lookups)
    """

    # Amount errors (1000-1999)
    AMOUNT_INVALID = 1001
    AMOUNT_HYPHEN = 1002
    AMOUNT_TOO_MANY_SEPARATORS = 1003
    AMOUNT_NOT_FINITE = 1004

    # Value errors (2000-2999)
    VALUE_TYPE_UNSUPPORTED = 2001

    # Currency errors (3000-3999)
    CURRENCY_UNKNOWN = 3001


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """Structured diagnostic message.

    Inspired by Rust compiler diagnostics. Provides rich error information
    for both humans and tools.

    Attributes:
        code: Unique error code
        message: Human-readable error description
        hint: Suggestion for fixing the error
        input_value: Offending input, as text (None when not applicable)
        expected_type: Expected type for a value (type errors)
        received_type: Actual type received (type errors)
        severity: Error severity level
    """

    code: DiagnosticCode
    message: str
    hint: str | None = None
    input_value: str | None = None
    expected_type: str | None = None
    received_type: str | None = None
    severity: Literal["error", "warning"] = "error"

    def __str__(self) -> str:
        """Return human-readable error description."""
        return self.message

    def format_error(self) -> str:
        """Format diagnostic like Rust compiler.

        Delegates to DiagnosticFormatter for consistent output.

        Example output:
            error[AMOUNT_HYPHEN]: Invalid currency amount '12-34' (hyphen)
              = input: 12-34
              = help: A minus sign is only allowed at the start or end of an amount

        Returns:
            Formatted error message
        """
        from .formatter import DiagnosticFormatter  # noqa: PLC0415 - circular

        return DiagnosticFormatter().format(self)
