"""moneylex exception hierarchy with structured diagnostics.

All exceptions store Diagnostic objects for rich error information.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic


class MoneyLexError(Exception):
    """Base exception for all moneylex errors.

    Attributes:
        diagnostic: Structured diagnostic information (optional)
    """

    def __init__(self, message: str | Diagnostic) -> None:
        """Initialize MoneyLexError.

        Args:
            message: Error message string OR Diagnostic object
        """
        if isinstance(message, Diagnostic):
            self.diagnostic: Diagnostic | None = message
            super().__init__(message.format_error())
        else:
            self.diagnostic = None
            super().__init__(message)


class InvalidAmountError(MoneyLexError):
    """Amount text does not match the recognized amount grammar.

    Raised for a hyphen outside the sign position, three or more distinct
    separator characters, a malformed plain decimal string, or a
    non-finite numeric value. Parsing is deterministic; retrying the same
    input always fails the same way.

    Attributes:
        input_value: The text (or value) that failed to parse
    """

    def __init__(self, message: str | Diagnostic, *, input_value: str = "") -> None:
        """Initialize InvalidAmountError.

        Args:
            message: Error message string OR Diagnostic object
            input_value: The text that failed to parse
        """
        super().__init__(message)
        self.input_value = input_value


class UnsupportedValueTypeError(MoneyLexError):
    """Value given to a numeric entry point is not a recognized numeric kind.

    Attributes:
        received_type: Name of the rejected value's type
    """

    def __init__(self, message: str | Diagnostic, *, received_type: str = "") -> None:
        """Initialize UnsupportedValueTypeError.

        Args:
            message: Error message string OR Diagnostic object
            received_type: Name of the rejected value's type
        """
        super().__init__(message)
        self.received_type = received_type


class UnknownCurrencyError(MoneyLexError):
    """Currency identifier is not known to the registry.

    Attributes:
        currency_code: The identifier that failed to resolve
    """

    def __init__(self, message: str | Diagnostic, *, currency_code: str = "") -> None:
        """Initialize UnknownCurrencyError.

        Args:
            message: Error message string OR Diagnostic object
            currency_code: The identifier that failed to resolve
        """
        super().__init__(message)
        self.currency_code = currency_code
