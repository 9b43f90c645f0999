"""Error message templates.

Centralized error message templates for testable, consistent error messages.
Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode


class ErrorTemplate:
    """Centralized error message templates.

    All error messages are created here. NO f-strings in exception constructors!
    This solves EM101/EM102 violations while providing:
        - Testable error messages
        - Consistent formatting
        - Documentation of all error cases
    """

    # =========================================================================
    # AMOUNT ERRORS (1000-1999)
    # =========================================================================

    @staticmethod
    def amount_invalid(value: str, reason: str) -> Diagnostic:
        """Amount text could not be interpreted.

        Args:
            value: The input that failed to parse
            reason: The reason parsing failed

        Returns:
            Diagnostic for AMOUNT_INVALID
        """
        msg = f"Invalid currency amount '{value}': {reason}"
        return Diagnostic(
            code=DiagnosticCode.AMOUNT_INVALID,
            message=msg,
            hint="Use a plain decimal literal such as '1234.56'",
            input_value=value,
        )

    @staticmethod
    def amount_hyphen(value: str) -> Diagnostic:
        """Hyphen found outside the sign position.

        Args:
            value: The input that failed to parse

        Returns:
            Diagnostic for AMOUNT_HYPHEN
        """
        msg = f"Invalid currency amount '{value}' (hyphen)"
        return Diagnostic(
            code=DiagnosticCode.AMOUNT_HYPHEN,
            message=msg,
            hint="A minus sign is only allowed at the start or end of an amount",
            input_value=value,
        )

    @staticmethod
    def amount_too_many_separators(value: str, separators: str) -> Diagnostic:
        """Three or more distinct separator characters.

        Args:
            value: The input that failed to parse
            separators: The distinct separators found, in order of appearance

        Returns:
            Diagnostic for AMOUNT_TOO_MANY_SEPARATORS
        """
        msg = (
            f"Invalid currency amount '{value}': "
            f"{len(separators)} distinct separators ({separators!r})"
        )
        return Diagnostic(
            code=DiagnosticCode.AMOUNT_TOO_MANY_SEPARATORS,
            message=msg,
            hint="Use at most one thousands separator and one decimal mark",
            input_value=value,
        )

    @staticmethod
    def amount_not_finite(value: str) -> Diagnostic:
        """Numeric value is NaN or infinite.

        Args:
            value: Text form of the rejected value

        Returns:
            Diagnostic for AMOUNT_NOT_FINITE
        """
        msg = f"Invalid currency amount '{value}': value is not finite"
        return Diagnostic(
            code=DiagnosticCode.AMOUNT_NOT_FINITE,
            message=msg,
            hint="NaN and Infinity have no subunit representation",
            input_value=value,
        )

    # =========================================================================
    # VALUE ERRORS (2000-2999)
    # =========================================================================

    @staticmethod
    def value_type_unsupported(received_type: str, expected_type: str) -> Diagnostic:
        """Value is not a recognized kind for the entry point.

        Args:
            received_type: Name of the rejected value's type
            expected_type: Description of the accepted types

        Returns:
            Diagnostic for VALUE_TYPE_UNSUPPORTED
        """
        msg = f"'value' should be {expected_type}, got {received_type}"
        return Diagnostic(
            code=DiagnosticCode.VALUE_TYPE_UNSUPPORTED,
            message=msg,
            hint="Pass text to parse_amount() and numbers to from_numeric()",
            expected_type=expected_type,
            received_type=received_type,
        )

    # =========================================================================
    # CURRENCY ERRORS (3000-3999)
    # =========================================================================

    @staticmethod
    def currency_unknown(code: str) -> Diagnostic:
        """Currency identifier not known to the registry.

        Args:
            code: The identifier that failed to resolve

        Returns:
            Diagnostic for CURRENCY_UNKNOWN
        """
        msg = f"Unknown currency '{code}'"
        return Diagnostic(
            code=DiagnosticCode.CURRENCY_UNKNOWN,
            message=msg,
            hint="Use an ISO 4217 code or register the currency with CurrencyRegistry.register()",
            input_value=code,
        )
