"""Tests for parse_amount() end to end.

Covers currency resolution order, separator conventions, magnitude
suffixes, signs, precision policies, and error propagation.
"""

import logging
from decimal import Decimal, localcontext

import pytest

from moneylex import (
    AmountResult,
    CurrencyRegistry,
    InvalidAmountError,
    ParserConfig,
    UnknownCurrencyError,
    UnsupportedValueTypeError,
    parse_amount,
)
from moneylex.diagnostics import DiagnosticCode

SYMBOLS = ParserConfig(assume_from_symbol=True)
EXACT = ParserConfig(infinite_precision=True)


class TestParseAmountBasics:
    """Common formats in the currency's own convention."""

    @pytest.mark.parametrize(
        ("text", "expected"),
        [
            ("$1,234.56", AmountResult(123456, "USD")),
            ("1.234,56 EUR", AmountResult(123456, "EUR")),
            ("1234.5", AmountResult(123450, "USD")),
            ("12", AmountResult(1200, "USD")),
            ("  12.30  ", AmountResult(1230, "USD")),
            ("0", AmountResult(0, "USD")),
            ("1,000,000 JPY", AmountResult(1_000_000, "JPY")),
            ("1.234 KWD", AmountResult(1234, "KWD")),
        ],
    )
    def test_formats(self, text: str, expected: AmountResult) -> None:
        """Text parses to the expected subunits and currency."""
        assert parse_amount(text) == expected

    def test_text_without_digits_is_zero(self) -> None:
        """Nothing numeric left after cleaning reads as zero."""
        assert parse_amount("abc") == AmountResult(0, "USD")

    def test_large_amount_exact(self) -> None:
        """No floating point is involved at any size."""
        result = parse_amount("123,456,789,012,345,678,901,234,567,890.12")
        assert result.subunits == 12345678901234567890123456789012


class TestParseAmountDecimalMarkAmbiguity:
    """The same text reads differently depending on the currency."""

    def test_lone_dot_is_decimal_for_comma_currency(self) -> None:
        """"EUR 1.234" is one euro and 23 cents (rounded)."""
        assert parse_amount("EUR 1.234") == AmountResult(123, "EUR")

    def test_caller_currency_applies_same_rules(self) -> None:
        """Currency argument behaves like a code in the text."""
        assert parse_amount("1.234", "EUR") == AmountResult(123, "EUR")

    def test_lone_comma_is_grouping_for_dot_currency(self) -> None:
        """"1,234" in USD is one thousand two hundred thirty four dollars."""
        assert parse_amount("1,234") == AmountResult(123400, "USD")

    def test_lone_comma_is_decimal_for_comma_currency(self) -> None:
        """"1,234" in EUR is the currency's own decimal mark."""
        assert parse_amount("1,234 EUR") == AmountResult(123, "EUR")

    def test_apostrophe_grouping(self) -> None:
        """Swiss-style apostrophe groups thousands."""
        assert parse_amount("1'234.50 CHF") == AmountResult(123450, "CHF")

    def test_three_separators_rejected(self) -> None:
        """Errors from disambiguation propagate."""
        with pytest.raises(InvalidAmountError) as exc_info:
            parse_amount("1,234.56'7")
        assert exc_info.value.diagnostic is not None
        assert exc_info.value.diagnostic.code == DiagnosticCode.AMOUNT_TOO_MANY_SEPARATORS


class TestParseAmountMultiplier:
    """K/M/B/T suffixes."""

    @pytest.mark.parametrize(
        ("text", "expected"),
        [
            ("1.5M", AmountResult(150_000_000, "USD")),
            ("$2k", AmountResult(200_000, "USD")),
            ("1.5k EUR", AmountResult(150_000, "EUR")),
            ("3B", AmountResult(300_000_000_000, "USD")),
            ("1T", AmountResult(100_000_000_000_000, "USD")),
            ("-2.5m", AmountResult(-250_000_000, "USD")),
        ],
    )
    def test_suffixes(self, text: str, expected: AmountResult) -> None:
        """Suffix scales the amount by its power of ten."""
        assert parse_amount(text) == expected

    def test_suffix_not_at_end_ignored(self) -> None:
        """Digits after the suffix disable it."""
        assert parse_amount("5M 10").subunits == 51000

    def test_zero_decimal_currency_shift(self) -> None:
        """Shifted fraction digits count 100 subunits each."""
        assert parse_amount("1.5K JPY") == AmountResult(51_000, "JPY")


class TestParseAmountSign:
    """Leading and trailing minus signs."""

    @pytest.mark.parametrize("text", ["-$12", "$12-", "-12", "12-", "- 12 USD"])
    def test_negative(self, text: str) -> None:
        """Either edge may carry the minus sign."""
        assert parse_amount(text) == AmountResult(-1200, "USD")

    def test_inner_hyphen_rejected(self) -> None:
        """A hyphen elsewhere is an error."""
        with pytest.raises(InvalidAmountError) as exc_info:
            parse_amount("12-34")
        assert exc_info.value.diagnostic is not None
        assert exc_info.value.diagnostic.code == DiagnosticCode.AMOUNT_HYPHEN

    def test_negative_zero(self) -> None:
        """Negative zero is zero."""
        assert parse_amount("-0").subunits == 0


class TestParseAmountCurrencyResolution:
    """Where the currency comes from."""

    def test_code_in_text_beats_argument(self) -> None:
        """Embedded code takes precedence over the caller's currency."""
        assert parse_amount("10 GBP", "EUR") == AmountResult(1000, "GBP")

    def test_argument_used_when_text_names_none(self) -> None:
        """Caller's currency is the first fallback."""
        assert parse_amount("10", "gbp") == AmountResult(1000, "GBP")

    def test_registry_default_is_last_resort(self) -> None:
        """Registry default applies when nothing else names a currency."""
        result = parse_amount("10", registry=CurrencyRegistry("EUR"))
        assert result == AmountResult(1000, "EUR")

    def test_symbols_ignored_by_default(self) -> None:
        """Without symbol inference, "R$" names nothing."""
        assert parse_amount("R$ 1.234,56") == AmountResult(123456, "USD")

    @pytest.mark.parametrize(
        ("text", "expected"),
        [
            ("R$ 1.234,56", AmountResult(123456, "BRL")),
            ("R 100", AmountResult(10000, "ZAR")),
            ("¥1,000", AmountResult(1000, "JPY")),
            ("€5", AmountResult(500, "EUR")),
            ("-£12", AmountResult(-1200, "GBP")),
            ("C$5", AmountResult(500, "CAD")),
        ],
    )
    def test_symbol_inference(self, text: str, expected: AmountResult) -> None:
        """Leading symbols resolve when symbol inference is on."""
        assert parse_amount(text, config=SYMBOLS) == expected

    def test_symbol_inference_falls_back_to_code(self) -> None:
        """Code scanning still applies without a leading symbol."""
        assert parse_amount("10 CAD", config=SYMBOLS) == AmountResult(1000, "CAD")

    def test_unknown_code_rejected(self) -> None:
        """An uppercase run that is not a currency is an error."""
        with pytest.raises(UnknownCurrencyError) as exc_info:
            parse_amount("10 QQ")
        assert exc_info.value.currency_code == "QQ"

    def test_unknown_argument_rejected(self) -> None:
        """An unknown caller currency is an error too."""
        with pytest.raises(UnknownCurrencyError):
            parse_amount("10", "NOPE")

    def test_registered_currency(self, registry: CurrencyRegistry) -> None:
        """Custom registrations are visible to the parser."""
        registry.register("XBT", decimal_places=8)
        result = parse_amount("0.5 XBT", registry=registry)
        assert result == AmountResult(50_000_000, "XBT")

    def test_default_logged(self, caplog: pytest.LogCaptureFixture) -> None:
        """Falling back to a default currency is logged at debug level."""
        with caplog.at_level(logging.DEBUG, logger="moneylex.parsing.amount"):
            parse_amount("10")
        assert "using USD" in caplog.text


class TestParseAmountPrecision:
    """ParserConfig.infinite_precision."""

    def test_fixed_rounds(self) -> None:
        """Default policy rounds to the currency's places."""
        assert parse_amount("1.235").subunits == 124

    def test_infinite_keeps_fraction(self) -> None:
        """Infinite precision returns the exact Decimal."""
        result = parse_amount("1.234", config=EXACT)
        assert result.subunits == Decimal("123.4")
        assert isinstance(result.subunits, Decimal)

    def test_both_flags(self) -> None:
        """Policies combine."""
        config = ParserConfig(assume_from_symbol=True, infinite_precision=True)
        assert parse_amount("€1,2345", config=config) == AmountResult(Decimal("123.45"), "EUR")


class TestParseAmountTypeCheck:
    """Non-string input."""

    @pytest.mark.parametrize("value", [12, 1.5, Decimal("1"), None, b"12"])
    def test_non_string_rejected(self, value: object) -> None:
        """Only str is accepted."""
        with pytest.raises(UnsupportedValueTypeError) as exc_info:
            parse_amount(value)  # type: ignore[arg-type]
        assert exc_info.value.received_type == type(value).__name__
        assert exc_info.value.diagnostic is not None
        assert exc_info.value.diagnostic.code == DiagnosticCode.VALUE_TYPE_UNSUPPORTED


class TestParseAmountLongInput:
    """Inputs past the interpreter's int/str digit limit."""

    def test_five_thousand_digit_amount(self) -> None:
        """Magnitude is unbounded; no bare ValueError escapes."""
        result = parse_amount("1" * 5000)
        assert result.currency == "USD"
        assert result.subunits == (10**5000 - 1) // 9 * 100

    def test_five_thousand_digit_amount_with_suffix(self) -> None:
        """Suffix scaling stays exact on long inputs."""
        result = parse_amount("1" * 5000 + ".5K")
        assert result.subunits == ((10**5000 - 1) // 9 * 100 + 50) * 1000

    def test_five_thousand_digit_amount_exact_mode(self) -> None:
        """Exact mode keeps every digit of a long negative amount."""
        result = parse_amount("-" + "1" * 5000 + ".125", config=EXACT)
        tenths = -((10**5000 - 1) // 9 * 1000 + 125)
        assert isinstance(result.subunits, Decimal)
        with localcontext() as ctx:
            ctx.prec = 6000
            assert result.subunits.scaleb(1) == Decimal(tenths)
