"""
Tests for display formatting of calculator results.
"""

import pytest

from app.models.formatting import (
    CURRENCIES,
    MISSING_VALUE,
    CurrencyFormatter,
    get_currency_style,
    format_percentage,
)


class TestCurrencyStyles:
    """Test the supported currency table."""

    def test_supported_currencies(self):
        """Test that all calculator currencies are available."""
        assert set(CURRENCIES) == {"USD", "EUR", "ARS", "MXN", "CLP", "COP", "BRL"}

    def test_lookup_is_case_insensitive(self):
        """Test currency lookup by lower-case code."""
        assert get_currency_style("usd").code == "USD"
        assert get_currency_style("brl").symbol == "R$"

    def test_unknown_currency(self):
        """Test that unknown currencies are rejected."""
        with pytest.raises(ValueError, match="Unsupported currency 'XYZ'"):
            get_currency_style("XYZ")


class TestCurrencyFormatter:
    """Test CurrencyFormatter functionality."""

    def test_currency_formatter_creation(self):
        """Test basic currency formatter creation."""
        formatter = CurrencyFormatter()

        assert formatter.style.code == "USD"
        assert formatter.decimal_places == 0

    def test_format_usd(self):
        """Test US dollar formatting rounds to whole units."""
        formatter = CurrencyFormatter.for_currency("USD")

        assert formatter.format_currency(1000) == "$1,000"
        assert formatter.format_currency(1234.56) == "$1,235"
        assert formatter.format_currency(0) == "$0"

    def test_format_suffix_symbol(self):
        """Test euro formatting with a trailing symbol."""
        formatter = CurrencyFormatter.for_currency("EUR")

        assert formatter.format_currency(1234) == "1.234 €"

    def test_format_swapped_separators(self):
        """Test currencies that group with dots and use decimal commas."""
        assert CurrencyFormatter.for_currency("ARS").format_currency(1234567) == (
            "$ 1.234.567"
        )
        assert CurrencyFormatter.for_currency("BRL").format_currency(1000) == "R$ 1.000"
        assert CurrencyFormatter.for_currency("CLP").format_currency(25000) == "$25.000"

    def test_format_decimal_places(self):
        """Test formatting with decimals."""
        formatter = CurrencyFormatter.for_currency("EUR", decimal_places=2)

        assert formatter.format_currency(1234.5) == "1.234,50 €"

    def test_format_negative(self):
        """Test negative amounts carry a leading minus sign."""
        formatter = CurrencyFormatter.for_currency("USD")

        assert formatter.format_currency(-1500) == "-$1,500"
        assert formatter.format_currency(-0.2) == "$0"

    def test_format_rounds_halves_up(self):
        """Test that halves round away from zero rather than to even."""
        formatter = CurrencyFormatter.for_currency("USD")

        assert formatter.format_currency(2.5) == "$3"
        assert formatter.format_currency(0.5) == "$1"
        assert formatter.format_currency(-2.5) == "-$3"
        assert CurrencyFormatter.for_currency("USD", decimal_places=2).format_currency(
            1.005
        ) == "$1.01"

    def test_format_large_amount(self):
        """Test amounts wider than the default decimal precision."""
        formatter = CurrencyFormatter.for_currency("USD")

        assert formatter.format_currency(1e30) == "$1" + ",000" * 10

    def test_format_missing(self):
        """Test that missing amounts render as a placeholder."""
        assert CurrencyFormatter().format_currency(None) == MISSING_VALUE

    def test_format_compact(self):
        """Test short chart axis labels."""
        formatter = CurrencyFormatter.for_currency("USD")

        assert formatter.format_compact(2_000_000) == "$2M"
        assert formatter.format_compact(250_000) == "$250K"
        assert formatter.format_compact(3e9) == "$3B"
        assert formatter.format_compact(999) == "$999"


class TestFormatPercentage:
    """Test percentage formatting."""

    def test_format_percentage(self):
        """Test values already expressed in percent."""
        assert format_percentage(12.5) == "12.50%"
        assert format_percentage(0) == "0.00%"
        assert format_percentage(7.25, decimal_places=1) == "7.2%"

    def test_format_undefined_percentage(self):
        """Test that an undefined return is not shown as 0%."""
        assert format_percentage(None) == MISSING_VALUE
