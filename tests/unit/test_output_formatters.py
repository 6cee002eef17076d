"""
Tests for output formatters.
"""

from decimal import Decimal

import pytest

from order_placement.domain.entities import OrderSummary
from order_placement.domain.exceptions import CustomerNotFoundError, ValidationFailedError
from order_placement.domain.value_objects import TaxEntry
from order_placement.presentation.formatters import (
    ConsoleFormatter,
    OrderSummaryFormatter,
    format_money,
    summary_formatter,
)


class TestFormatMoney:
    """Tests for format_money."""

    def test_two_decimal_places(self):
        """Amounts should always show cents."""
        assert format_money(Decimal("32.7")) == "32.70"
        assert format_money(Decimal("30")) == "30.00"

    def test_thousands_separator(self):
        """Large amounts should be grouped."""
        assert format_money(Decimal("1234.5")) == "1,234.50"


class TestConsoleFormatter:
    """Tests for ConsoleFormatter base class."""

    @pytest.fixture
    def formatter(self):
        return ConsoleFormatter(width=20)

    def test_header(self, formatter):
        """Header should be wrapped in border lines."""
        lines = formatter.header("TITLE").split("\n")

        assert lines == ["=" * 20, "TITLE", "=" * 20]

    def test_key_value_indent(self, formatter):
        """Key/value pairs should honor indent."""
        assert formatter.key_value("Total", 5, indent=2) == "  Total: 5"

    def test_list_items(self, formatter):
        """Each item should get a bullet."""
        assert formatter.list_items(["a", "b"]) == "  - a\n  - b"

    def test_error(self, formatter):
        """Error messages should keep their text."""
        assert formatter.error("failed") == "✗ failed"


class TestOrderSummaryFormatter:
    """Tests for OrderSummaryFormatter."""

    @pytest.fixture
    def formatter(self):
        return OrderSummaryFormatter()

    @pytest.fixture
    def summary(self):
        return OrderSummary(
            order_number="AL435DSD",
            order_id=3242,
            customer_id=123,
            net_total=Decimal("30"),
            total=Decimal("32.7"),
            taxes=[TaxEntry("State Sales tax", 9.0)]
        )

    def test_format_summary_fields(self, formatter, summary):
        """Summary output should show identifiers and totals."""
        output = formatter.format_summary(summary)

        assert "ORDER PLACED" in output
        assert "Order Number: AL435DSD" in output
        assert "Order ID: 3242" in output
        assert "Customer: 123" in output
        assert "Net Total: 30.00" in output
        assert "Total: 32.70" in output

    def test_format_summary_tax_lines(self, formatter, summary):
        """Each tax entry should be listed with its amount."""
        output = formatter.format_summary(summary)

        assert "State Sales tax (9.0%): 2.70" in output

    def test_format_summary_without_taxes(self, formatter):
        """A summary without taxes should say so."""
        summary = OrderSummary("N-1", 1, 5, Decimal("10"), Decimal("10"))

        output = formatter.format_summary(summary)

        assert "Taxes: none" in output

    def test_format_validation_failure(self, formatter):
        """Every reason should be listed."""
        error = ValidationFailedError(
            "Order Items are not unique by product.",
            "Some products are out of stock."
        )

        output = formatter.format_validation_failure(error)

        assert "Order rejected" in output
        assert "Order Items are not unique by product." in output
        assert "Some products are out of stock." in output

    def test_format_error(self, formatter):
        """Other errors should show their message."""
        output = formatter.format_error(CustomerNotFoundError(7))

        assert "Customer not found: 7" in output

    def test_default_instance(self):
        """Module should provide a ready-made formatter."""
        assert isinstance(summary_formatter, OrderSummaryFormatter)
