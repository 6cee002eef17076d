"""
Output Formatters - Presentation layer for displaying results.

This module handles all output formatting, keeping display logic
separate from business logic.
"""

from decimal import Decimal
from typing import Any

from order_placement.business_logic.services.pricing import tax_amounts
from order_placement.domain.entities import OrderSummary
from order_placement.domain.exceptions import ValidationFailedError


def format_money(amount: Decimal) -> str:
    """Format an amount with two decimal places for display."""
    return f"{amount.quantize(Decimal('0.01')):,}"


class ConsoleFormatter:
    """
    Formats output for console display.
    """

    def __init__(self, width: int = 70):
        """
        Initialize formatter.

        Args:
            width: Width of output lines
        """
        self._width = width

    def header(self, text: str, char: str = "=") -> str:
        """
        Format a header line.

        Args:
            text: Header text
            char: Character to use for border

        Returns:
            Formatted header string
        """
        lines = [
            char * self._width,
            text,
            char * self._width
        ]
        return "\n".join(lines)

    def key_value(self, key: str, value: Any, indent: int = 0) -> str:
        """
        Format a key-value pair.

        Args:
            key: Key name
            value: Value to display
            indent: Number of spaces to indent

        Returns:
            Formatted key-value string
        """
        spaces = " " * indent
        return f"{spaces}{key}: {value}"

    def list_items(self, items: list[str], bullet: str = "  -") -> str:
        """Format a list of items."""
        return "\n".join(f"{bullet} {item}" for item in items)

    def error(self, message: str) -> str:
        """Format an error message."""
        return f"✗ {message}"


class OrderSummaryFormatter(ConsoleFormatter):
    """Formatter for placed orders and placement failures."""

    def format_summary(self, summary: OrderSummary) -> str:
        """
        Format the summary of a placed order.

        Shows one line per tax entry with the amount it added.

        Args:
            summary: Summary returned by the order service

        Returns:
            Formatted string
        """
        lines = [
            self.header("ORDER PLACED"),
            self.key_value("Order Number", summary.order_number, 2),
            self.key_value("Order ID", summary.order_id, 2),
            self.key_value("Customer", summary.customer_id, 2),
            self.key_value("Net Total", format_money(summary.net_total), 2),
        ]

        if summary.has_taxes():
            lines.append("\n  Taxes:")
            for entry, amount in tax_amounts(summary.net_total, summary.taxes):
                lines.append(f"    - {entry.description} ({entry.rate}%): {format_money(amount)}")
        else:
            lines.append(self.key_value("Taxes", "none", 2))

        lines.append(self.key_value("Total", format_money(summary.total), 2))
        lines.append("=" * self._width)

        return "\n".join(lines)

    def format_validation_failure(self, error: ValidationFailedError) -> str:
        """
        Format the reasons an order was rejected.

        Args:
            error: Validation failure raised by the order service

        Returns:
            Formatted string
        """
        lines = [
            self.error("Order rejected"),
            self.list_items(list(error.reasons), bullet="    -"),
        ]
        return "\n".join(lines)

    def format_error(self, error: Exception) -> str:
        """Format any other placement error."""
        return self.error(f"Order placement failed: {error}")


# Default instance
summary_formatter = OrderSummaryFormatter()
