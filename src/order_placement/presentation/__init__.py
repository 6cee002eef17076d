"""
Presentation Layer - Output formatting.

Keeps display logic separate from business logic.
"""

from .formatters.output_formatters import (
    ConsoleFormatter,
    OrderSummaryFormatter,
    format_money,
    summary_formatter,
)

__all__ = [
    "ConsoleFormatter",
    "OrderSummaryFormatter",
    "format_money",
    "summary_formatter",
]
