"""
Output Formatters - Presentation layer for displaying results.
"""

from .output_formatters import (
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
