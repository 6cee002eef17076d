"""
Order Placement - validates orders, hands them to fulfillment and
computes net and tax-inclusive totals.
"""

from order_placement.business_logic.services import OrderService, OrderValidator
from order_placement.domain import (
    Customer,
    Order,
    OrderConfirmation,
    OrderItem,
    OrderSummary,
    Product,
    TaxEntry,
    ValidationFailedError,
)

__version__ = "1.0.0"

__all__ = [
    "Customer",
    "Order",
    "OrderConfirmation",
    "OrderItem",
    "OrderService",
    "OrderSummary",
    "OrderValidator",
    "Product",
    "TaxEntry",
    "ValidationFailedError",
]
