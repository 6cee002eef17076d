"""
Domain Layer - Entities, value objects and exceptions for order placement.

Pure business data with no I/O.
"""

from .entities import Customer, Order, OrderConfirmation, OrderSummary
from .enums import ValidationRule
from .exceptions import (
    CustomerNotFoundError,
    FulfillmentError,
    OrderPlacementError,
    ValidationFailedError,
)
from .value_objects import OrderItem, Product, TaxEntry, to_decimal

__all__ = [
    # Entities
    "Customer",
    "Order",
    "OrderConfirmation",
    "OrderSummary",
    # Value objects
    "OrderItem",
    "Product",
    "TaxEntry",
    "to_decimal",
    # Rules and errors
    "ValidationRule",
    "OrderPlacementError",
    "ValidationFailedError",
    "CustomerNotFoundError",
    "FulfillmentError",
]
