"""
Domain Enums - Type-safe constants for the order placement system.

These enums replace magic strings for the validation messages that
callers match against.
"""

from enum import Enum


class ValidationRule(Enum):
    """
    Business rules an order must satisfy before it is placed.

    The value of each member is the human-readable reason reported
    when the rule is violated. Members are declared in evaluation order.
    """
    HAS_ITEMS = "Order contains no items."
    UNIQUE_PRODUCTS = "Order Items are not unique by product."
    IN_STOCK = "Some products are out of stock."

    @property
    def reason(self) -> str:
        """Reason string reported in a validation failure."""
        return self.value

    def requires_stock_lookup(self) -> bool:
        """Check if evaluating this rule calls the product repository."""
        return self is ValidationRule.IN_STOCK
