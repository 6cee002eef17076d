"""
Business Logic Services - Order validation, pricing and placement.
"""

from .order_service import OrderService
from .order_validator import OrderValidator
from .pricing import grand_total, net_total, tax_amounts

__all__ = [
    "OrderService",
    "OrderValidator",
    "grand_total",
    "net_total",
    "tax_amounts",
]
