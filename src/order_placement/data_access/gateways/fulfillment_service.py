"""
Local Fulfillment Service - Accepts orders and issues confirmations.

Stands in for a downstream fulfillment system when the order service
runs on its own (CLI, local development). Order IDs are sequential
and order numbers are derived from them.
"""

import structlog

from order_placement.domain.entities import Order, OrderConfirmation
from order_placement.domain.exceptions import FulfillmentError

logger = structlog.get_logger(__name__)


class LocalFulfillmentService:
    """
    Fulfillment service that records every order it accepts.
    """

    def __init__(self, first_order_id: int = 1000, prefix: str = "ORD"):
        """
        Initialize service.

        Args:
            first_order_id: ID given to the first accepted order
            prefix: Prefix for human-readable order numbers
        """
        self._next_order_id = first_order_id
        self._prefix = prefix
        self._fulfilled: list[tuple[OrderConfirmation, Order]] = []

    def fulfill(self, order: Order) -> OrderConfirmation:
        """
        Accept an order.

        Returns:
            Confirmation with a new order ID and order number

        Raises:
            FulfillmentError: If the order has nothing to ship
        """
        if not order.has_items():
            raise FulfillmentError("Cannot fulfill an order with no items")

        order_id = self._next_order_id
        self._next_order_id += 1

        confirmation = OrderConfirmation(
            order_id=order_id,
            order_number=f"{self._prefix}-{order_id:06d}"
        )
        self._fulfilled.append((confirmation, order))

        logger.debug(
            "Order accepted for fulfillment",
            order_id=order_id,
            order_number=confirmation.order_number,
            items=len(order.order_items),
        )
        return confirmation

    @property
    def fulfilled_orders(self) -> list[Order]:
        """Orders accepted so far, oldest first."""
        return [order for _, order in self._fulfilled]

    @property
    def confirmations(self) -> list[OrderConfirmation]:
        """Confirmations issued so far, oldest first."""
        return [confirmation for confirmation, _ in self._fulfilled]
