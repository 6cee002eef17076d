"""
Logging Email Service - Records order confirmation emails instead of sending them.
"""

import structlog

logger = structlog.get_logger(__name__)


class LoggingEmailService:
    """
    Email service that logs each confirmation and keeps a record of it.
    """

    def __init__(self):
        self.sent: list[tuple[int, int]] = []

    def send_order_confirmation_email(self, customer_id: int, order_id: int) -> None:
        self.sent.append((customer_id, order_id))
        logger.info(
            "Order confirmation email queued",
            customer_id=customer_id,
            order_id=order_id,
        )
