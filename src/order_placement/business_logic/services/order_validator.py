"""
Order Validator - Business rules checked before an order is placed.

Rules are evaluated in ValidationRule order and every violated rule is
reported, not just the first. The stock rule is the only one that
calls out to the product repository; it runs only when the order has
passed the rules that need no lookup.
"""

import structlog

from order_placement.business_logic.ports import ProductRepository
from order_placement.domain.entities import Order
from order_placement.domain.enums import ValidationRule
from order_placement.domain.exceptions import ValidationFailedError

logger = structlog.get_logger(__name__)


class OrderValidator:
    """
    Checks an order against the placement rules.
    """

    def __init__(self, product_repository: ProductRepository):
        """
        Initialize validator with the stock source.

        Args:
            product_repository: Answers in-stock queries by SKU
        """
        self._product_repository = product_repository

    def validate(self, order: Order) -> list[str]:
        """
        Collect the reasons for every rule the order violates.

        Args:
            order: Order to check

        Returns:
            Reason strings in rule order; empty if the order is valid
        """
        violated = [
            rule for rule in ValidationRule
            if not rule.requires_stock_lookup() and not self._satisfies(order, rule)
        ]

        # Skip the repository entirely once the order is known to be invalid
        if not violated and not self._satisfies(order, ValidationRule.IN_STOCK):
            violated.append(ValidationRule.IN_STOCK)

        return [rule.reason for rule in violated]

    def assert_valid(self, order: Order) -> None:
        """
        Raise if the order violates any rule.

        Raises:
            ValidationFailedError: Carrying every violated rule's reason
        """
        reasons = self.validate(order)
        if reasons:
            logger.warning(
                "Order failed validation",
                customer_id=order.customer_id,
                reasons=reasons,
            )
            raise ValidationFailedError(*reasons)

    def _satisfies(self, order: Order, rule: ValidationRule) -> bool:
        if rule is ValidationRule.HAS_ITEMS:
            return order.has_items()
        if rule is ValidationRule.UNIQUE_PRODUCTS:
            return order.order_items_are_unique_by_product()
        return self.all_products_are_in_stock(order)

    def all_products_are_in_stock(self, order: Order) -> bool:
        """
        Check stock for each item, stopping at the first one that is out.
        """
        return all(
            self._product_repository.is_in_stock(item.sku)
            for item in order.order_items
        )
