"""
Domain Entities - Core business objects with identity.

Entities are identified by their ID rather than their attributes.
They are immutable, so an order handed to the order service is never
changed by it.
"""

from collections.abc import Iterable
from dataclasses import dataclass, field
from decimal import Decimal

from .value_objects import OrderItem, TaxEntry


@dataclass(frozen=True)
class Order:
    """
    An order a customer wants to place.

    Items are kept as a tuple in the order they were given. The order
    is created by the caller and validated by the order service before
    anything is dispatched.
    """
    customer_id: int
    order_items: tuple[OrderItem, ...] = ()

    def __post_init__(self) -> None:
        """Freeze the item sequence."""
        object.__setattr__(self, "order_items", tuple(self.order_items))

    @classmethod
    def of(cls, customer_id: int, items: Iterable[OrderItem]) -> "Order":
        """Create an order from any iterable of items."""
        return cls(customer_id=customer_id, order_items=tuple(items))

    def has_items(self) -> bool:
        """Check if the order contains at least one item."""
        return len(self.order_items) > 0

    def order_items_are_unique_by_product(self) -> bool:
        """
        Check that no two items reference the same product SKU.

        An empty order is trivially unique; emptiness is a separate rule.
        """
        skus = [item.sku for item in self.order_items]
        return len(skus) == len(set(skus))


@dataclass(frozen=True)
class Customer:
    """
    A customer in the customer directory.

    Only postal_code and country take part in order placement (they
    select the applicable tax entries); the rest is contact data.
    """
    customer_id: int
    postal_code: str
    country: str
    customer_name: str = ""
    email_address: str = ""
    address_line_1: str = ""
    city: str = ""
    state_or_province: str = ""


@dataclass(frozen=True)
class OrderConfirmation:
    """
    Returned by the fulfillment service once it has accepted an order.
    """
    order_id: int
    order_number: str


@dataclass(frozen=True)
class OrderSummary:
    """
    Result of placing an order successfully.

    Built once per placement and never modified afterwards.
    """
    order_number: str
    order_id: int
    customer_id: int
    net_total: Decimal
    total: Decimal
    taxes: tuple[TaxEntry, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        object.__setattr__(self, "taxes", tuple(self.taxes))

    @property
    def tax_total(self) -> Decimal:
        """Total tax charged on top of the net total."""
        return self.total - self.net_total

    def has_taxes(self) -> bool:
        """Check if any tax entries applied to this order."""
        return len(self.taxes) > 0
