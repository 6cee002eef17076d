"""
Collaborator contracts used by the order service.

Any object with matching methods can be passed in; the in-memory
adapters in data_access are one such implementation.
"""

from typing import Protocol

from order_placement.domain.entities import Customer, Order, OrderConfirmation
from order_placement.domain.value_objects import TaxEntry


class ProductRepository(Protocol):
    def is_in_stock(self, sku: str) -> bool: ...


class OrderFulfillmentService(Protocol):
    def fulfill(self, order: Order) -> OrderConfirmation:
        """Hand the order to downstream processing.

        Raises:
            FulfillmentError: If the order cannot be processed
        """
        ...


class CustomerRepository(Protocol):
    def get(self, customer_id: int) -> Customer:
        """Look up a customer.

        Raises:
            CustomerNotFoundError: If the ID is unknown
        """
        ...


class TaxRateService(Protocol):
    def get_tax_entries(self, postal_code: str, country: str) -> list[TaxEntry]: ...


class EmailService(Protocol):
    def send_order_confirmation_email(self, customer_id: int, order_id: int) -> None: ...
