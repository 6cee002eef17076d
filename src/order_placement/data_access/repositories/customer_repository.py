"""
Customer Repository - In-memory customer directory.

Satisfies the CustomerRepository contract used by the order service.
"""

from collections.abc import Iterable

from order_placement.domain.entities import Customer
from order_placement.domain.exceptions import CustomerNotFoundError


class InMemoryCustomerRepository:
    """
    Customer directory keyed by customer ID.
    """

    def __init__(self, customers: Iterable[Customer] = ()):
        self._customers: dict[int, Customer] = {}
        for customer in customers:
            self.save(customer)

    def get(self, customer_id: int) -> Customer:
        """
        Get customer by ID.

        Args:
            customer_id: ID to look up

        Returns:
            The stored Customer

        Raises:
            CustomerNotFoundError: If no customer has this ID
        """
        try:
            return self._customers[customer_id]
        except KeyError:
            raise CustomerNotFoundError(customer_id) from None

    def save(self, customer: Customer) -> None:
        """Save or replace a customer."""
        self._customers[customer.customer_id] = customer

    def count(self) -> int:
        """Get total number of customers."""
        return len(self._customers)
