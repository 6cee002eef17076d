"""
Domain Exceptions.

Raised by the order service and by collaborator adapters. The order
service raises only ValidationFailedError itself; every other error
comes from a collaborator and reaches the caller unchanged.
"""


class OrderPlacementError(Exception):
    """Base class for order placement errors."""


class ValidationFailedError(OrderPlacementError):
    """
    The order violates one or more business rules.

    Raised before any side effect has taken place, so the caller can
    correct the order and place it again.
    """

    def __init__(self, *reasons: str):
        self._reasons = tuple(reasons)
        super().__init__("; ".join(self._reasons))

    @property
    def reasons(self) -> tuple[str, ...]:
        """All violated rule reasons, in evaluation order."""
        return self._reasons


class CustomerNotFoundError(OrderPlacementError):
    """The customer directory has no customer with the given ID."""

    def __init__(self, customer_id: int):
        self.customer_id = customer_id
        super().__init__(f"Customer not found: {customer_id}")


class FulfillmentError(OrderPlacementError):
    """The fulfillment service could not process the order."""
