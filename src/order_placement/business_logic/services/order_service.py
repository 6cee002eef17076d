"""
Order Service - Places a validated order and summarizes the result.

The workflow is a straight pipeline:

    validate -> fulfill -> look up customer -> look up taxes
             -> compute totals -> send confirmation -> summary

A failed validation performs no side effects. Once the order has been
handed to the fulfillment service nothing is rolled back: if the
customer lookup, tax lookup or confirmation email fails afterwards,
the order stays fulfilled and the error reaches the caller unchanged.
"""

import structlog

from order_placement.business_logic.ports import (
    CustomerRepository,
    EmailService,
    OrderFulfillmentService,
    ProductRepository,
    TaxRateService,
)
from order_placement.business_logic.services import pricing
from order_placement.business_logic.services.order_validator import OrderValidator
from order_placement.domain.entities import Customer, Order, OrderSummary
from order_placement.domain.value_objects import TaxEntry

logger = structlog.get_logger(__name__)


class OrderService:
    """
    Service for placing orders.

    Holds no state besides its collaborators, so one instance can serve
    independent orders from several threads as long as the
    collaborators themselves allow it.
    """

    def __init__(
        self,
        product_repository: ProductRepository,
        order_fulfillment_service: OrderFulfillmentService,
        customer_repository: CustomerRepository,
        tax_rate_service: TaxRateService,
        email_service: EmailService,
        validator: OrderValidator | None = None
    ):
        """
        Initialize service with its collaborators.

        Args:
            product_repository: Stock source for the in-stock rule
            order_fulfillment_service: Accepts valid orders
            customer_repository: Customer directory
            tax_rate_service: Tax entries by location
            email_service: Sends order confirmations
            validator: Rule checker (creates default if None)
        """
        self._product_repository = product_repository
        self._order_fulfillment_service = order_fulfillment_service
        self._customer_repository = customer_repository
        self._tax_rate_service = tax_rate_service
        self._email_service = email_service
        self._validator = validator or OrderValidator(product_repository)

    def place_order(self, order: Order) -> OrderSummary:
        """
        Validate, fulfill and summarize an order.

        Args:
            order: Order to place (not modified)

        Returns:
            Summary with the fulfillment service's order number and ID,
            the applicable taxes, and net and grand totals

        Raises:
            ValidationFailedError: If any business rule is violated
        """
        log = logger.bind(customer_id=order.customer_id)

        self._validator.assert_valid(order)

        confirmation = self._order_fulfillment_service.fulfill(order)
        log = log.bind(order_id=confirmation.order_id, order_number=confirmation.order_number)
        log.info("Order fulfilled")

        customer = self._customer_repository.get(order.customer_id)
        tax_entries = self._tax_rate_service.get_tax_entries(
            customer.postal_code,
            customer.country
        )
        taxes = tuple(tax_entries or ())

        net_total = pricing.net_total(order)
        total = pricing.grand_total(net_total, taxes)
        log.info(
            "Order totals computed",
            net_total=str(net_total),
            total=str(total),
            tax_entries=len(taxes),
        )

        self._email_service.send_order_confirmation_email(
            customer.customer_id,
            confirmation.order_id
        )
        log.info("Order confirmation sent")

        return OrderSummary(
            order_number=confirmation.order_number,
            order_id=confirmation.order_id,
            customer_id=customer.customer_id,
            net_total=net_total,
            total=total,
            taxes=taxes,
        )

    def get_customer(self, customer_id: int) -> Customer:
        """Look up a customer in the customer directory."""
        return self._customer_repository.get(customer_id)

    def get_tax_rates(self, postal_code: str, country: str) -> list[TaxEntry]:
        """Look up the tax entries that apply to a location."""
        return self._tax_rate_service.get_tax_entries(postal_code, country)
