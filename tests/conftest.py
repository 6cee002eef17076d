"""
Global test configuration.

Shared builders for products, orders, customers and tax entries.
"""

import pytest

from order_placement.domain.entities import Customer, Order
from order_placement.domain.value_objects import OrderItem, Product, TaxEntry


@pytest.fixture
def customer():
    """Customer whose location has a 9% state sales tax in the tests."""
    return Customer(
        customer_id=123,
        postal_code="98168",
        country="USA",
        customer_name="Bob",
        email_address="Bobby7@gmail.com",
        address_line_1="5th ave s",
        city="Seattle",
        state_or_province="WA"
    )


@pytest.fixture
def state_sales_tax():
    """A 9% tax entry."""
    return TaxEntry(description="State Sales tax", rate=9.0)


@pytest.fixture
def products():
    """Three distinct products priced at 5."""
    return [Product(sku=f"SKU-{i}", price=5) for i in range(1, 4)]


@pytest.fixture
def make_order(products, customer):
    """Build an order for the test customer, one item per product."""
    def _make_order(items_products=None, quantity=2, customer_id=None):
        chosen = products if items_products is None else items_products
        return Order.of(
            customer.customer_id if customer_id is None else customer_id,
            [OrderItem(product=p, quantity=quantity) for p in chosen]
        )
    return _make_order


@pytest.fixture
def valid_order(make_order):
    """Three unique items at 5 x 2 each (net total 30)."""
    return make_order()
