"""
Order pricing - net and tax-inclusive totals.

Pure functions over already-resolved data. All arithmetic is Decimal
and no rounding is applied.
"""

from collections.abc import Iterable
from decimal import Decimal

from order_placement.domain.entities import Order
from order_placement.domain.value_objects import TaxEntry

ZERO = Decimal("0")


def net_total(order: Order) -> Decimal:
    """
    Sum price x quantity over all order items.

    Examples:
        >>> from order_placement.domain.value_objects import OrderItem, Product
        >>> order = Order.of(1, [OrderItem(Product("A", 5), 2)])
        >>> net_total(order)
        Decimal('10')
    """
    return sum((item.subtotal() for item in order.order_items), ZERO)


def tax_amounts(
    net: Decimal,
    tax_entries: Iterable[TaxEntry] | None
) -> list[tuple[TaxEntry, Decimal]]:
    """
    Calculate the tax each entry adds to a net total.

    Args:
        net: Net total of the order
        tax_entries: Applicable entries, or None when none apply

    Returns:
        List of (entry, amount) pairs in entry order
    """
    if tax_entries is None:
        return []
    return [(entry, entry.amount_on(net)) for entry in tax_entries]


def grand_total(net: Decimal, tax_entries: Iterable[TaxEntry] | None) -> Decimal:
    """
    Add every applicable tax to the net total.

    Each entry contributes net x rate / 100. With no entries (or None)
    the result is the net total itself.

    Examples:
        >>> grand_total(Decimal("30"), [TaxEntry("State Sales tax", 9.0)])
        Decimal('32.70')
    """
    return net + sum((amount for _, amount in tax_amounts(net, tax_entries)), ZERO)
