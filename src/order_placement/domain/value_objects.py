"""
Value Objects - Immutable domain data structures.

Value objects represent domain concepts that are identified by their
values rather than a unique identity. They are immutable and comparable.

Monetary amounts and tax rates are held as Decimal so that totals are
exact: 9% of 30 is 2.7, not 2.6999999999999997.
"""

from dataclasses import dataclass
from decimal import Decimal, InvalidOperation


def to_decimal(value: Decimal | int | float | str) -> Decimal:
    """
    Convert a numeric value to Decimal without float artifacts.

    Floats go through their shortest repr, so 9.0 becomes Decimal("9.0")
    rather than the exact binary expansion.

    Raises:
        ValueError: If the value is not a finite number
    """
    if isinstance(value, bool):
        raise ValueError(f"Not a numeric amount: {value!r}")
    try:
        if isinstance(value, Decimal):
            result = value
        elif isinstance(value, float):
            result = Decimal(str(value))
        else:
            result = Decimal(value)
    except (InvalidOperation, TypeError) as e:
        raise ValueError(f"Not a numeric amount: {value!r}") from e

    if not result.is_finite():
        raise ValueError(f"Not a finite amount: {value!r}")
    return result


@dataclass(frozen=True)
class Product:
    """
    A catalog product.

    The SKU is the stable catalog key used for stock lookups and for
    the uniqueness rule on order items.
    """
    sku: str
    price: Decimal

    def __post_init__(self) -> None:
        """Normalize price to Decimal and reject negative prices."""
        price = to_decimal(self.price)
        if price < 0:
            raise ValueError(f"Price for {self.sku} cannot be negative: {price}")
        object.__setattr__(self, "price", price)


@dataclass(frozen=True)
class OrderItem:
    """
    A single line of an order: a product and how many of it.
    """
    product: Product
    quantity: int

    def __post_init__(self) -> None:
        """Validate that quantity is a positive integer."""
        if isinstance(self.quantity, bool) or not isinstance(self.quantity, int):
            raise ValueError(f"Quantity must be an integer, got {self.quantity!r}")
        if self.quantity < 1:
            raise ValueError(f"Quantity must be positive, got {self.quantity}")

    @property
    def sku(self) -> str:
        return self.product.sku

    def subtotal(self) -> Decimal:
        """Calculate line cost before tax."""
        return self.product.price * self.quantity


@dataclass(frozen=True)
class TaxEntry:
    """
    One tax rule applicable to a location.

    The rate is a percentage: 9.0 means 9% of the net total.
    """
    description: str
    rate: Decimal

    def __post_init__(self) -> None:
        """Normalize rate to Decimal and reject negative rates."""
        rate = to_decimal(self.rate)
        if rate < 0:
            raise ValueError(f"Tax rate for '{self.description}' cannot be negative: {rate}")
        object.__setattr__(self, "rate", rate)

    def as_fraction(self) -> Decimal:
        """Get the rate as a multiplier (9.0 -> 0.09)."""
        return self.rate / 100

    def amount_on(self, net_total: Decimal) -> Decimal:
        """
        Calculate the tax this entry adds to a net total.

        Examples:
            >>> TaxEntry("State Sales tax", 9.0).amount_on(Decimal("30"))
            Decimal('2.70')
        """
        return net_total * self.as_fraction()
