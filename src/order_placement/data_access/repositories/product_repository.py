"""
Product Repository - In-memory catalog and stock source.

Satisfies the ProductRepository contract used by the order validator.
"""

from collections.abc import Iterable

from order_placement.domain.value_objects import Product


class InMemoryProductRepository:
    """
    Catalog of products with an in-stock flag per SKU.

    SKUs that were never added report out of stock.
    """

    def __init__(
        self,
        products: Iterable[Product] = (),
        in_stock_skus: Iterable[str] | None = None
    ):
        """
        Initialize repository.

        Args:
            products: Initial catalog
            in_stock_skus: SKUs in stock; every given product if None
        """
        self._products: dict[str, Product] = {}
        self._stock: dict[str, bool] = {}

        in_stock = set(in_stock_skus) if in_stock_skus is not None else None
        for product in products:
            self.add(product, in_stock=in_stock is None or product.sku in in_stock)

    def add(self, product: Product, in_stock: bool = True) -> None:
        """Add or replace a product in the catalog."""
        self._products[product.sku] = product
        self._stock[product.sku] = in_stock

    def set_stock(self, sku: str, in_stock: bool) -> None:
        """
        Mark a catalog product as in or out of stock.

        Raises:
            KeyError: If the SKU is not in the catalog
        """
        if sku not in self._products:
            raise KeyError(f"Unknown SKU: {sku}")
        self._stock[sku] = in_stock

    def is_in_stock(self, sku: str) -> bool:
        return self._stock.get(sku, False)

    def count(self) -> int:
        """Get number of products in the catalog."""
        return len(self._products)
