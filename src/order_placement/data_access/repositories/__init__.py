"""
Repositories - In-memory lookup sources for products, customers and taxes.
"""

from .customer_repository import InMemoryCustomerRepository
from .product_repository import InMemoryProductRepository
from .seed_loader import SeedData, load_seed_data, parse_seed_data
from .tax_rate_repository import InMemoryTaxRateService

__all__ = [
    "InMemoryCustomerRepository",
    "InMemoryProductRepository",
    "InMemoryTaxRateService",
    "SeedData",
    "load_seed_data",
    "parse_seed_data",
]
