"""
Seed Loader - Builds the in-memory repositories from a JSON file.

JSON format:
    {
        "products": [{"sku": "WIDGET", "price": "5.00", "in_stock": true}],
        "customers": [{"customer_id": 123, "postal_code": "98168",
                       "country": "USA", "customer_name": "Bob"}],
        "tax_rates": [{"postal_code": "98168", "country": "USA",
                       "entries": [{"description": "State Sales tax", "rate": 9.0}]}]
    }

Every section is optional. Prices and rates may be numbers or strings;
strings keep their exact decimal value.
"""

import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from order_placement.domain.entities import Customer
from order_placement.domain.value_objects import Product, TaxEntry

from .customer_repository import InMemoryCustomerRepository
from .product_repository import InMemoryProductRepository
from .tax_rate_repository import InMemoryTaxRateService

_CUSTOMER_FIELDS = (
    "customer_name",
    "email_address",
    "address_line_1",
    "city",
    "state_or_province",
)


@dataclass
class SeedData:
    """The three lookup repositories, populated."""
    products: InMemoryProductRepository = field(default_factory=InMemoryProductRepository)
    customers: InMemoryCustomerRepository = field(default_factory=InMemoryCustomerRepository)
    tax_rates: InMemoryTaxRateService = field(default_factory=InMemoryTaxRateService)


def _records(data: dict[str, Any], section: str) -> list[dict[str, Any]]:
    """Get a seed section, checking that it is a list of objects."""
    records = data.get(section, [])
    if not isinstance(records, list) or not all(isinstance(r, dict) for r in records):
        raise ValueError(f"Seed section {section!r} must be a list of JSON objects")
    return records


def parse_seed_data(data: dict[str, Any]) -> SeedData:
    """
    Build repositories from already-decoded seed data.

    Args:
        data: Decoded JSON object

    Returns:
        Populated SeedData

    Raises:
        ValueError: If a record is missing a required field or holds
            an invalid value
    """
    seed = SeedData()

    try:
        for record in _records(data, "products"):
            seed.products.add(
                Product(sku=record["sku"], price=record["price"]),
                in_stock=bool(record.get("in_stock", True))
            )

        for record in _records(data, "customers"):
            seed.customers.save(Customer(
                customer_id=int(record["customer_id"]),
                postal_code=str(record["postal_code"]),
                country=record["country"],
                **{name: record[name] for name in _CUSTOMER_FIELDS if name in record}
            ))

        for record in _records(data, "tax_rates"):
            seed.tax_rates.add_entries(
                str(record["postal_code"]),
                str(record["country"]),
                [TaxEntry(entry["description"], entry["rate"]) for entry in _records(record, "entries")]
            )
    except KeyError as e:
        raise ValueError(f"Seed record is missing field {e}") from e
    except TypeError as e:
        raise ValueError(f"Seed record has a malformed field: {e}") from e

    return seed


def load_seed_data(path: Path | str) -> SeedData:
    """
    Load seed data from a JSON file.

    Args:
        path: Path to the seed file

    Returns:
        Populated SeedData

    Raises:
        FileNotFoundError: If the file does not exist
        ValueError: If the file is not valid seed data
    """
    path = Path(path)
    with open(path, "r", encoding="utf-8") as f:
        try:
            data = json.load(f)
        except json.JSONDecodeError as e:
            raise ValueError(f"Invalid JSON in {path}: {e}") from e

    if not isinstance(data, dict):
        raise ValueError(f"Seed file {path} must contain a JSON object")

    return parse_seed_data(data)
