"""
Application Orchestrator - Main coordinator for the order placement application.

This is the top-level component that ties together all layers:
- Domain models
- Seed-data repositories and local gateways
- Order service
- Presentation layer
"""

import json
from pathlib import Path

import structlog

from order_placement.business_logic.services.order_service import OrderService
from order_placement.data_access.gateways import LocalFulfillmentService, LoggingEmailService
from order_placement.data_access.repositories import load_seed_data
from order_placement.domain.entities import Order
from order_placement.domain.exceptions import OrderPlacementError, ValidationFailedError
from order_placement.domain.value_objects import OrderItem, Product
from order_placement.orchestration.config import ApplicationConfig
from order_placement.presentation.formatters import OrderSummaryFormatter
from order_placement.utils.logging import add_context, clear_context

logger = structlog.get_logger(__name__)


def load_order(path: Path | str) -> Order:
    """
    Read an order from a JSON file.

    JSON format:
        {"customer_id": 123,
         "items": [{"sku": "WIDGET", "price": "5.00", "quantity": 2}]}

    Args:
        path: Path to the order file

    Returns:
        Order built from the file

    Raises:
        FileNotFoundError: If the file does not exist
        ValueError: If the file does not describe a valid order
    """
    path = Path(path)
    with open(path, "r", encoding="utf-8") as f:
        try:
            data = json.load(f)
        except json.JSONDecodeError as e:
            raise ValueError(f"Invalid JSON in {path}: {e}") from e

    if not isinstance(data, dict):
        raise ValueError(f"Order file {path} must contain a JSON object")

    records = data.get("items", [])
    if not isinstance(records, list) or not all(isinstance(r, dict) for r in records):
        raise ValueError(f"Order file {path} must list its items as JSON objects")

    try:
        items = [
            OrderItem(
                product=Product(sku=item["sku"], price=item["price"]),
                quantity=item["quantity"]
            )
            for item in records
        ]
        return Order.of(int(data["customer_id"]), items)
    except KeyError as e:
        raise ValueError(f"Order file {path} is missing field {e}") from e
    except TypeError as e:
        raise ValueError(f"Order file {path} has a malformed field: {e}") from e


class ApplicationOrchestrator:
    """
    Main application orchestrator.

    Reads orders from files, places them through the order service
    and prints the outcome.
    """

    def __init__(
        self,
        config: ApplicationConfig,
        order_service: OrderService,
        formatter: OrderSummaryFormatter | None = None
    ):
        """
        Initialize the orchestrator.

        Args:
            config: Application configuration
            order_service: Service that places orders
            formatter: Output formatter (creates default if None)
        """
        self._config = config
        self._order_service = order_service
        self._formatter = formatter or OrderSummaryFormatter()

    def place_order_from_file(self, order_path: Path) -> int:
        """
        Place the order described in a file and print the result.

        Validation failures and collaborator errors are printed rather
        than raised.

        Args:
            order_path: Path to the order JSON file

        Returns:
            0 if the order was placed, 1 otherwise
        """
        add_context(order_file=str(order_path))
        try:
            order = load_order(order_path)
            summary = self._order_service.place_order(order)
        except ValidationFailedError as e:
            print(self._formatter.format_validation_failure(e))
            return 1
        except (OrderPlacementError, ValueError) as e:
            logger.error("Order placement failed", error=str(e))
            print(self._formatter.format_error(e))
            return 1
        finally:
            clear_context()

        print(self._formatter.format_summary(summary))
        return 0


def create_order_service(config: ApplicationConfig) -> OrderService:
    """
    Build an order service backed by the seed data and local gateways.

    Args:
        config: Application configuration

    Returns:
        Configured OrderService
    """
    seed = load_seed_data(config.seed_data_path)
    logger.info(
        "Seed data loaded",
        path=str(config.seed_data_path),
        products=seed.products.count(),
        customers=seed.customers.count(),
        tax_locations=seed.tax_rates.location_count(),
    )

    return OrderService(
        product_repository=seed.products,
        order_fulfillment_service=LocalFulfillmentService(
            first_order_id=config.first_order_id,
            prefix=config.order_number_prefix
        ),
        customer_repository=seed.customers,
        tax_rate_service=seed.tax_rates,
        email_service=LoggingEmailService(),
    )


def create_orchestrator(config: ApplicationConfig) -> ApplicationOrchestrator:
    """
    Factory function to create a fully configured orchestrator.

    Args:
        config: Application configuration

    Returns:
        Configured ApplicationOrchestrator
    """
    return ApplicationOrchestrator(
        config=config,
        order_service=create_order_service(config)
    )
