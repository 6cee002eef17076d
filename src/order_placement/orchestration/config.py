"""
Application Configuration.

Centralized configuration for the order placement application.
"""

import os
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path

from order_placement.utils.logging import LOG_LEVELS

ENV_SEED_DATA = "ORDER_PLACEMENT_SEED_DATA"
ENV_LOG_LEVEL = "ORDER_PLACEMENT_LOG_LEVEL"
ENV_JSON_LOGS = "ORDER_PLACEMENT_JSON_LOGS"

_TRUE_VALUES = {"1", "true", "yes", "on"}


@dataclass(frozen=True)
class ApplicationConfig:
    """
    Central configuration for the application.

    All paths and settings are configurable through this object.
    """
    # Catalog, customers and tax tables for the in-memory collaborators
    seed_data_path: Path

    # Logging
    log_level: str = "INFO"
    json_logs: bool = False

    # Local fulfillment numbering
    first_order_id: int = 1000
    order_number_prefix: str = "ORD"

    def __post_init__(self):
        """Validate configuration after initialization."""
        if self.log_level.upper() not in LOG_LEVELS:
            raise ValueError(f"Unknown log level: {self.log_level}")
        if self.first_order_id < 1:
            raise ValueError(f"first_order_id must be positive, got {self.first_order_id}")

    @classmethod
    def from_defaults(cls) -> "ApplicationConfig":
        """
        Create configuration with default values.

        Returns:
            ApplicationConfig with standard defaults
        """
        base_path = Path.cwd()

        return cls(
            seed_data_path=base_path / "data" / "seed.json",
            log_level="INFO",
            json_logs=False,
            first_order_id=1000,
            order_number_prefix="ORD"
        )

    @classmethod
    def for_testing(cls) -> "ApplicationConfig":
        """
        Create configuration for testing environment.

        Returns:
            ApplicationConfig with testing defaults
        """
        base_path = Path("/tmp/order_placement_test")

        return cls(
            seed_data_path=base_path / "seed.json",
            log_level="WARNING",
            json_logs=False,
            first_order_id=1,
            order_number_prefix="TEST"
        )

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> "ApplicationConfig":
        """
        Create configuration from environment variables over the defaults.

        Args:
            environ: Mapping to read from (os.environ if None)

        Returns:
            ApplicationConfig with any overrides applied
        """
        environ = os.environ if environ is None else environ
        defaults = cls.from_defaults()

        seed_data = environ.get(ENV_SEED_DATA)
        json_logs = environ.get(ENV_JSON_LOGS)

        return cls(
            seed_data_path=Path(seed_data) if seed_data else defaults.seed_data_path,
            log_level=environ.get(ENV_LOG_LEVEL, defaults.log_level),
            json_logs=json_logs.strip().lower() in _TRUE_VALUES if json_logs else defaults.json_logs,
            first_order_id=defaults.first_order_id,
            order_number_prefix=defaults.order_number_prefix
        )
