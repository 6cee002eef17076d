"""
Main entry point for the Order Placement Application.

Usage:
    order-placement order.json                      # Place an order
    order-placement order.json --seed data/seed.json
    order-placement order.json --log-level DEBUG --json-logs
"""

import argparse
import sys
from dataclasses import replace
from pathlib import Path

from order_placement.orchestration import ApplicationConfig, create_orchestrator
from order_placement.utils.logging import LOG_LEVELS, configure_logging


def build_parser() -> argparse.ArgumentParser:
    """Create the command line parser."""
    parser = argparse.ArgumentParser(
        prog="order-placement",
        description="Order Placement Application",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Environment:
  ORDER_PLACEMENT_SEED_DATA   Seed data file (default: data/seed.json)
  ORDER_PLACEMENT_LOG_LEVEL   Log level (default: INFO)
  ORDER_PLACEMENT_JSON_LOGS   Emit JSON logs when set to 1/true/yes
        """
    )

    parser.add_argument(
        "order_file",
        type=Path,
        help="Order to place (JSON)"
    )

    parser.add_argument(
        "--seed",
        type=Path,
        help="Override seed data path"
    )

    parser.add_argument(
        "--log-level",
        choices=LOG_LEVELS,
        type=str.upper,
        help="Override log level"
    )

    parser.add_argument(
        "--json-logs",
        action="store_true",
        help="Emit logs as JSON"
    )

    return parser


def main(argv: list[str] | None = None) -> int:
    """Main entry point."""
    args = build_parser().parse_args(argv)

    try:
        # Create configuration
        config = ApplicationConfig.from_env()

        if args.seed:
            config = replace(config, seed_data_path=args.seed)
        if args.log_level:
            config = replace(config, log_level=args.log_level)
        if args.json_logs:
            config = replace(config, json_logs=True)

        configure_logging(config.log_level, config.json_logs)

        orchestrator = create_orchestrator(config)
        return orchestrator.place_order_from_file(args.order_file)

    except KeyboardInterrupt:
        print("\n\n[CANCELLED] Application interrupted by user")
        return 1

    except (OSError, ValueError) as e:
        print(f"\n[ERROR] Application failed: {e}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
