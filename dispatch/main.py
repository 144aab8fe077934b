"""Composition root for the Dispatch delivery system.

This module is the ONLY location that imports both core domain logic
and concrete adapter implementations. All wiring of dependencies
happens here, creating a clear entry point for the application.

Module Structure:
- Configuration loading via config module
- Driver fleet instantiation
- Core service initialization
- Interactive CLI loop
"""

import json
import logging
import random
import sys
from typing import Any

from dispatch.adapters.cli.commands import CLICommandHandler
from dispatch.adapters.driver.simulated import SimulatedDeliveryDriver
from dispatch.config import Settings, load_settings
from dispatch.core.delivery_service import DeliveryService

SCHEDULE_REQUIRED_FIELDS = (
    "customer_name",
    "customer_phone_number",
    "item_count",
    "total_price",
    "credit_card_number",
)


def _run_cli_interactive(
    cli_handler: CLICommandHandler, default_octane_grade: int = 87
) -> None:
    """Run interactive CLI loop.

    Provides a REPL-like interface for delivery commands.

    Args:
        cli_handler: CLICommandHandler instance for executing commands.
        default_octane_grade: Grade used by 'refuel' when none is given.
    """
    logger = logging.getLogger(__name__)
    logger.info("Starting interactive CLI. Type 'help' for available commands or 'exit' to quit.")

    while True:
        try:
            command_line = input("dispatch> ").strip()

            if not command_line:
                continue

            if command_line.lower() == "exit":
                logger.info("Exiting CLI")
                break

            if command_line.lower() == "help":
                _print_cli_help()
                continue

            # Parse command and arguments
            parts = command_line.split(maxsplit=1)
            command = parts[0].lower()
            args_str = parts[1] if len(parts) > 1 else ""

            try:
                args = json.loads(args_str) if args_str else {}
            except json.JSONDecodeError:
                logger.error("Invalid JSON arguments. Use 'help' for command syntax.")
                continue

            if not isinstance(args, dict):
                logger.error("Arguments must be a JSON object. Use 'help' for command syntax.")
                continue

            try:
                result = _execute_cli_command(
                    cli_handler, command, args, default_octane_grade
                )
                print(json.dumps(result, indent=2, default=str))
            except Exception as e:
                logger.error(f"Command execution error: {e}", exc_info=True)
                print(json.dumps({
                    "status": "error",
                    "message": str(e)
                }, indent=2))

        except EOFError:
            # Ctrl+D to exit
            logger.info("EOF received, exiting CLI")
            break
        except KeyboardInterrupt:
            # Ctrl+C
            logger.info("Interrupted by user")
            continue


def _execute_cli_command(
    cli_handler: CLICommandHandler,
    command: str,
    args: dict[str, Any],
    default_octane_grade: int = 87,
) -> dict[str, Any]:
    """Execute a CLI command.

    Args:
        cli_handler: CLICommandHandler instance.
        command: Command name.
        args: Command arguments.
        default_octane_grade: Grade used by 'refuel' when none is given.

    Returns:
        Command result dictionary.

    Raises:
        ValueError: If command is not recognized or arguments are missing.
    """
    if command == "schedule":
        missing = [name for name in SCHEDULE_REQUIRED_FIELDS if name not in args]
        if missing:
            raise ValueError(f"Missing required parameter(s): {', '.join(missing)}")
        return cli_handler.schedule_delivery(
            customer_name=args["customer_name"],
            customer_phone_number=args["customer_phone_number"],
            item_count=args["item_count"],
            total_price=args["total_price"],
            credit_card_number=args["credit_card_number"],
            is_paid=args.get("is_paid", False),
        )

    elif command == "deliver":
        return cli_handler.deliver()

    elif command == "refuel":
        return cli_handler.refuel_all_cars(
            args.get("octane_grade", default_octane_grade)
        )

    elif command == "status":
        return cli_handler.get_status()

    elif command == "accept":
        if "accepting" not in args:
            raise ValueError("Missing required parameter: accepting")
        if not isinstance(args["accepting"], bool):
            raise ValueError("accepting must be true or false")
        return cli_handler.set_accepting_orders(args["accepting"])

    else:
        raise ValueError(f"Unknown command: {command}. Use 'help' for available commands.")


def _print_cli_help() -> None:
    """Print CLI help message."""
    help_text = """
Available Commands (JSON format):

  schedule
    Queue an order for delivery.
    Required: customer_name, customer_phone_number, item_count,
              total_price, credit_card_number
    Optional: is_paid

    Example: schedule {"customer_name": "Ada", "customer_phone_number": "555-0100",
                       "item_count": 2, "total_price": 12.5,
                       "credit_card_number": "4111111111111111", "is_paid": true}

  deliver
    Send drivers out with every pending order.

  refuel
    Refuel every car in the fleet.
    Optional: octane_grade

    Example: refuel {"octane_grade": 91}

  status
    Show available drivers, pending orders and whether orders are accepted.

  accept
    Open or close the shop for new orders.
    Required: accepting

    Example: accept {"accepting": false}

  help
    Show this help message.

  exit
    Exit the CLI.

Note: All commands accept arguments as a single JSON object.
Provide the JSON after the command name on the same line.
    """
    print(help_text)


def configure_logging(log_level: str, log_format: str) -> None:
    """Configure application logging.

    Args:
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL).
        log_format: Log format (json, text).
    """
    level = getattr(logging, log_level, logging.INFO)

    if log_format == "json":
        format_str = '{"time": "%(asctime)s", "level": "%(levelname)s", "message": "%(message)s"}'
    else:
        format_str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

    logging.basicConfig(
        level=level,
        format=format_str,
        handlers=[
            logging.StreamHandler(sys.stdout),
        ],
    )


def build_delivery_service(settings: Settings) -> DeliveryService:
    """Wire a simulated driver fleet into a DeliveryService.

    Drivers share one random source so a configured seed makes the
    whole run reproducible.
    """
    rng = random.Random(settings.random_seed)
    drivers = [
        SimulatedDeliveryDriver(
            name=f"driver-{number}",
            success_rate=settings.delivery_success_rate,
            rng=rng,
        )
        for number in range(1, settings.fleet_size + 1)
    ]
    return DeliveryService(
        available_delivery_drivers=drivers,
        accepting_orders=settings.accepting_orders,
    )


def bootstrap() -> None:
    """Load configuration, wire adapters, and start the CLI.

    This is the composition root: the single place where all components
    are instantiated and wired together.
    """
    settings = load_settings()

    configure_logging(
        "DEBUG" if settings.debug else settings.log_level,
        settings.log_format,
    )
    logger = logging.getLogger(__name__)
    logger.info("Loading Dispatch delivery system...")

    delivery_service = build_delivery_service(settings)
    logger.info(
        f"Fleet ready: {settings.fleet_size} driver(s), "
        f"success rate {settings.delivery_success_rate:.0%}"
    )

    cli_handler = CLICommandHandler(delivery_service)
    _run_cli_interactive(cli_handler, settings.default_octane_grade)


def main() -> None:
    """Application entry point.

    Exit codes:
        0: Successful shutdown
        1: Fatal bootstrap or runtime error
        130: Interrupted by user (SIGINT/KeyboardInterrupt)
    """
    logger = logging.getLogger(__name__)
    try:
        bootstrap()
    except KeyboardInterrupt:
        logger.warning("Shutdown requested by user (SIGINT)")
        sys.exit(130)
    except Exception as e:
        logger.error(f"Fatal error: {e}", exc_info=True)
        sys.exit(1)


if __name__ == "__main__":
    main()
