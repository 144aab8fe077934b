"""CLI command implementations for Dispatch.

Provides human-initiated actions through command-line interface.

This adapter maps CLI commands (schedule, deliver, refuel, status, accept)
to DeliveryPort operations. It handles CLI-specific formatting and error
reporting.
"""

import logging
from typing import Any

from dispatch.core.errors import DeliveryError
from dispatch.core.models import Order
from dispatch.core.ports import DeliveryPort

logger = logging.getLogger(__name__)


class CLICommandHandler:
    """Handles CLI commands by delegating to DeliveryPort.

    Every command returns a JSON-serialisable dictionary with a
    "status" of either "success" or "error".
    """

    def __init__(self, delivery: DeliveryPort):
        """Initialize the CLI command handler.

        Args:
            delivery: DeliveryPort implementation to execute commands.
        """
        self.delivery = delivery

    def schedule_delivery(
        self,
        customer_name: str,
        customer_phone_number: str,
        item_count: int,
        total_price: float,
        credit_card_number: str,
        is_paid: bool = False,
    ) -> dict[str, Any]:
        """Build an order and schedule it via CLI.

        Args:
            customer_name: Name of the customer.
            customer_phone_number: Phone number to call if delivery fails.
            item_count: Number of items in the order.
            total_price: Order total.
            credit_card_number: Payment card number.
            is_paid: Whether the order has already been paid for.

        Returns:
            Dictionary with status and message.
        """
        try:
            order = Order(
                customer_name=customer_name,
                customer_phone_number=customer_phone_number,
                item_count=item_count,
                total_price=total_price,
                credit_card_number=credit_card_number,
                is_paid=is_paid,
            )
            self.delivery.schedule_delivery(order)
        except (ValueError, DeliveryError) as e:
            logger.error(f"Failed to schedule delivery: {e}")
            return {
                "status": "error",
                "operation": "schedule",
                "message": str(e),
            }

        return {
            "status": "success",
            "operation": "schedule",
            "customer_name": customer_name,
            "message": f"Delivery scheduled for {customer_name}",
        }

    def deliver(self) -> dict[str, Any]:
        """Run deliveries for all pending orders via CLI.

        Returns:
            Dictionary with status, message and delivery counts.
        """
        try:
            report = self.delivery.deliver()
        except DeliveryError as e:
            logger.error(f"Failed to deliver: {e}")
            return {
                "status": "error",
                "operation": "deliver",
                "message": str(e),
            }

        return {
            "status": "success",
            "operation": "deliver",
            "orders_attempted": report.orders_attempted,
            "deliveries_completed": report.deliveries_completed,
            "customers_contacted": report.customers_contacted,
            "message": (
                f"Delivered {report.deliveries_completed} of "
                f"{report.orders_attempted} order(s)"
            ),
        }

    def refuel_all_cars(self, octane_grade: int) -> dict[str, Any]:
        """Refuel the whole fleet via CLI."""
        self.delivery.refuel_all_cars(octane_grade)
        return {
            "status": "success",
            "operation": "refuel",
            "octane_grade": octane_grade,
            "message": f"All cars refueled with octane {octane_grade}",
        }

    def set_accepting_orders(self, accepting: bool) -> dict[str, Any]:
        """Open or close the shop for new orders via CLI."""
        self.delivery.set_accepting_orders(accepting)
        return {
            "status": "success",
            "operation": "accept",
            "accepting_orders": accepting,
            "message": (
                "Now accepting orders" if accepting else "No longer accepting orders"
            ),
        }

    def get_status(self) -> dict[str, Any]:
        """Report fleet and queue status via CLI."""
        return {
            "status": "success",
            "operation": "status",
            **self.delivery.get_status(),
        }
