"""Port interfaces for the Dispatch delivery system.

These abstract base classes define the boundaries between core
domain logic and external adapters. Implementations live in the
adapters/ package.

Port Interface Categories:

1. **Driven Ports** (core calls out to adapters)
   - DeliveryDriverPort: A driver that refuels, delivers and calls customers

2. **Driving Ports** (adapters/external systems call into core)
   - DeliveryPort: Entry point for scheduling and running deliveries
"""

from abc import ABC, abstractmethod
from typing import Any

from .models import DeliveryReport, Order


# ============================================================================
# DRIVEN PORTS (Core calls out to adapters)
# ============================================================================


class DeliveryDriverPort(ABC):
    """Port for a single delivery driver.

    Drivers are owned outside the core; the coordinator only keeps
    references to them and tells them what to do.
    """

    @abstractmethod
    def refuel(self, octane_grade: int) -> None:
        """Refuel the driver's car.

        Args:
            octane_grade: Fuel grade to fill up with (e.g. 85, 87, 91).
        """

    @abstractmethod
    def complete_delivery(self, order: Order) -> bool:
        """Attempt to hand an order over to its customer.

        Args:
            order: The order to deliver.

        Returns:
            True if the customer received the order, False otherwise.

        Raises:
            Exception: Adapter-specific failures. The coordinator does not
                retry or swallow them.
        """

    @abstractmethod
    def contact_customer(self, phone_number: str) -> None:
        """Call a customer, typically after a failed delivery.

        Args:
            phone_number: The customer's phone number as given on the order.
        """


# ============================================================================
# DRIVING PORTS (Adapters/external systems call into core)
# ============================================================================


class DeliveryPort(ABC):
    """Port for coordinating deliveries.

    Driving port: the CLI invokes these methods on behalf of a user.
    The implementation lives in the core (delivery_service.py).
    """

    @abstractmethod
    def refuel_all_cars(self, octane_grade: int) -> None:
        """Refuel every available driver with the given octane grade."""

    @abstractmethod
    def deliver(self) -> DeliveryReport:
        """Attempt delivery of every pending order.

        Returns:
            Summary of the run.

        Raises:
            NoResourcesAvailableError: If no drivers are available.
            NoOrdersError: If no orders are pending.
        """

    @abstractmethod
    def schedule_delivery(self, order: Order) -> None:
        """Queue an order for the next delivery run.

        Raises:
            NotAcceptingOrdersError: If the coordinator is closed for orders.
        """

    @abstractmethod
    def set_accepting_orders(self, accepting: bool) -> None:
        """Open or close the coordinator for new orders."""

    @abstractmethod
    def get_status(self) -> dict[str, Any]:
        """Report drivers available, pending orders and the accepting flag."""
