"""Delivery coordination logic.

This module implements the coordinator that sends available drivers
out with pending orders and falls back to calling the customer when a
delivery does not go through.
"""

import logging
from datetime import datetime, timezone
from typing import Any

from .errors import NoOrdersError, NoResourcesAvailableError, NotAcceptingOrdersError
from .models import DeliveryReport, Order
from .ports import DeliveryDriverPort, DeliveryPort

logger = logging.getLogger(__name__)


class DeliveryService(DeliveryPort):
    """Implements the delivery coordination logic.

    Holds the fleet of available drivers, the queue of pending orders and
    the accepting-orders gate. All three are plain attributes so callers
    can swap the fleet or close the shop between runs.
    """

    def __init__(
        self,
        available_delivery_drivers: list[DeliveryDriverPort],
        orders: list[Order] | None = None,
        accepting_orders: bool = True,
    ):
        self.available_delivery_drivers = list(available_delivery_drivers)
        self.orders = list(orders) if orders is not None else []
        self.accepting_orders = accepting_orders

    def refuel_all_cars(self, octane_grade: int) -> None:
        """Refuel every available driver with the given octane grade."""
        for driver in self.available_delivery_drivers:
            driver.refuel(octane_grade)

        logger.info(
            f"Refueled {len(self.available_delivery_drivers)} car(s) "
            f"with octane grade {octane_grade}"
        )

    def deliver(self) -> DeliveryReport:
        """Send drivers out with every pending order.

        Orders are handed to drivers round-robin. A driver whose delivery
        fails calls the customer. The queue is emptied once every order has
        been attempted; if a driver raises, the queue is left as it was.
        """
        drivers = self.available_delivery_drivers
        if not drivers:
            raise NoResourcesAvailableError()
        if not self.orders:
            raise NoOrdersError()

        completed = 0
        undelivered: list[Order] = []

        for index, order in enumerate(self.orders):
            slot = index % len(drivers)
            driver = drivers[slot]
            logger.debug(f"Delivering {order!r} with driver #{slot}")

            if driver.complete_delivery(order):
                completed += 1
                continue

            logger.warning(
                f"Delivery to {order.customer_name} failed, contacting customer"
            )
            driver.contact_customer(order.customer_phone_number)
            undelivered.append(order)

        report = DeliveryReport(
            orders_attempted=len(self.orders),
            deliveries_completed=completed,
            customers_contacted=len(undelivered),
            undelivered_orders=tuple(undelivered),
            timestamp=datetime.now(timezone.utc),
        )
        self.orders = []

        logger.info(
            f"Delivery run finished: {report.deliveries_completed}/"
            f"{report.orders_attempted} delivered, "
            f"{report.customers_contacted} customer(s) contacted"
        )
        return report

    def schedule_delivery(self, order: Order) -> None:
        """Queue an order if the coordinator is accepting orders."""
        if not self.accepting_orders:
            raise NotAcceptingOrdersError()

        self.orders.append(order)
        logger.info(
            f"Scheduled delivery for {order.customer_name} "
            f"({len(self.orders)} pending)"
        )

    def set_accepting_orders(self, accepting: bool) -> None:
        """Open or close the coordinator for new orders."""
        self.accepting_orders = accepting
        logger.info(f"Accepting orders: {accepting}")

    def get_status(self) -> dict[str, Any]:
        """Report drivers available, pending orders and the accepting flag."""
        return {
            "available_drivers": len(self.available_delivery_drivers),
            "pending_orders": len(self.orders),
            "accepting_orders": self.accepting_orders,
        }
