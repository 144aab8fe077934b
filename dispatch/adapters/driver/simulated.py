"""Simulated delivery driver adapter.

Implements DeliveryDriverPort in-process: refuels are recorded,
deliveries succeed with a configurable probability and customer
calls are logged.
"""

import logging
import random

from dispatch.core.models import Order
from dispatch.core.ports import DeliveryDriverPort

logger = logging.getLogger(__name__)


class SimulatedDeliveryDriver(DeliveryDriverPort):
    """A driver whose deliveries succeed at a fixed rate."""

    def __init__(
        self,
        name: str,
        success_rate: float = 1.0,
        rng: random.Random | None = None,
    ):
        """Initialize the simulated driver.

        Args:
            name: Display name used in logs.
            success_rate: Probability in [0, 1] that a delivery goes through.
            rng: Random source; pass a seeded instance for reproducible runs.
        """
        if not 0.0 <= success_rate <= 1.0:
            raise ValueError(
                f"success_rate must be between 0 and 1, got {success_rate}"
            )
        self.name = name
        self.success_rate = success_rate
        self.rng = rng or random.Random()
        self.last_octane_grade: int | None = None
        self.refuel_count = 0
        self.delivered_orders: list[Order] = []
        self.contacted_customers: list[str] = []

    def refuel(self, octane_grade: int) -> None:
        """Fill up the tank with the given grade."""
        self.last_octane_grade = octane_grade
        self.refuel_count += 1
        logger.info(f"{self.name} refueled with octane {octane_grade}")

    def complete_delivery(self, order: Order) -> bool:
        """Deliver the order with probability success_rate."""
        # random() is in [0, 1) so a rate of 1.0 always succeeds and 0.0 never does
        delivered = self.rng.random() < self.success_rate
        if delivered:
            self.delivered_orders.append(order)
            logger.info(f"{self.name} delivered order for {order.customer_name}")
        else:
            logger.info(f"{self.name} could not deliver order for {order.customer_name}")
        return delivered

    def contact_customer(self, phone_number: str) -> None:
        """Call the customer."""
        self.contacted_customers.append(phone_number)
        logger.info(f"{self.name} contacting customer at {phone_number}")
