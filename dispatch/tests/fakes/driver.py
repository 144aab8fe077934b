"""Fake DeliveryDriverPort implementation for testing."""

from dispatch.core.models import Order
from dispatch.core.ports import DeliveryDriverPort


class FakeDeliveryDriverPort(DeliveryDriverPort):
    """In-memory delivery driver for testing.

    Records every call made through this port so tests can verify what
    the coordinator asked the driver to do.
    """

    def __init__(self, completes_deliveries: bool = True):
        """Initialize with empty call history.

        Args:
            completes_deliveries: Default result of complete_delivery.
        """
        self.completes_deliveries = completes_deliveries
        self.delivery_results: dict[Order, bool] = {}
        self.refuel_calls: list[int] = []
        self.complete_delivery_calls: list[Order] = []
        self.contact_customer_calls: list[str] = []
        self.should_fail: bool = False
        self.fail_message: str = "Driver unavailable"

    def refuel(self, octane_grade: int) -> None:
        """Record the refuel."""
        self.refuel_calls.append(octane_grade)

    def complete_delivery(self, order: Order) -> bool:
        """Record the delivery attempt and return the configured result."""
        self.complete_delivery_calls.append(order)

        if self.should_fail:
            raise RuntimeError(self.fail_message)

        return self.delivery_results.get(order, self.completes_deliveries)

    def contact_customer(self, phone_number: str) -> None:
        """Record the customer call."""
        self.contact_customer_calls.append(phone_number)

    def set_delivery_result(self, order: Order, completed: bool) -> None:
        """Configure what complete_delivery returns for a specific order."""
        self.delivery_results[order] = completed

    def set_should_fail(self, should_fail: bool, message: str = "Driver unavailable") -> None:
        """Configure the driver to raise on the next delivery."""
        self.should_fail = should_fail
        self.fail_message = message

    def times_delivered(self, order: Order) -> int:
        """Count how many times complete_delivery was called with an order."""
        return sum(1 for call in self.complete_delivery_calls if call == order)

    def times_contacted(self, phone_number: str) -> int:
        """Count how many times a phone number was called."""
        return self.contact_customer_calls.count(phone_number)

    def reset(self) -> None:
        """Reset all recorded calls and configured state."""
        self.delivery_results.clear()
        self.refuel_calls.clear()
        self.complete_delivery_calls.clear()
        self.contact_customer_calls.clear()
        self.completes_deliveries = True
        self.should_fail = False
        self.fail_message = "Driver unavailable"
