"""Business-rule errors raised by the delivery coordinator.

Each error carries a fixed, customer-facing message.
"""


class DeliveryError(Exception):
    """Base class for delivery business-rule violations."""

    message: str = "Delivery operation failed"

    def __init__(self, message: str | None = None):
        super().__init__(message or self.message)


class NoResourcesAvailableError(DeliveryError):
    """No delivery drivers are available."""

    message = (
        "Sorry we currently do not have the resources available "
        "to complete more deliveries"
    )


class NoOrdersError(DeliveryError):
    """There is nothing pending to deliver."""

    message = "There are currently no orders to deliver"


class NotAcceptingOrdersError(DeliveryError):
    """The coordinator is closed for new orders."""

    message = "Sorry we are not currently accepting orders"


__all__ = [
    "DeliveryError",
    "NoOrdersError",
    "NoResourcesAvailableError",
    "NotAcceptingOrdersError",
]
