"""Core domain logic for the Dispatch delivery system.

This package contains zero external dependencies and represents
the pure business logic of the application. The concrete drivers
and the CLI are handled by the adapters package.
"""

from .errors import (
    DeliveryError,
    NoOrdersError,
    NoResourcesAvailableError,
    NotAcceptingOrdersError,
)
from .models import DeliveryReport, Order

__all__ = [
    "DeliveryError",
    "DeliveryReport",
    "NoOrdersError",
    "NoResourcesAvailableError",
    "NotAcceptingOrdersError",
    "Order",
]
