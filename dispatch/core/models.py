"""Domain models for the Dispatch delivery system.

All models in this module use only Python standard library types,
ensuring zero external dependencies in the core domain.
"""

import math
from dataclasses import dataclass, field
from datetime import datetime


@dataclass(frozen=True)
class Order:
    """A customer delivery request.

    Created by the caller before scheduling and never mutated afterwards.
    The card number is kept out of the repr so orders can be logged.
    """

    customer_name: str
    customer_phone_number: str
    item_count: int
    total_price: float
    credit_card_number: str = field(repr=False)
    is_paid: bool = False

    def __post_init__(self) -> None:
        """Validate order invariants on creation."""
        if not isinstance(self.customer_name, str) or not self.customer_name.strip():
            raise ValueError("customer_name must be a non-empty string")
        if (
            not isinstance(self.customer_phone_number, str)
            or not self.customer_phone_number.strip()
        ):
            raise ValueError("customer_phone_number must be a non-empty string")
        # bool is a subclass of int
        if not isinstance(self.item_count, int) or isinstance(self.item_count, bool):
            raise ValueError(
                f"item_count must be an integer, got {self.item_count!r}"
            )
        if self.item_count < 1:
            raise ValueError(
                f"item_count must be >= 1, got {self.item_count}"
            )
        if (
            not isinstance(self.total_price, (int, float))
            or isinstance(self.total_price, bool)
            or not math.isfinite(self.total_price)
        ):
            raise ValueError(
                f"total_price must be a finite number, got {self.total_price!r}"
            )
        if self.total_price < 0:
            raise ValueError(
                f"total_price must be non-negative, got {self.total_price}"
            )


@dataclass(frozen=True)
class DeliveryReport:
    """Summary of one delivery run."""

    orders_attempted: int
    deliveries_completed: int
    customers_contacted: int
    undelivered_orders: tuple[Order, ...]  # immutable for frozen dataclass
    timestamp: datetime

    def __post_init__(self) -> None:
        """Validate that the counts add up."""
        if self.deliveries_completed + self.customers_contacted != self.orders_attempted:
            raise ValueError(
                f"deliveries_completed ({self.deliveries_completed}) + "
                f"customers_contacted ({self.customers_contacted}) must equal "
                f"orders_attempted ({self.orders_attempted})"
            )
        if len(self.undelivered_orders) != self.customers_contacted:
            raise ValueError(
                "undelivered_orders must hold one order per contacted customer"
            )
