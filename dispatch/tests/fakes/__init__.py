"""Fake implementations of core ports for testing.

These in-memory implementations allow core domain logic to be tested
without real drivers:

- FakeDeliveryDriverPort: Records refuel, delivery and contact calls
- FakeDeliveryPort: Captured scheduling and delivery operations
"""

from .delivery import FakeDeliveryPort
from .driver import FakeDeliveryDriverPort

__all__ = [
    "FakeDeliveryDriverPort",
    "FakeDeliveryPort",
]
