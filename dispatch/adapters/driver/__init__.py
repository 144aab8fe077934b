"""Delivery driver adapters.

Implementations of DeliveryDriverPort:
- SimulatedDeliveryDriver: in-process driver with a configurable success rate
"""

from .simulated import SimulatedDeliveryDriver

__all__ = ["SimulatedDeliveryDriver"]
