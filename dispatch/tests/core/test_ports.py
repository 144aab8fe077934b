"""Unit tests for port interface contracts.

Tests verify that port abstract base classes are properly defined
and that implementations must satisfy the interface contract.
"""

from typing import Any

import pytest

from dispatch.core.delivery_service import DeliveryService
from dispatch.core.models import DeliveryReport, Order
from dispatch.core.ports import DeliveryDriverPort, DeliveryPort


class TestDeliveryDriverPort:
    """Test the DeliveryDriverPort contract."""

    def test_cannot_instantiate_abstract_port(self) -> None:
        with pytest.raises(TypeError):
            DeliveryDriverPort()  # type: ignore[abstract]

    def test_partial_implementation_is_rejected(self) -> None:
        class RefuelOnlyDriver(DeliveryDriverPort):
            def refuel(self, octane_grade: int) -> None:
                pass

        with pytest.raises(TypeError):
            RefuelOnlyDriver()  # type: ignore[abstract]

    def test_complete_implementation_is_accepted(self) -> None:
        class MinimalDriver(DeliveryDriverPort):
            def refuel(self, octane_grade: int) -> None:
                pass

            def complete_delivery(self, order: Order) -> bool:
                return True

            def contact_customer(self, phone_number: str) -> None:
                pass

        assert isinstance(MinimalDriver(), DeliveryDriverPort)


class TestDeliveryPort:
    """Test the DeliveryPort contract."""

    def test_cannot_instantiate_abstract_port(self) -> None:
        with pytest.raises(TypeError):
            DeliveryPort()  # type: ignore[abstract]

    def test_delivery_service_implements_port(self) -> None:
        assert isinstance(DeliveryService([]), DeliveryPort)

    def test_missing_status_is_rejected(self) -> None:
        class NoStatusPort(DeliveryPort):
            def refuel_all_cars(self, octane_grade: int) -> None:
                pass

            def deliver(self) -> DeliveryReport:
                raise NotImplementedError

            def schedule_delivery(self, order: Order) -> None:
                pass

            def set_accepting_orders(self, accepting: bool) -> None:
                pass

        with pytest.raises(TypeError):
            NoStatusPort()  # type: ignore[abstract]

    def test_method_signatures(self) -> None:
        for name in (
            "refuel_all_cars",
            "deliver",
            "schedule_delivery",
            "set_accepting_orders",
            "get_status",
        ):
            assert name in DeliveryPort.__abstractmethods__

    def test_get_status_returns_dict(self) -> None:
        status: dict[str, Any] = DeliveryService([]).get_status()
        assert isinstance(status, dict)
