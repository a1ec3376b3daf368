from unittest.mock import MagicMock

import pytest

from flight_booking.flight.domain.entity import Flight
from flight_booking.flight.domain.value_object import FlightId, TravelClass
from flight_booking.flight.infrastructure.in_memory_flight_repository import (
    InMemoryFlightRepository,
)
from flight_booking.reservation.applications import ReservationSystem
from flight_booking.reservation.domain.factory import ReservationFactory
from flight_booking.reservation.domain.value_object import Passenger, PaymentInfo
from flight_booking.reservation.infrastructure.in_memory_reservation_repository import (
    InMemoryReservationRepository,
)
from flight_booking.shared.domain import AirportCode, IsoDateTime


@pytest.fixture
def create_flight():
    """Flight を生成する Factory fixture（Factories as fixtures パターン）"""

    def _factory(
        flight_id: str = "F001",
        origin: str = "JFK",
        destination: str = "LAX",
        departure_time: str = "2023-10-01T10:00:00",
        arrival_time: str = "2023-10-01T14:00:00",
        airline: str = "Airline1",
        seats: dict[str, int] | None = None,
    ) -> Flight:
        if seats is None:
            seats = {"Economy": 100, "Business": 10}
        return Flight(
            id=FlightId(flight_id),
            origin=AirportCode(origin),
            destination=AirportCode(destination),
            departure_time=IsoDateTime.from_string(departure_time),
            arrival_time=IsoDateTime.from_string(arrival_time),
            airline=airline,
            seats={TravelClass(k): v for k, v in seats.items()},
        )

    return _factory


@pytest.fixture
def create_passengers():
    """指定人数の Passenger を生成する"""

    def _factory(count: int = 1) -> list[Passenger]:
        return [Passenger(name=f"Passenger{i + 1}") for i in range(count)]

    return _factory


@pytest.fixture
def economy_payment():
    return PaymentInfo(
        payment_method="1234-5678-9012-3456", travel_class=TravelClass.economy()
    )


@pytest.fixture
def reservation_system():
    """インメモリリポジトリで構成した ReservationSystem"""
    return ReservationSystem(
        flight_repository=InMemoryFlightRepository(),
        reservation_repository=InMemoryReservationRepository(),
        factory=ReservationFactory(),
    )


@pytest.fixture
def mock_repository():
    """リポジトリのモックフィクスチャ"""
    return MagicMock()
