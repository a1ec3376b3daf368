import os

from aws_lambda_powertools import Logger

from flight_booking.flight.infrastructure.flight_seed_loader import load_flights
from flight_booking.flight.infrastructure.in_memory_flight_repository import (
    InMemoryFlightRepository,
)
from flight_booking.reservation.applications import ReservationSystem
from flight_booking.reservation.domain.factory import ReservationFactory
from flight_booking.reservation.infrastructure.in_memory_reservation_repository import (
    InMemoryReservationRepository,
)

logger = Logger()


def build_reservation_system(seed_path: str | None = None) -> ReservationSystem:
    """ReservationSystem を組み立てる

    seed_path（未指定時は環境変数 FLIGHTS_SEED_PATH）があれば
    そのファイルのフライトを登録する。
    """
    system = ReservationSystem(
        flight_repository=InMemoryFlightRepository(),
        reservation_repository=InMemoryReservationRepository(),
        factory=ReservationFactory(),
    )

    seed_path = seed_path or os.getenv("FLIGHTS_SEED_PATH")
    if seed_path:
        flights = load_flights(seed_path)
        for flight in flights:
            system.register_flight(flight)
        logger.info(
            "Registered seed flights",
            extra={"seed_path": seed_path, "count": len(flights)},
        )

    return system


reservation_system = build_reservation_system()
