import threading

from flight_booking.flight.domain.value_object import FlightId
from flight_booking.reservation.domain.entity import Reservation
from flight_booking.reservation.domain.repository import ReservationRepository
from flight_booking.reservation.domain.value_object import ReservationId
from flight_booking.shared.domain.exception import DuplicateResourceException


class InMemoryReservationRepository(ReservationRepository):
    """プロセス内メモリを使用した ReservationRepository の具象実装"""

    def __init__(self) -> None:
        self._reservations: dict[ReservationId, Reservation] = {}
        self._lock = threading.Lock()

    def save(self, reservation: Reservation) -> None:
        """予約を追加する"""
        with self._lock:
            if reservation.id in self._reservations:
                raise DuplicateResourceException(
                    f"Reservation already exists: {reservation.id}"
                )
            self._reservations[reservation.id] = reservation

    def find_by_id(self, reservation_id: ReservationId) -> Reservation | None:
        with self._lock:
            return self._reservations.get(reservation_id)

    def find_all(self) -> list[Reservation]:
        with self._lock:
            return list(self._reservations.values())

    def find_by_flight_id(self, flight_id: FlightId) -> list[Reservation]:
        with self._lock:
            return [r for r in self._reservations.values() if r.flight.id == flight_id]
