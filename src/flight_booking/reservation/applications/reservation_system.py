import threading
from collections.abc import Sequence
from datetime import date

from flight_booking.flight.domain.entity import Flight
from flight_booking.flight.domain.repository import FlightRepository
from flight_booking.flight.domain.value_object import FlightId, SearchCriteria
from flight_booking.reservation.domain.entity import Reservation
from flight_booking.reservation.domain.factory import ReservationFactory
from flight_booking.reservation.domain.repository import ReservationRepository
from flight_booking.reservation.domain.value_object import (
    Passenger,
    PaymentInfo,
    ReservationId,
)
from flight_booking.shared.domain.exception import (
    BusinessRuleViolationException,
    NotFoundError,
)


class ReservationSystem:
    """フライト登録・検索・予約のユースケース

    座席の確保はフライトごとのロック内で行い、
    確保が確定した後にのみ予約を追加する。追加に失敗した場合は座席を戻す。
    """

    def __init__(
        self,
        flight_repository: FlightRepository,
        reservation_repository: ReservationRepository,
        factory: ReservationFactory,
    ) -> None:
        self._flight_repository = flight_repository
        self._reservation_repository = reservation_repository
        self._factory = factory
        self._registry_lock = threading.Lock()
        self._flight_locks: dict[FlightId, threading.Lock] = {}

    def register_flight(self, flight: Flight) -> None:
        """フライトを登録する

        同一IDのフライトが登録済みの場合は DuplicateResourceException
        """
        with self._registry_lock:
            self._flight_repository.save(flight)
            self._flight_locks.setdefault(flight.id, threading.Lock())

    def search_flights(
        self,
        origin: str,
        destination: str,
        departure_date: date | str,
        return_date: date | str | None = None,
        passenger_count: int = 1,
        travel_class: str = "Economy",
    ) -> list[Flight]:
        """条件に一致するフライトを登録順に返す（残席数は変更しない）"""
        criteria = SearchCriteria.create(
            origin=origin,
            destination=destination,
            departure_date=departure_date,
            return_date=return_date,
            passenger_count=passenger_count,
            travel_class=travel_class,
        )
        return self.search(criteria)

    def search(self, criteria: SearchCriteria) -> list[Flight]:
        return [f for f in self._flight_repository.find_all() if f.matches(criteria)]

    def book_reservation(
        self,
        flight_id: str,
        passengers: Sequence[Passenger],
        payment_info: PaymentInfo,
    ) -> Reservation:
        """フライトを予約する

        Raises:
            NotFoundError: フライトが存在しない
            CapacityError: 座席クラスが存在しない、または残席不足
        """
        if not passengers:
            raise BusinessRuleViolationException(
                "Reservation requires at least one passenger"
            )

        flight = self.find_flight(flight_id)
        reservation = self._factory.create(flight, passengers, payment_info)

        with self._lock_for(flight.id):
            flight.reserve_seats(payment_info.travel_class, len(passengers))
            try:
                self._reservation_repository.save(reservation)
            except Exception:
                flight.release_seats(payment_info.travel_class, len(passengers))
                raise

        return reservation

    def find_flight(self, flight_id: str) -> Flight:
        flight = None
        if flight_id and flight_id.strip():
            flight = self._flight_repository.find_by_id(FlightId(flight_id))
        if flight is None:
            raise NotFoundError(f"Flight not found: {flight_id}")
        return flight

    def list_flights(self) -> list[Flight]:
        return self._flight_repository.find_all()

    def find_reservation(self, reservation_id: str) -> Reservation:
        reservation = None
        if reservation_id:
            reservation = self._reservation_repository.find_by_id(
                ReservationId(reservation_id)
            )
        if reservation is None:
            raise NotFoundError(f"Reservation not found: {reservation_id}")
        return reservation

    def list_reservations(self, flight_id: str | None = None) -> list[Reservation]:
        """予約順に返す。flight_id を指定した場合はそのフライトのみ"""
        if flight_id is None:
            return self._reservation_repository.find_all()
        return self._reservation_repository.find_by_flight_id(FlightId(flight_id))

    def _lock_for(self, flight_id: FlightId) -> threading.Lock:
        with self._registry_lock:
            return self._flight_locks.setdefault(flight_id, threading.Lock())
