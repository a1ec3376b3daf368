import threading

from flight_booking.flight.domain.entity import Flight
from flight_booking.flight.domain.repository import FlightRepository
from flight_booking.flight.domain.value_object import FlightId
from flight_booking.shared.domain.exception import DuplicateResourceException


class InMemoryFlightRepository(FlightRepository):
    """プロセス内メモリを使用した FlightRepository の具象実装

    dict の挿入順 = 登録順
    """

    def __init__(self) -> None:
        self._flights: dict[FlightId, Flight] = {}
        self._lock = threading.Lock()

    def save(self, flight: Flight) -> None:
        """フライトを登録する"""
        with self._lock:
            if flight.id in self._flights:
                raise DuplicateResourceException(f"Flight already exists: {flight.id}")
            self._flights[flight.id] = flight

    def find_by_id(self, flight_id: FlightId) -> Flight | None:
        """フライトIDで検索"""
        with self._lock:
            return self._flights.get(flight_id)

    def find_all(self) -> list[Flight]:
        with self._lock:
            return list(self._flights.values())
