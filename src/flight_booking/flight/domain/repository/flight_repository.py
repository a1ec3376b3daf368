from abc import abstractmethod
from typing import Optional

from flight_booking.flight.domain.entity import Flight
from flight_booking.flight.domain.value_object import FlightId
from flight_booking.shared.domain import Repository


class FlightRepository(Repository[Flight, FlightId]):
    """フライトレポジトリ"""

    @abstractmethod
    def save(self, flight: Flight) -> None:
        """登録する（同一IDは DuplicateResourceException）"""
        raise NotImplementedError

    @abstractmethod
    def find_by_id(self, flight_id: FlightId) -> Optional[Flight]:
        """フライトIDで検索"""
        raise NotImplementedError

    @abstractmethod
    def find_all(self) -> list[Flight]:
        """登録順に全件を返す"""
        raise NotImplementedError
