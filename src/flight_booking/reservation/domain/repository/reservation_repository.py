from abc import abstractmethod
from typing import Optional

from flight_booking.flight.domain.value_object import FlightId
from flight_booking.reservation.domain.entity import Reservation
from flight_booking.reservation.domain.value_object import ReservationId
from flight_booking.shared.domain import Repository


class ReservationRepository(Repository[Reservation, ReservationId]):
    """予約レポジトリ（追記のみ）"""

    @abstractmethod
    def save(self, reservation: Reservation) -> None:
        """追加する"""
        raise NotImplementedError

    @abstractmethod
    def find_by_id(self, reservation_id: ReservationId) -> Optional[Reservation]:
        """予約IDで検索"""
        raise NotImplementedError

    @abstractmethod
    def find_all(self) -> list[Reservation]:
        """予約順に全件を返す"""
        raise NotImplementedError

    @abstractmethod
    def find_by_flight_id(self, flight_id: FlightId) -> list[Reservation]:
        """フライトIDで検索"""
        raise NotImplementedError
