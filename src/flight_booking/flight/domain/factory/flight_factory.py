from collections.abc import Mapping
from typing import TypedDict

from flight_booking.flight.domain.entity import Flight
from flight_booking.flight.domain.value_object import FlightId, TravelClass
from flight_booking.shared.domain import AirportCode, IsoDateTime


class FlightDetails(TypedDict):
    """フライトの入力データ構造"""

    flight_id: str
    origin: str
    destination: str
    departure_time: str
    arrival_time: str
    airline: str
    seats: Mapping[str, int]


class FlightFactory:
    """フライトエンティティのファクトリ

    - プリミティブ型から Value Object への変換
    """

    def create(self, flight_details: FlightDetails) -> Flight:
        """新規フライトエンティティを生成する

        Args:
            flight_details: フライト詳細情報

        Returns:
            Flight: 生成されたフライト
        """
        seats = {
            TravelClass(label): count
            for label, count in flight_details["seats"].items()
        }

        return Flight(
            id=FlightId(flight_details["flight_id"]),
            origin=AirportCode(flight_details["origin"]),
            destination=AirportCode(flight_details["destination"]),
            departure_time=IsoDateTime.from_string(flight_details["departure_time"]),
            arrival_time=IsoDateTime.from_string(flight_details["arrival_time"]),
            airline=flight_details["airline"],
            seats=seats,
        )
