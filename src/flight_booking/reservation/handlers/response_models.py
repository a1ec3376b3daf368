from __future__ import annotations

from pydantic import BaseModel

from flight_booking.flight.domain.entity import Flight
from flight_booking.reservation.domain.entity import Reservation


class FlightData(BaseModel):
    """フライトデータのレスポンスモデル"""

    flight_id: str
    origin: str
    destination: str
    departure_time: str
    arrival_time: str
    airline: str
    seats: dict[str, int]


class ReservationData(BaseModel):
    """予約データのレスポンスモデル"""

    reservation_id: str
    flight_id: str
    passengers: list[str]
    travel_class: str
    seat_count: int
    payment_method: str
    created_at: str


class FlightResponse(BaseModel):
    status: str = "success"
    data: FlightData


class FlightListResponse(BaseModel):
    status: str = "success"
    flights: list[FlightData]
    count: int


class ReservationResponse(BaseModel):
    status: str = "success"
    data: ReservationData


def to_flight_data(flight: Flight) -> FlightData:
    return FlightData(
        flight_id=str(flight.id),
        origin=str(flight.origin),
        destination=str(flight.destination),
        departure_time=str(flight.departure_time),
        arrival_time=str(flight.arrival_time),
        airline=flight.airline,
        seats={str(tc): count for tc, count in flight.seats.items()},
    )


def to_flight_response(flight: Flight) -> dict:
    """Flight エンティティをレスポンス辞書に変換する"""
    return FlightResponse(data=to_flight_data(flight)).model_dump()


def to_flight_list_response(flights: list[Flight]) -> dict:
    return FlightListResponse(
        flights=[to_flight_data(f) for f in flights],
        count=len(flights),
    ).model_dump()


def to_reservation_response(reservation: Reservation) -> dict:
    """Reservation エンティティをレスポンス辞書に変換する

    支払い方法は末尾4文字以外を伏せる。
    """
    return ReservationResponse(
        data=ReservationData(
            reservation_id=str(reservation.id),
            flight_id=str(reservation.flight.id),
            passengers=[p.name for p in reservation.passengers],
            travel_class=str(reservation.travel_class),
            seat_count=reservation.seat_count,
            payment_method=reservation.payment_info.masked_payment_method,
            created_at=str(reservation.created_at),
        )
    ).model_dump()
