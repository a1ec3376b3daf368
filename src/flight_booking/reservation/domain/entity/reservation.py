from collections.abc import Sequence

from flight_booking.flight.domain.entity import Flight
from flight_booking.flight.domain.value_object import TravelClass
from flight_booking.reservation.domain.value_object import (
    Passenger,
    PaymentInfo,
    ReservationId,
)
from flight_booking.shared.domain import AggregateRoot, IsoDateTime
from flight_booking.shared.domain.exception import BusinessRuleViolationException


class Reservation(AggregateRoot[ReservationId]):
    """フライト予約

    生成後は不変。Flight は共有参照として保持する。
    """

    def __init__(
        self,
        id: ReservationId,
        flight: Flight,
        passengers: Sequence[Passenger],
        payment_info: PaymentInfo,
        created_at: IsoDateTime,
    ) -> None:
        super().__init__(id)

        self._flight = flight
        self._passengers = tuple(passengers)
        self._payment_info = payment_info
        self._created_at = created_at

        if not self._passengers:
            raise BusinessRuleViolationException(
                "Reservation requires at least one passenger"
            )

    @property
    def flight(self) -> Flight:
        return self._flight

    @property
    def passengers(self) -> tuple[Passenger, ...]:
        return self._passengers

    @property
    def payment_info(self) -> PaymentInfo:
        return self._payment_info

    @property
    def created_at(self) -> IsoDateTime:
        return self._created_at

    @property
    def travel_class(self) -> TravelClass:
        return self._payment_info.travel_class

    @property
    def seat_count(self) -> int:
        """確保した座席数 = 搭乗者数"""
        return len(self._passengers)
