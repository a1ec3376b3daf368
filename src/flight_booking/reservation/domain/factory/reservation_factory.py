from collections.abc import Sequence

from flight_booking.flight.domain.entity import Flight
from flight_booking.reservation.domain.entity import Reservation
from flight_booking.reservation.domain.value_object import (
    Passenger,
    PaymentInfo,
    ReservationId,
)
from flight_booking.shared.domain import IsoDateTime


class ReservationFactory:
    """予約エンティティのファクトリ

    - 一意な ReservationId の生成
    - 予約日時の設定
    """

    def create(
        self,
        flight: Flight,
        passengers: Sequence[Passenger],
        payment_info: PaymentInfo,
    ) -> Reservation:
        """新規予約エンティティを生成する"""
        return Reservation(
            id=ReservationId.generate(),
            flight=flight,
            passengers=passengers,
            payment_info=payment_info,
            created_at=IsoDateTime.now(),
        )
