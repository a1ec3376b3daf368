from collections.abc import Mapping

from flight_booking.flight.domain.value_object import (
    FlightId,
    SearchCriteria,
    TravelClass,
)
from flight_booking.shared.domain import AggregateRoot, AirportCode, IsoDateTime
from flight_booking.shared.domain.exception import (
    BusinessRuleViolationException,
    CapacityError,
)


class Flight(AggregateRoot[FlightId]):
    """フライト

    座席クラスごとの残席数を保持する。残席数の変更は reserve_seats と
    release_seats のみ。座席クラスは文字列でも受け付け TravelClass に変換する。
    """

    def __init__(
        self,
        id: FlightId,
        origin: AirportCode,
        destination: AirportCode,
        departure_time: IsoDateTime,
        arrival_time: IsoDateTime,
        airline: str,
        seats: Mapping[TravelClass | str, int] | None = None,
    ) -> None:
        super().__init__(id)

        self._origin = origin
        self._destination = destination
        self._departure_time = departure_time
        self._arrival_time = arrival_time
        self._airline = airline
        self._seats: dict[TravelClass, int] = {
            k if isinstance(k, TravelClass) else TravelClass(k): v
            for k, v in (seats or {}).items()
        }

        self._validate_route()
        self._validate_airline()
        self._validate_schedule()
        self._validate_seats()

    def _validate_route(self) -> None:
        """出発地 != 到着地"""
        if self._origin == self._destination:
            raise BusinessRuleViolationException(
                "Origin and destination must be different"
            )

    def _validate_airline(self) -> None:
        if not self._airline or not self._airline.strip():
            raise BusinessRuleViolationException("Airline cannot be empty")

    def _validate_schedule(self) -> None:
        """出発時刻 < 到着時刻"""
        if not self._departure_time.is_before(self._arrival_time):
            raise BusinessRuleViolationException(
                "Departure time must be before arrival time"
            )

    def _validate_seats(self) -> None:
        """残席数は0以上の整数"""
        for travel_class, count in self._seats.items():
            if isinstance(count, bool) or not isinstance(count, int):
                raise BusinessRuleViolationException(
                    f"Seat count must be an integer: {travel_class}={count!r}"
                )
            if count < 0:
                raise BusinessRuleViolationException(
                    f"Seat count cannot be negative: {travel_class}={count}"
                )

    @property
    def origin(self) -> AirportCode:
        return self._origin

    @property
    def destination(self) -> AirportCode:
        return self._destination

    @property
    def departure_time(self) -> IsoDateTime:
        return self._departure_time

    @property
    def arrival_time(self) -> IsoDateTime:
        return self._arrival_time

    @property
    def airline(self) -> str:
        return self._airline

    @property
    def seats(self) -> dict[TravelClass, int]:
        """残席数のコピー"""
        return dict(self._seats)

    def available_seats(self, travel_class: TravelClass) -> int:
        """指定クラスの残席数（クラスが存在しない場合は 0）"""
        return self._seats.get(travel_class, 0)

    def has_available_seats(self, travel_class: TravelClass, count: int) -> bool:
        return travel_class in self._seats and self._seats[travel_class] >= count

    def matches(self, criteria: SearchCriteria) -> bool:
        """検索条件に一致するかどうか（残席数は変更しない）

        - 出発地・到着地が一致
        - 出発日が一致
        - 復路日の指定がある場合、その日までに到着
        - 指定クラスに人数分の残席がある
        """
        if self._origin != criteria.origin:
            return False
        if self._destination != criteria.destination:
            return False
        if self._departure_time.date() != criteria.departure_date:
            return False
        if (
            criteria.return_date is not None
            and self._arrival_time.date() > criteria.return_date
        ):
            return False
        return self.has_available_seats(
            criteria.travel_class, criteria.passenger_count
        )

    def reserve_seats(self, travel_class: TravelClass, count: int) -> None:
        """座席を確保する

        失敗時は残席数を変更せずに例外を送出する。
        """
        if count < 1:
            raise BusinessRuleViolationException(
                "At least one seat must be reserved"
            )
        if travel_class not in self._seats:
            raise CapacityError(
                f"Travel class not available on flight {self.id}: {travel_class}"
            )
        remaining = self._seats[travel_class]
        if remaining < count:
            raise CapacityError(
                f"Not enough {travel_class} seats on flight {self.id}: "
                f"requested {count}, available {remaining}"
            )
        self._seats[travel_class] = remaining - count

    def release_seats(self, travel_class: TravelClass, count: int) -> None:
        """reserve_seats で確保した座席を戻す"""
        if travel_class not in self._seats:
            raise CapacityError(
                f"Travel class not available on flight {self.id}: {travel_class}"
            )
        self._seats[travel_class] += count
