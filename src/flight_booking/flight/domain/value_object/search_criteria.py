from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime

from flight_booking.flight.domain.value_object.travel_class import TravelClass
from flight_booking.shared.domain import AirportCode


@dataclass(frozen=True)
class SearchCriteria:
    """フライト検索条件

    - return_date は任意。指定した場合は departure_date 以降であること
    - passenger_count は 1 以上
    """

    origin: AirportCode
    destination: AirportCode
    departure_date: date
    travel_class: TravelClass
    passenger_count: int = 1
    return_date: date | None = None

    def __post_init__(self) -> None:
        if self.passenger_count < 1:
            raise ValueError("Passenger count must be at least 1")
        if self.return_date is not None and self.return_date < self.departure_date:
            raise ValueError("Return date must not be before departure date")

    @classmethod
    def create(
        cls,
        origin: str,
        destination: str,
        departure_date: date | str,
        return_date: date | str | None = None,
        passenger_count: int = 1,
        travel_class: str = "Economy",
    ) -> SearchCriteria:
        """プリミティブ型から検索条件を生成する

        日付は date もしくは YYYY-MM-DD 形式の文字列を受け付ける。
        """
        return cls(
            origin=AirportCode(origin),
            destination=AirportCode(destination),
            departure_date=_to_date(departure_date),
            return_date=_to_date(return_date) if return_date is not None else None,
            passenger_count=passenger_count,
            travel_class=TravelClass(travel_class),
        )


def _to_date(v: date | str) -> date:
    if isinstance(v, datetime):
        return v.date()
    if isinstance(v, date):
        return v
    try:
        return date.fromisoformat(v)
    except ValueError as e:
        raise ValueError(f"Invalid date format: {v}") from e
