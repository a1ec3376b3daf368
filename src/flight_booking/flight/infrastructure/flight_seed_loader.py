import json
from pathlib import Path

from flight_booking.flight.domain.entity import Flight
from flight_booking.flight.domain.factory import FlightDetails, FlightFactory


def load_flights(path: str | Path, factory: FlightFactory | None = None) -> list[Flight]:
    """JSON ファイルからフライト一覧を読み込む

    ファイルは FlightDetails 形式のオブジェクトの配列とする。
    """
    factory = factory or FlightFactory()
    with open(path, encoding="utf-8") as f:
        items = json.load(f)

    if not isinstance(items, list):
        raise ValueError(f"Flight seed file must contain a JSON array: {path}")

    flights: list[Flight] = []
    for item in items:
        details: FlightDetails = {
            "flight_id": item["flight_id"],
            "origin": item["origin"],
            "destination": item["destination"],
            "departure_time": item["departure_time"],
            "arrival_time": item["arrival_time"],
            "airline": item["airline"],
            "seats": item.get("seats", {}),
        }
        flights.append(factory.create(details))
    return flights
