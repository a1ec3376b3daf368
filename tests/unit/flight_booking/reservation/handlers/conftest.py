import json
from dataclasses import dataclass

import pytest

from flight_booking.reservation.handlers import (
    book,
    get_reservation,
    register_flight,
    search,
)


@dataclass
class LambdaContext:
    function_name: str = "test"
    memory_limit_in_mb: int = 128
    invoked_function_arn: str = "arn:aws:lambda:ap-northeast-1:123456789012:function:test"
    aws_request_id: str = "52fdfc07-2182-154f-163f-5f0f9a621d72"
    tenant_id: str | None = None

    def get_remaining_time_in_millis(self) -> int:
        return 30000


@pytest.fixture
def lambda_context():
    return LambdaContext()


@pytest.fixture
def create_event():
    """API Gateway HTTP API (v2) イベントを生成する"""

    def _factory(
        body: dict | None = None,
        query: dict | None = None,
        path: dict | None = None,
    ) -> dict:
        event: dict = {
            "version": "2.0",
            "routeKey": "$default",
            "rawPath": "/",
            "headers": {"content-type": "application/json"},
            "isBase64Encoded": False,
        }
        if body is not None:
            event["body"] = json.dumps(body)
        if query is not None:
            event["queryStringParameters"] = query
        if path is not None:
            event["pathParameters"] = path
        return event

    return _factory


@pytest.fixture(autouse=True)
def isolated_system(monkeypatch, reservation_system):
    """各ハンドラーが同じ新しい ReservationSystem を使うようにする"""
    for module in (book, get_reservation, register_flight, search):
        monkeypatch.setattr(module, "service", reservation_system)
    return reservation_system


@pytest.fixture
def flight_body():
    return {
        "flight_id": "F001",
        "origin": "JFK",
        "destination": "LAX",
        "departure_time": "2023-10-01T10:00:00",
        "arrival_time": "2023-10-01T14:00:00",
        "airline": "Airline1",
        "seats": {"Economy": 2, "Business": 1},
    }
