from datetime import date

from pydantic import BaseModel, Field, field_validator, model_validator


class RegisterFlightRequest(BaseModel):
    """フライト登録リクエストスキーマ"""

    flight_id: str = Field(
        ...,
        min_length=1,
        max_length=32,
        description="フライトID",
        examples=["F001"],
    )

    origin: str = Field(
        ...,
        pattern="^[A-Za-z]{3}$",
        description="出発空港コード（IATA）",
        examples=["JFK"],
    )

    destination: str = Field(
        ...,
        pattern="^[A-Za-z]{3}$",
        description="到着空港コード（IATA）",
        examples=["LAX"],
    )

    departure_time: str = Field(
        ...,
        description="出発時刻（ISO 8601形式）",
        examples=["2023-10-01T10:00:00"],
    )

    arrival_time: str = Field(
        ...,
        description="到着時刻（ISO 8601形式）",
        examples=["2023-10-01T14:00:00"],
    )

    airline: str = Field(..., min_length=1, description="航空会社", examples=["Airline1"])

    seats: dict[str, int] = Field(
        default_factory=dict,
        description="座席クラスごとの残席数",
        examples=[{"Economy": 120, "Business": 20}],
    )

    @field_validator("seats")
    @classmethod
    def validate_seat_counts(cls, v: dict[str, int]) -> dict[str, int]:
        """残席数は0以上"""
        for travel_class, count in v.items():
            if count < 0:
                raise ValueError(f"Seat count cannot be negative: {travel_class}")
        return v


class SearchFlightsRequest(BaseModel):
    """フライト検索リクエストスキーマ（クエリ文字列）"""

    origin: str = Field(..., pattern="^[A-Za-z]{3}$", examples=["JFK"])
    destination: str = Field(..., pattern="^[A-Za-z]{3}$", examples=["LAX"])
    departure_date: date = Field(..., examples=["2023-10-01"])
    return_date: date | None = Field(default=None, examples=["2023-10-05"])
    passengers: int = Field(default=1, ge=1, le=9, description="搭乗者数")
    travel_class: str = Field(default="Economy", min_length=1)

    @model_validator(mode="after")
    def validate_return_date(self):
        if self.return_date is not None and self.return_date < self.departure_date:
            raise ValueError("Return date must not be before departure date")
        return self


class PassengerRequest(BaseModel):
    """搭乗者の入力スキーマ"""

    name: str = Field(..., min_length=1, max_length=100, examples=["Passenger1"])


class PaymentInfoRequest(BaseModel):
    """支払い情報の入力スキーマ"""

    payment_method: str = Field(
        ...,
        min_length=4,
        description="支払い方法の参照（カード番号など）",
        examples=["1234-5678-9012-3456"],
    )
    travel_class: str = Field(..., min_length=1, examples=["Economy"])


class BookReservationRequest(BaseModel):
    """フライト予約リクエストスキーマ"""

    flight_id: str = Field(..., min_length=1, examples=["F001"])
    passengers: list[PassengerRequest] = Field(..., min_length=1)
    payment_info: PaymentInfoRequest

    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "flight_id": "F001",
                    "passengers": [{"name": "Passenger1"}, {"name": "Passenger2"}],
                    "payment_info": {
                        "payment_method": "1234-5678-9012-3456",
                        "travel_class": "Economy",
                    },
                }
            ]
        }
    }
