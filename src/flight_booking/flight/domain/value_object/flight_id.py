from dataclasses import dataclass


@dataclass(frozen=True)
class FlightId:
    """フライトID

    例: "F001"
    """

    value: str

    def __post_init__(self) -> None:
        if not self.value or not self.value.strip():
            raise ValueError("FlightId cannot be empty")

    def __str__(self) -> str:
        return self.value
