import re
from dataclasses import dataclass
from typing import ClassVar


@dataclass(frozen=True)
class AirportCode:
    """空港コード（IATA 3レター）

    例: JFK, LAX, HND
    """

    value: str

    PATTERN: ClassVar[re.Pattern[str]] = re.compile(r"^[A-Z]{3}$")

    def __post_init__(self) -> None:
        normalized = self.value.strip().upper()
        if not self.PATTERN.match(normalized):
            raise ValueError(
                f"Invalid airport code: {self.value}. "
                "Expected format: JFK (3 letters)"
            )
        object.__setattr__(self, "value", normalized)

    def __str__(self) -> str:
        return self.value
