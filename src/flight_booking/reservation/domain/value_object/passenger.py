from dataclasses import dataclass
from typing import ClassVar


@dataclass(frozen=True)
class Passenger:
    """搭乗者"""

    name: str

    MAX_LENGTH: ClassVar[int] = 100

    def __post_init__(self) -> None:
        normalized = self.name.strip()
        if not normalized:
            raise ValueError("Passenger name cannot be empty")
        if len(normalized) > self.MAX_LENGTH:
            raise ValueError(
                f"Passenger name is too long (max {self.MAX_LENGTH} characters)"
            )
        object.__setattr__(self, "name", normalized)

    def __str__(self) -> str:
        return self.name
