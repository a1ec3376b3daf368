from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class TravelClass:
    """座席クラス

    例: Economy, Business
    前後の空白は除去する。大文字小文字は区別する。
    """

    value: str

    def __post_init__(self) -> None:
        normalized = self.value.strip()
        if not normalized:
            raise ValueError("Travel class cannot be empty")
        object.__setattr__(self, "value", normalized)

    def __str__(self) -> str:
        return self.value

    @classmethod
    def economy(cls) -> TravelClass:
        return cls("Economy")

    @classmethod
    def business(cls) -> TravelClass:
        return cls("Business")
