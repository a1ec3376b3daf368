from __future__ import annotations

import uuid
from dataclasses import dataclass


@dataclass(frozen=True)
class ReservationId:
    """予約ID

    例: "3f1c9a0e-6b7d-4e52-9a43-0d1f2c3b4a5e"
    """

    value: str

    def __post_init__(self) -> None:
        if not self.value:
            raise ValueError("ReservationId cannot be empty")

    def __str__(self) -> str:
        return self.value

    @classmethod
    def generate(cls) -> ReservationId:
        """UUID4 で一意な ReservationId を生成"""
        return cls(value=str(uuid.uuid4()))
