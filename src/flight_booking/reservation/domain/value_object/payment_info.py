from dataclasses import dataclass, field

from flight_booking.flight.domain.value_object import TravelClass


@dataclass(frozen=True)
class PaymentInfo:
    """支払い情報（支払い方法の参照 + 希望座席クラス）

    決済処理は行わない。payment_method は repr に出さない。
    """

    payment_method: str = field(repr=False)
    travel_class: TravelClass

    def __post_init__(self) -> None:
        if not self.payment_method or not self.payment_method.strip():
            raise ValueError("Payment method cannot be empty")

    @property
    def masked_payment_method(self) -> str:
        """末尾4文字以外を伏せた支払い方法"""
        tail = self.payment_method[-4:]
        return "*" * max(len(self.payment_method) - 4, 0) + tail
