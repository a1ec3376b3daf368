import pytest

from flight_booking.flight.domain.value_object import TravelClass
from flight_booking.reservation.domain.value_object import PaymentInfo


class TestPaymentInfo:
    def test_masked_payment_method(self):
        payment_info = PaymentInfo(
            payment_method="1234-5678-9012-3456", travel_class=TravelClass.economy()
        )
        assert payment_info.masked_payment_method == "***************3456"

    def test_repr_hides_payment_method(self):
        payment_info = PaymentInfo(
            payment_method="1234-5678-9012-3456", travel_class=TravelClass.economy()
        )
        assert "1234" not in repr(payment_info)

    def test_empty_payment_method_raises_error(self):
        with pytest.raises(ValueError, match="Payment method cannot be empty"):
            PaymentInfo(payment_method="", travel_class=TravelClass.economy())
