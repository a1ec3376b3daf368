import uuid

from flight_booking.reservation.domain.value_object import ReservationId


class TestReservationId:
    def test_generate_returns_uuid(self):
        reservation_id = ReservationId.generate()
        assert uuid.UUID(reservation_id.value).version == 4

    def test_generate_is_unique(self):
        ids = {ReservationId.generate() for _ in range(1000)}
        assert len(ids) == 1000
