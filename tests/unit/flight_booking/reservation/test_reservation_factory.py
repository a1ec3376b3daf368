from flight_booking.reservation.domain.entity import Reservation
from flight_booking.reservation.domain.factory import ReservationFactory


class TestReservationFactory:
    def test_create_reservation(self, create_flight, create_passengers, economy_payment):
        factory = ReservationFactory()
        flight = create_flight()

        reservation = factory.create(flight, create_passengers(2), economy_payment)

        assert isinstance(reservation, Reservation)
        assert reservation.flight is flight
        assert reservation.seat_count == 2
        assert reservation.created_at.value.tzinfo is not None

    def test_create_does_not_reserve_seats(
        self, create_flight, create_passengers, economy_payment
    ):
        flight = create_flight(seats={"Economy": 2})

        ReservationFactory().create(flight, create_passengers(2), economy_payment)

        assert flight.available_seats(economy_payment.travel_class) == 2
