import pytest

from flight_booking.reservation.domain.value_object import Passenger


class TestPassenger:
    def test_valid_passenger(self):
        passenger = Passenger(name=" Passenger1 ")
        assert passenger.name == "Passenger1"
        assert str(passenger) == "Passenger1"

    def test_empty_name_raises_error(self):
        with pytest.raises(ValueError, match="Passenger name cannot be empty"):
            Passenger(name="   ")

    def test_too_long_name_raises_error(self):
        with pytest.raises(ValueError, match="Passenger name is too long"):
            Passenger(name="A" * 101)
