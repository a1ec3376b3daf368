import pytest

from flight_booking.flight.domain.value_object import FlightId, TravelClass


class TestTravelClass:
    def test_whitespace_is_stripped(self):
        assert TravelClass(" Economy ") == TravelClass.economy()

    def test_labels_are_case_sensitive(self):
        assert TravelClass("economy") != TravelClass.economy()

    def test_empty_label_raises_error(self):
        with pytest.raises(ValueError, match="Travel class cannot be empty"):
            TravelClass("   ")


class TestFlightId:
    def test_str_returns_value(self):
        assert str(FlightId("F001")) == "F001"

    def test_empty_id_raises_error(self):
        with pytest.raises(ValueError, match="FlightId cannot be empty"):
            FlightId("")
