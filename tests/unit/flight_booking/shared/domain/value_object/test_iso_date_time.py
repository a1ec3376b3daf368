from datetime import date, datetime, timezone

import pytest

from flight_booking.shared.domain import IsoDateTime


class TestIsoDateTime:
    def test_from_string(self):
        dt = IsoDateTime.from_string("2023-10-01T10:00:00")
        assert dt.value == datetime(2023, 10, 1, 10, 0)

    def test_from_string_accepts_z_suffix(self):
        dt = IsoDateTime.from_string("2023-10-01T10:00:00Z")
        assert dt.value == datetime(2023, 10, 1, 10, 0, tzinfo=timezone.utc)

    def test_invalid_string_raises_error(self):
        with pytest.raises(ValueError, match="Invalid ISO 8601 datetime"):
            IsoDateTime.from_string("not-a-date")

    def test_str_returns_isoformat(self):
        assert str(IsoDateTime.from_string("2023-10-01T10:00:00")) == "2023-10-01T10:00:00"

    def test_date(self):
        assert IsoDateTime.from_string("2023-10-01T23:59:00").date() == date(2023, 10, 1)

    def test_comparison(self):
        earlier = IsoDateTime.from_string("2023-10-01T10:00:00")
        later = IsoDateTime.from_string("2023-10-01T14:00:00")
        assert earlier.is_before(later)
        assert not later.is_before(earlier)
        assert not earlier.is_before(earlier)
