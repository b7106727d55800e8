"""
Pytest tests for Pydantic models.
"""

from datetime import datetime, timedelta, timezone

import pytest
from pydantic import ValidationError

from charter.models import (
    AirportModel,
    AirportSearchResult,
    PilotPatch,
    PlaneCreate,
    PlanePatch,
    TripCreate,
    TripPatch,
    TripStatus,
)


class TestAirportModels:

    def test_coordinates_are_lon_lat(self):
        airport = AirportModel(icao="KSEA", iata="SEA", name="Seattle-Tacoma", latitude=47.449, longitude=-122.3093)
        assert airport.coordinates == [-122.3093, 47.449]

    def test_search_result_from_airport(self):
        airport = AirportModel(icao="KSEA", name="Seattle-Tacoma", city="Seattle", latitude=47.449, longitude=-122.3093)
        result = AirportSearchResult.from_airport(airport)
        assert result.icao == "KSEA"
        assert result.iata is None
        assert result.city == "Seattle"
        assert result.coordinates == [-122.3093, 47.449]

    def test_latitude_range(self):
        with pytest.raises(ValidationError):
            AirportModel(icao="KBAD", name="Bad", latitude=91, longitude=0)

    def test_airport_is_frozen(self):
        airport = AirportModel(icao="KSEA", name="Seattle-Tacoma", latitude=47.449, longitude=-122.3093)
        with pytest.raises(ValidationError):
            airport.name = "Renamed"


class TestTripStatus:

    def test_forward_order(self):
        assert TripStatus.SCHEDULED.rank < TripStatus.DEPARTED.rank < TripStatus.ARRIVED.rank

    def test_only_scheduled_is_deletable(self):
        assert TripStatus.SCHEDULED.is_deletable
        assert not TripStatus.DEPARTED.is_deletable
        assert not TripStatus.ARRIVED.is_deletable

    def test_string_value(self):
        assert TripStatus("departed") is TripStatus.DEPARTED
        assert TripStatus.ARRIVED == "arrived"


class TestRecordModels:

    def test_plane_engines_at_least_one(self):
        with pytest.raises(ValidationError):
            PlaneCreate(tail_number="N1", model="X", manufacturer="Y", num_engines=0)

    def test_trip_create_normalizes_codes(self):
        trip = TripCreate(
            plane_id=1, departure_airport=" kjfk ", arrival_airport="klax", departure_time=datetime(2025, 7, 1, 9)
        )
        assert trip.departure_airport == "KJFK"
        assert trip.arrival_airport == "KLAX"

    def test_trip_create_stores_naive_utc(self):
        trip = TripCreate(
            plane_id=1,
            departure_airport="KJFK",
            arrival_airport="KLAX",
            departure_time=datetime(2025, 7, 1, 11, 0, tzinfo=timezone(timedelta(hours=2))),
        )
        assert trip.departure_time == datetime(2025, 7, 1, 9, 0)
        assert trip.departure_time.tzinfo is None

    def test_trip_create_rejects_long_code(self):
        with pytest.raises(ValidationError):
            TripCreate(plane_id=1, departure_airport="KJFKX", arrival_airport="KLAX", departure_time=datetime.now())


class TestPatches:
    """Partial updates carry only the supplied fields."""

    def test_empty_patch(self):
        patch = PlanePatch()
        assert patch.is_empty()
        assert patch.changes() == {}

    def test_changes_contain_only_supplied_fields(self):
        patch = PlanePatch(nickname="Blue Goose")
        assert not patch.is_empty()
        assert patch.changes() == {"nickname": "Blue Goose"}

    def test_explicit_null_clears_nullable_field(self):
        assert PilotPatch(rating=None).changes() == {"rating": None}
        assert TripPatch(pilot_id=None).changes() == {"pilot_id": None}

    @pytest.mark.parametrize("field", ["plane_id", "departure_airport", "status", "departure_time"])
    def test_null_rejected_for_required_trip_fields(self, field):
        with pytest.raises(ValidationError, match=field):
            TripPatch(**{field: None})

    def test_null_rejected_for_required_plane_fields(self):
        with pytest.raises(ValidationError, match="tail_number"):
            PlanePatch(tail_number=None)

    def test_status_parsed_from_string(self):
        assert TripPatch(status="arrived").status is TripStatus.ARRIVED

    def test_unknown_status(self):
        with pytest.raises(ValidationError):
            TripPatch(status="cancelled")

    def test_apply_to(self):
        class Record:
            nickname = "Old"
            num_seats = 7

        record = Record()
        applied = PlanePatch(nickname=None, num_seats=8).apply_to(record)
        assert applied == {"nickname": None, "num_seats": 8}
        assert record.nickname is None
        assert record.num_seats == 8
