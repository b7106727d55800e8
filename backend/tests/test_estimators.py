"""
Tests for the distance, cost and arrival-time estimators.
"""

from datetime import datetime, timedelta

import pytest

from charter.models import AirportModel
from charter.services import AirportCatalog, TripCostEstimator, distance_nautical_miles, estimate_arrival_time
from charter.services.errors import AirportNotFoundError, InvalidAircraftError
from charter.services.estimators import EARTH_RADIUS_NM, round_half_up


def _airport(icao, lat, lon):
    return AirportModel(icao=icao, name=f"{icao} Field", latitude=lat, longitude=lon)


@pytest.fixture
def equator_catalog():
    return AirportCatalog([
        _airport("AAAA", 0.0, 0.0),
        _airport("BBBB", 0.0, 1.0),
        _airport("CCCC", 0.0, 90.0),
    ])


class TestDistance:
    """Haversine great-circle distance in nautical miles."""

    def test_same_point_is_zero(self):
        assert distance_nautical_miles(40.6398, -73.7789, 40.6398, -73.7789) == 0

    def test_one_degree_of_longitude_on_equator(self):
        expected = EARTH_RADIUS_NM * (3.141592653589793 / 180)
        assert distance_nautical_miles(0, 0, 0, 1) == pytest.approx(expected)

    def test_quarter_of_the_equator(self):
        assert distance_nautical_miles(0, 0, 0, 90) == pytest.approx(EARTH_RADIUS_NM * 3.141592653589793 / 2)

    def test_symmetric(self):
        there = distance_nautical_miles(40.6398, -73.7789, 33.9425, -118.4081)
        back = distance_nautical_miles(33.9425, -118.4081, 40.6398, -73.7789)
        assert there == pytest.approx(back)

    def test_jfk_to_lax(self):
        """JFK to LAX is roughly 2145 nautical miles."""
        assert distance_nautical_miles(40.6398, -73.7789, 33.9425, -118.4081) == pytest.approx(2145, abs=10)


class TestRounding:

    def test_halves_round_up(self):
        assert round_half_up(0.5) == 1
        assert round_half_up(2.5) == 3
        assert round_half_up(11325.5) == 11326

    def test_below_half_rounds_down(self):
        assert round_half_up(1.49) == 1
        assert round_half_up(0.0) == 0


class TestArrivalTime:

    def test_fixed_two_hour_flight(self):
        departure = datetime(2025, 7, 1, 9, 0)
        assert estimate_arrival_time(departure) == departure + timedelta(hours=2)

    def test_crosses_midnight(self):
        assert estimate_arrival_time(datetime(2025, 7, 1, 23, 30)) == datetime(2025, 7, 2, 1, 30)


class TestTripCostEstimator:
    """Fuel and total cost estimates."""

    def test_cost_formula(self, equator_catalog):
        """Fuel gallons scale with engines and distance; total adds 25%."""
        estimator = TripCostEstimator(equator_catalog)
        costs = estimator.estimate("AAAA", "CCCC", 2)

        distance = distance_nautical_miles(0.0, 0.0, 0.0, 90.0)
        gallons = (220 * 2 / 500) * distance
        assert costs.distance_nm == pytest.approx(distance)
        assert costs.fuel_gallons == pytest.approx(gallons)
        assert costs.fuel_cost == round_half_up(gallons * 6)
        assert costs.total_cost == round_half_up(gallons * 6 * 1.25)

    def test_jfk_to_lax_twin(self, catalog):
        """Exact dollars for a twin on JFK-LAX with the catalog coordinates."""
        costs = TripCostEstimator(catalog).estimate("KJFK", "KLAX", 2)
        assert costs.fuel_cost == 11330
        assert costs.total_cost == 14163
        assert isinstance(costs.fuel_cost, int)
        assert isinstance(costs.total_cost, int)

    def test_cost_scales_with_engines(self, equator_catalog):
        estimator = TripCostEstimator(equator_catalog)
        twin = estimator.estimate("AAAA", "CCCC", 2)
        quad = estimator.estimate("AAAA", "CCCC", 4)
        assert quad.fuel_gallons == pytest.approx(twin.fuel_gallons * 2)
        assert abs(quad.fuel_cost - twin.fuel_cost * 2) <= 1

    def test_same_airport_costs_nothing(self, equator_catalog):
        costs = TripCostEstimator(equator_catalog).estimate("AAAA", "AAAA", 2)
        assert costs.fuel_cost == 0
        assert costs.total_cost == 0

    def test_deterministic(self, catalog):
        estimator = TripCostEstimator(catalog)
        assert estimator.estimate("KJFK", "KLAX", 2) == estimator.estimate("KJFK", "KLAX", 2)

    def test_codes_are_case_insensitive(self, catalog):
        estimator = TripCostEstimator(catalog)
        assert estimator.estimate("kjfk", " klax ", 2) == estimator.estimate("KJFK", "KLAX", 2)

    def test_unknown_departure_airport(self, catalog):
        with pytest.raises(AirportNotFoundError) as exc_info:
            TripCostEstimator(catalog).estimate("ZZZZ", "KLAX", 2)
        assert exc_info.value.icao == "ZZZZ"

    def test_unknown_arrival_airport(self, catalog):
        with pytest.raises(AirportNotFoundError):
            TripCostEstimator(catalog).estimate("KJFK", "ZZZZ", 2)

    @pytest.mark.parametrize("engines", [0, -1, None])
    def test_invalid_engine_count(self, catalog, engines):
        with pytest.raises(InvalidAircraftError):
            TripCostEstimator(catalog).estimate("KJFK", "KLAX", engines)

    def test_airports_checked_before_engines(self, catalog):
        with pytest.raises(AirportNotFoundError):
            TripCostEstimator(catalog).estimate("ZZZZ", "KLAX", 0)

    def test_route_coordinates_are_lon_lat(self, catalog):
        route = TripCostEstimator(catalog).route("KJFK", "KLAX")
        assert route.departure.icao == "KJFK"
        assert route.departure.coordinates == [-73.7789, 40.6398]
        assert route.arrival.coordinates == [-118.4081, 33.9425]
        assert route.distance_nm == pytest.approx(2145, abs=10)
