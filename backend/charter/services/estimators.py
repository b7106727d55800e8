"""
Trip estimators: great-circle distance, fuel/total cost and arrival time.

All estimates are point estimates recomputed on demand; nothing here keeps
state beyond the injected airport catalog.
"""

import logging
import math
from datetime import datetime, timedelta
from typing import Optional

from ..models.airport import AirportSearchResult, RouteModel
from ..models.trip import CostEstimate
from .airport_catalog import AirportCatalog
from .errors import InvalidAircraftError

logger = logging.getLogger(__name__)

EARTH_RADIUS_NM = 3440.065

# Linear fuel-burn heuristic: 220 gallons per engine per 500 nm
FUEL_GALLONS_PER_ENGINE = 220
FUEL_BURN_REFERENCE_NM = 500
FUEL_PRICE_PER_GALLON = 6
NON_FUEL_MARKUP = 1.25

ESTIMATED_FLIGHT_DURATION = timedelta(hours=2)


def distance_nautical_miles(lat1: float, lon1: float, lat2: float, lon2: float) -> float:
    """Haversine great-circle distance in nautical miles."""
    phi1 = math.radians(lat1)
    phi2 = math.radians(lat2)
    d_phi = math.radians(lat2 - lat1)
    d_lambda = math.radians(lon2 - lon1)

    a = (math.sin(d_phi / 2) ** 2
         + math.cos(phi1) * math.cos(phi2) * math.sin(d_lambda / 2) ** 2)
    c = 2 * math.atan2(math.sqrt(a), math.sqrt(1 - a))
    return EARTH_RADIUS_NM * c


def round_half_up(value: float) -> int:
    """Round to the nearest integer with halves going up, not to even."""
    return int(math.floor(value + 0.5))


def estimate_arrival_time(departure_time: datetime) -> datetime:
    """Estimated arrival: a fixed flight duration after departure, whatever the distance."""
    return departure_time + ESTIMATED_FLIGHT_DURATION


class TripCostEstimator:
    """
    Fuel and total cost estimate for a trip between two catalog airports.

    Cost depends only on the airport pair and the aircraft's engine count,
    so repeated calls with the same inputs return the same estimate.
    """

    def __init__(self, catalog: AirportCatalog):
        self.catalog = catalog

    def estimate(self, departure_icao: str, arrival_icao: str, num_engines: Optional[int]) -> CostEstimate:
        """
        Estimate fuel and total cost.

        Raises:
            AirportNotFoundError: If either airport is not in the catalog
            InvalidAircraftError: If the engine count is missing or below one
        """
        departure = self.catalog.lookup_by_code(departure_icao)
        arrival = self.catalog.lookup_by_code(arrival_icao)

        if not num_engines or num_engines < 1:
            raise InvalidAircraftError(f"Invalid number of engines: {num_engines}")

        distance = distance_nautical_miles(
            departure.latitude, departure.longitude,
            arrival.latitude, arrival.longitude,
        )

        fuel_gallons = (FUEL_GALLONS_PER_ENGINE * num_engines / FUEL_BURN_REFERENCE_NM) * distance
        fuel_cost = fuel_gallons * FUEL_PRICE_PER_GALLON
        total_cost = round_half_up(fuel_cost * NON_FUEL_MARKUP)

        logger.debug(
            f"Cost estimate {departure.icao}->{arrival.icao}: distance={distance:.1f}nm "
            f"engines={num_engines} fuel={fuel_gallons:.1f}gal fuel_cost={fuel_cost:.2f} total={total_cost}"
        )

        return CostEstimate(
            fuel_cost=round_half_up(fuel_cost),
            total_cost=total_cost,
            distance_nm=distance,
            fuel_gallons=fuel_gallons,
        )

    def route(self, departure_icao: str, arrival_icao: str) -> RouteModel:
        """
        Map geometry for a trip: both endpoints and the great-circle distance.

        Raises:
            AirportNotFoundError: If either airport is not in the catalog
        """
        departure = self.catalog.lookup_by_code(departure_icao)
        arrival = self.catalog.lookup_by_code(arrival_icao)
        return RouteModel(
            departure=AirportSearchResult.from_airport(departure),
            arrival=AirportSearchResult.from_airport(arrival),
            distance_nm=distance_nautical_miles(
                departure.latitude, departure.longitude,
                arrival.latitude, arrival.longitude,
            ),
        )
