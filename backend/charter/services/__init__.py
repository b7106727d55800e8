"""
Business logic services for the charter backend.

This module contains the airport catalog, the trip estimators and the
owner-scoped record services for accounts, planes, pilots and trips.
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Callable

from ..database.config import DatabaseConfig
from ..utils.config import utcnow
from .airport_catalog import AirportCatalog, load_airport_catalog
from .estimators import TripCostEstimator, distance_nautical_miles, estimate_arrival_time
from .account_service import AccountService
from .plane_service import PlaneService
from .pilot_service import PilotService
from .trip_service import TripService


@dataclass
class CharterServices:
    """Services wired to one record store and one airport catalog."""
    catalog: AirportCatalog
    accounts: AccountService
    planes: PlaneService
    pilots: PilotService
    trips: TripService


def build_services(
    db: DatabaseConfig,
    catalog: AirportCatalog,
    clock: Callable[[], datetime] = utcnow,
) -> CharterServices:
    """Wire every record service to the given store and catalog."""
    return CharterServices(
        catalog=catalog,
        accounts=AccountService(db),
        planes=PlaneService(db),
        pilots=PilotService(db),
        trips=TripService(db, catalog, clock=clock),
    )


__all__ = [
    'AirportCatalog',
    'load_airport_catalog',
    'TripCostEstimator',
    'distance_nautical_miles',
    'estimate_arrival_time',
    'AccountService',
    'PlaneService',
    'PilotService',
    'TripService',
    'CharterServices',
    'build_services',
]
