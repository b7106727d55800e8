"""
Shared fixtures: an in-memory record store, the test airport catalog and a
fixed clock, wired together the way the application wires them.
"""

from datetime import datetime
from pathlib import Path

import pytest

from charter.database import initialize_database
from charter.models import AccountCreate, PilotCreate, PlaneCreate, TripCreate
from charter.services import build_services, load_airport_catalog

TEST_DATA_DIR = Path(__file__).parent / "data"

FIXED_NOW = datetime(2025, 6, 1, 12, 0, 0)


class FixedClock:
    """Clock returning a settable instant."""

    def __init__(self, now: datetime):
        self.now = now

    def __call__(self) -> datetime:
        return self.now


@pytest.fixture
def db():
    """Fresh in-memory SQLite store with all tables created."""
    db_config = initialize_database("sqlite:///:memory:")
    yield db_config
    db_config.close()


@pytest.fixture(scope="session")
def catalog():
    return load_airport_catalog(TEST_DATA_DIR / "airports.csv")


@pytest.fixture
def clock():
    return FixedClock(FIXED_NOW)


@pytest.fixture
def services(db, catalog, clock):
    return build_services(db, catalog, clock=clock)


@pytest.fixture
def account(services):
    return services.accounts.register(
        AccountCreate(email="ops@skyline.example", company_name="Skyline Charters")
    )


@pytest.fixture
def other_account(services):
    return services.accounts.register(
        AccountCreate(email="dispatch@blueline.example", company_name="Blueline Air")
    )


@pytest.fixture
def plane(services, account):
    return services.planes.create(
        account.account_id,
        PlaneCreate(tail_number="N123AB", model="Citation CJ3", manufacturer="Cessna", num_engines=2, num_seats=7),
    )


@pytest.fixture
def pilot(services, account):
    return services.pilots.create(
        account.account_id,
        PilotCreate(name="Amelia Reyes", license_number="ATP-4471", rating="CE-525", total_hours=5200),
    )


@pytest.fixture
def trip(services, account, plane, pilot):
    return services.trips.create(
        account.account_id,
        TripCreate(
            plane_id=plane.plane_id,
            pilot_id=pilot.pilot_id,
            departure_airport="KJFK",
            arrival_airport="KLAX",
            departure_time=datetime(2025, 7, 1, 9, 0),
        ),
    )
