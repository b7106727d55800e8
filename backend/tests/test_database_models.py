"""
Test suite for SQLAlchemy database models.

Tests record creation, relationships and constraints for accounts, planes,
pilots and trips.
"""

from datetime import datetime, timedelta

import pytest
from sqlalchemy import create_engine, event
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import sessionmaker

from charter.database.models import (
    Account,
    Pilot,
    Plane,
    Trip,
    create_all_tables,
    drop_all_tables,
)


@pytest.fixture
def engine():
    """Create an in-memory SQLite engine with foreign keys enforced."""
    engine = create_engine("sqlite:///:memory:", echo=False)

    @event.listens_for(engine, "connect")
    def enable_foreign_keys(dbapi_connection, connection_record):
        dbapi_connection.execute("PRAGMA foreign_keys=ON")

    create_all_tables(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def session(engine):
    Session = sessionmaker(bind=engine)
    session = Session()
    yield session
    session.close()


@pytest.fixture
def sample_account(session):
    account = Account(email="ops@skyline.example", company_name="Skyline Charters")
    session.add(account)
    session.commit()
    return account


@pytest.fixture
def sample_plane(session, sample_account):
    plane = Plane(
        owner_id=sample_account.account_id,
        tail_number="N123AB",
        model="Citation CJ3",
        manufacturer="Cessna",
    )
    session.add(plane)
    session.commit()
    return plane


def _trip(owner, plane, **kwargs):
    departure = datetime(2025, 7, 1, 9, 0)
    values = dict(
        owner_id=owner.account_id,
        plane_id=plane.plane_id,
        departure_airport="KJFK",
        arrival_airport="KLAX",
        departure_time=departure,
        estimated_arrival_time=departure + timedelta(hours=2),
        estimated_fuel_cost=11326,
        estimated_total_cost=14157,
    )
    values.update(kwargs)
    return Trip(**values)


class TestAccountModel:

    def test_create_account(self, session, sample_account):
        assert sample_account.account_id is not None
        assert isinstance(sample_account.created_at, datetime)
        assert "ops@skyline.example" in repr(sample_account)

    def test_email_unique(self, session, sample_account):
        session.add(Account(email="ops@skyline.example"))
        with pytest.raises(IntegrityError):
            session.commit()


class TestPlaneModel:

    def test_defaults(self, sample_plane):
        assert sample_plane.num_engines == 2
        assert sample_plane.num_seats == 20

    def test_tail_number_unique_per_owner(self, session, sample_account, sample_plane):
        session.add(Plane(owner_id=sample_account.account_id, tail_number="N123AB", model="X", manufacturer="Y"))
        with pytest.raises(IntegrityError):
            session.commit()

    def test_relationships(self, session, sample_account, sample_plane):
        session.refresh(sample_account)
        assert sample_account.planes == [sample_plane]
        assert sample_plane.owner is sample_account


class TestTripModel:

    def test_defaults(self, session, sample_account, sample_plane):
        trip = _trip(sample_account, sample_plane)
        session.add(trip)
        session.commit()

        assert trip.status == 'scheduled'
        assert trip.pilot_id is None
        assert trip.actual_departure_time is None
        assert "KJFK->KLAX" in repr(trip)

    def test_pilot_relationship(self, session, sample_account, sample_plane):
        pilot = Pilot(owner_id=sample_account.account_id, name="Amelia Reyes", license_number="ATP-4471")
        session.add(pilot)
        session.commit()

        trip = _trip(sample_account, sample_plane, pilot_id=pilot.pilot_id)
        session.add(trip)
        session.commit()

        assert trip.pilot is pilot
        assert pilot.trips == [trip]
        assert sample_plane.trips == [trip]

    def test_plane_foreign_key(self, session, sample_account, sample_plane):
        session.add(_trip(sample_account, sample_plane, plane_id=9999))
        with pytest.raises(IntegrityError):
            session.commit()


def test_drop_all_tables(engine):
    drop_all_tables(engine)
    create_all_tables(engine)
