"""
Owner-scoped record lookups shared by the record services.

A record owned by another account is treated exactly like a missing one.
"""

from typing import List

from sqlalchemy.orm import Session

from ..database.models import Account, Plane, Pilot, Trip
from .errors import (
    AccountNotFoundError,
    AircraftNotFoundError,
    PilotNotFoundError,
    TripNotFoundError,
    ValidationError,
)


def load_account(session: Session, account_id: int) -> Account:
    account = session.query(Account).filter(Account.account_id == account_id).first()
    if account is None:
        raise AccountNotFoundError(account_id)
    return account


def load_owned_plane(session: Session, owner_id: int, plane_id: int) -> Plane:
    plane = session.query(Plane).filter(
        Plane.plane_id == plane_id, Plane.owner_id == owner_id
    ).first()
    if plane is None:
        raise AircraftNotFoundError(plane_id)
    return plane


def load_owned_pilot(session: Session, owner_id: int, pilot_id: int) -> Pilot:
    pilot = session.query(Pilot).filter(
        Pilot.pilot_id == pilot_id, Pilot.owner_id == owner_id
    ).first()
    if pilot is None:
        raise PilotNotFoundError(pilot_id)
    return pilot


def load_owned_trip(session: Session, owner_id: int, trip_id: int) -> Trip:
    trip = session.query(Trip).filter(
        Trip.trip_id == trip_id, Trip.owner_id == owner_id
    ).first()
    if trip is None:
        raise TripNotFoundError(trip_id)
    return trip


def referencing_trip_ids(session: Session, column, value: int) -> List[int]:
    """Ids of trips in any status whose ``column`` equals ``value``."""
    rows = session.query(Trip.trip_id).filter(column == value).order_by(Trip.trip_id).all()
    return [row.trip_id for row in rows]


def require_text(**fields) -> None:
    """Reject blank required text fields."""
    blank = sorted(name for name, value in fields.items() if value is None or not str(value).strip())
    if blank:
        raise ValidationError(f"Missing required fields: {', '.join(blank)}")
