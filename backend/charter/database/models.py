"""
SQLAlchemy database models for the charter backend.

This module defines the persisted records:
- Account: Company account that owns planes, pilots and trips
- Plane: Aircraft registered by an account
- Pilot: Pilot registered by an account
- Trip: Scheduled flight between two airports with computed cost estimates

Airports are not persisted; they live in the in-memory AirportCatalog.
"""

from sqlalchemy import (
    Column, Integer, String, DateTime, Float, ForeignKey, Index, UniqueConstraint
)
from sqlalchemy.orm import declarative_base
from sqlalchemy.orm import relationship

from ..utils.config import utcnow

# Create the declarative base for all models
Base = declarative_base()


class Account(Base):
    """
    Company account.

    Every plane, pilot and trip belongs to exactly one account, and every
    query against them is scoped by the owning account.
    """
    __tablename__ = 'account'

    account_id = Column(Integer, primary_key=True, autoincrement=True)
    email = Column(String(255), unique=True, nullable=False, index=True)
    company_name = Column(String(120), nullable=True)
    created_at = Column(DateTime, nullable=False, default=utcnow)

    planes = relationship("Plane", back_populates="owner", lazy="select")
    pilots = relationship("Pilot", back_populates="owner", lazy="select")
    trips = relationship("Trip", back_populates="owner", lazy="select")

    def __repr__(self):
        return f"<Account(id={self.account_id}, email='{self.email}')>"


class Plane(Base):
    """
    Aircraft registered by an account.

    The engine count feeds the trip cost estimate.
    """
    __tablename__ = 'plane'
    __table_args__ = (
        UniqueConstraint('owner_id', 'tail_number', name='uq_plane_owner_tail'),
    )

    plane_id = Column(Integer, primary_key=True, autoincrement=True)
    owner_id = Column(Integer, ForeignKey('account.account_id'), nullable=False, index=True)

    tail_number = Column(String(20), nullable=False)  # Registration (e.g., 'N123AB')
    model = Column(String(120), nullable=False)
    manufacturer = Column(String(120), nullable=False)
    nickname = Column(String(120), nullable=True)
    num_engines = Column(Integer, nullable=False, default=2)
    num_seats = Column(Integer, nullable=False, default=20)
    created_at = Column(DateTime, nullable=False, default=utcnow)

    owner = relationship("Account", back_populates="planes", lazy="select")
    trips = relationship("Trip", back_populates="plane", lazy="select")

    def __repr__(self):
        return f"<Plane(id={self.plane_id}, tail='{self.tail_number}', engines={self.num_engines})>"


class Pilot(Base):
    """Pilot registered by an account."""
    __tablename__ = 'pilot'

    pilot_id = Column(Integer, primary_key=True, autoincrement=True)
    owner_id = Column(Integer, ForeignKey('account.account_id'), nullable=False, index=True)

    name = Column(String(120), nullable=False)
    license_number = Column(String(50), nullable=False)
    rating = Column(String(50), nullable=True)
    total_hours = Column(Float, nullable=True)
    contact_number = Column(String(30), nullable=True)
    email = Column(String(255), nullable=True)
    created_at = Column(DateTime, nullable=False, default=utcnow)

    owner = relationship("Account", back_populates="pilots", lazy="select")
    trips = relationship("Trip", back_populates="pilot", lazy="select")

    def __repr__(self):
        return f"<Pilot(id={self.pilot_id}, name='{self.name}', license='{self.license_number}')>"


class Trip(Base):
    """
    Trip between two airports.

    Airports are referenced by ICAO code only; coordinates come from the
    catalog. Estimated cost fields are computed by the service layer.
    """
    __tablename__ = 'trip'

    trip_id = Column(Integer, primary_key=True, autoincrement=True)
    owner_id = Column(Integer, ForeignKey('account.account_id'), nullable=False, index=True)
    plane_id = Column(Integer, ForeignKey('plane.plane_id'), nullable=False, index=True)
    pilot_id = Column(Integer, ForeignKey('pilot.pilot_id'), nullable=True, index=True)

    departure_airport = Column(String(4), nullable=False)  # ICAO code
    arrival_airport = Column(String(4), nullable=False)    # ICAO code
    departure_time = Column(DateTime, nullable=False, index=True)
    estimated_arrival_time = Column(DateTime, nullable=False)
    actual_departure_time = Column(DateTime, nullable=True)
    actual_arrival_time = Column(DateTime, nullable=True)

    status = Column(String(16), nullable=False, default='scheduled', index=True)
    estimated_fuel_cost = Column(Integer, nullable=False)
    estimated_total_cost = Column(Integer, nullable=False)
    created_at = Column(DateTime, nullable=False, default=utcnow)

    owner = relationship("Account", back_populates="trips", lazy="select")
    plane = relationship("Plane", back_populates="trips", lazy="select")
    pilot = relationship("Pilot", back_populates="trips", lazy="select")

    def __repr__(self):
        return (
            f"<Trip(id={self.trip_id}, {self.departure_airport}->{self.arrival_airport}, "
            f"status='{self.status}')>"
        )


Index('idx_trip_owner_departure', Trip.owner_id, Trip.departure_time)
Index('idx_pilot_owner_name', Pilot.owner_id, Pilot.name)


def create_all_tables(engine):
    """
    Create all database tables using the provided SQLAlchemy engine.

    Args:
        engine: SQLAlchemy engine instance
    """
    Base.metadata.create_all(bind=engine)


def drop_all_tables(engine):
    """
    Drop all database tables using the provided SQLAlchemy engine.

    Args:
        engine: SQLAlchemy engine instance
    """
    Base.metadata.drop_all(bind=engine)


__all__ = [
    'Base',
    'Account',
    'Plane',
    'Pilot',
    'Trip',
    'create_all_tables',
    'drop_all_tables'
]
