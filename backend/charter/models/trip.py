"""
Trip-related Pydantic models for the charter backend.

This module contains the trip create/patch inputs, the stored trip view and
the cost estimate produced for every trip.
"""

from datetime import datetime
from typing import ClassVar, FrozenSet, Optional
from pydantic import BaseModel, Field, ConfigDict, field_validator

from .enums import TripStatus
from .patch import RecordPatch
from ..utils.config import to_naive_utc


def _normalize_icao(value: Optional[str]) -> Optional[str]:
    return value.strip().upper() if isinstance(value, str) else value


class TripCreate(BaseModel):
    """
    Fields accepted when scheduling a trip.

    Estimated arrival and costs are computed by the service, never supplied.
    """

    plane_id: int = Field(..., description="Plane flying the trip")
    pilot_id: Optional[int] = Field(None, description="Assigned pilot, if any")
    departure_airport: str = Field(..., max_length=4, description="Departure ICAO code")
    arrival_airport: str = Field(..., max_length=4, description="Arrival ICAO code")
    departure_time: datetime = Field(..., description="Scheduled departure time")

    @field_validator("departure_airport", "arrival_airport", mode="before")
    @classmethod
    def normalize_airports(cls, v):
        return _normalize_icao(v)

    @field_validator("departure_time")
    @classmethod
    def store_utc(cls, v: datetime) -> datetime:
        return to_naive_utc(v)


class TripPatch(RecordPatch):
    """
    Partial update of a trip.

    Only supplied fields change. ``pilot_id`` may be set to null to unassign
    the pilot; every other non-timestamp field must stay populated.
    """
    non_nullable: ClassVar[FrozenSet[str]] = frozenset(
        {"plane_id", "departure_airport", "arrival_airport", "departure_time", "status", "estimated_arrival_time"}
    )

    plane_id: Optional[int] = None
    pilot_id: Optional[int] = None
    departure_airport: Optional[str] = Field(None, max_length=4)
    arrival_airport: Optional[str] = Field(None, max_length=4)
    departure_time: Optional[datetime] = None
    estimated_arrival_time: Optional[datetime] = None
    actual_departure_time: Optional[datetime] = None
    actual_arrival_time: Optional[datetime] = None
    status: Optional[TripStatus] = None

    @field_validator("departure_airport", "arrival_airport", mode="before")
    @classmethod
    def normalize_airports(cls, v):
        return _normalize_icao(v)

    @field_validator(
        "departure_time", "estimated_arrival_time", "actual_departure_time", "actual_arrival_time"
    )
    @classmethod
    def store_utc(cls, v: Optional[datetime]) -> Optional[datetime]:
        return to_naive_utc(v)


class TripModel(BaseModel):
    """Stored trip."""
    model_config = ConfigDict(from_attributes=True)

    trip_id: int
    owner_id: int
    plane_id: int
    pilot_id: Optional[int] = None
    departure_airport: str
    arrival_airport: str
    departure_time: datetime
    estimated_arrival_time: datetime
    actual_departure_time: Optional[datetime] = None
    actual_arrival_time: Optional[datetime] = None
    status: TripStatus = Field(default=TripStatus.SCHEDULED)
    estimated_fuel_cost: int = Field(..., ge=0, description="Estimated fuel cost in USD")
    estimated_total_cost: int = Field(..., ge=0, description="Estimated total cost in USD")
    created_at: datetime


class CostEstimate(BaseModel):
    """Point estimate for a trip, recomputed on every relevant change."""
    model_config = ConfigDict(frozen=True)

    fuel_cost: int = Field(..., ge=0, description="Fuel cost in USD, rounded")
    total_cost: int = Field(..., ge=0, description="Fuel plus non-fuel expenses in USD, rounded")
    distance_nm: float = Field(..., ge=0, description="Great-circle distance in nautical miles")
    fuel_gallons: float = Field(..., ge=0)
