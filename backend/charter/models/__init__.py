"""
Charter Pydantic models package.

This package contains the Pydantic v2 models used for validation and
serialization across the services and the REST layer.
"""

# Enums
from .enums import TripStatus

# Reference data
from .airport import (
    AirportModel,
    AirportSearchResult,
    RouteModel,
)

# Records
from .account import AccountCreate, AccountModel
from .patch import RecordPatch
from .plane import PlaneCreate, PlanePatch, PlaneModel
from .pilot import PilotCreate, PilotPatch, PilotModel
from .trip import TripCreate, TripPatch, TripModel, CostEstimate

__all__ = [
    "TripStatus",
    "AirportModel",
    "AirportSearchResult",
    "RouteModel",
    "AccountCreate",
    "AccountModel",
    "RecordPatch",
    "PlaneCreate",
    "PlanePatch",
    "PlaneModel",
    "PilotCreate",
    "PilotPatch",
    "PilotModel",
    "TripCreate",
    "TripPatch",
    "TripModel",
    "CostEstimate",
]
