"""
Plane Pydantic models for the charter backend.
"""

from datetime import datetime
from typing import ClassVar, FrozenSet, Optional
from pydantic import BaseModel, Field, ConfigDict

from .patch import RecordPatch


class PlaneCreate(BaseModel):
    """Fields accepted when registering a plane."""

    tail_number: str = Field(..., max_length=20, description="Registration, unique within the account")
    model: str = Field(..., max_length=120)
    manufacturer: str = Field(..., max_length=120)
    nickname: Optional[str] = Field(None, max_length=120)
    num_engines: int = Field(2, ge=1, description="Engine count used for fuel estimates")
    num_seats: int = Field(20, ge=1)


class PlanePatch(RecordPatch):
    """Partial update of a plane."""
    non_nullable: ClassVar[FrozenSet[str]] = frozenset({"tail_number", "model", "manufacturer", "num_engines", "num_seats"})

    tail_number: Optional[str] = Field(None, max_length=20)
    model: Optional[str] = Field(None, max_length=120)
    manufacturer: Optional[str] = Field(None, max_length=120)
    nickname: Optional[str] = Field(None, max_length=120)
    num_engines: Optional[int] = Field(None, ge=1)
    num_seats: Optional[int] = Field(None, ge=1)


class PlaneModel(BaseModel):
    """Stored plane."""
    model_config = ConfigDict(from_attributes=True)

    plane_id: int
    owner_id: int
    tail_number: str
    model: str
    manufacturer: str
    nickname: Optional[str] = None
    num_engines: int
    num_seats: int
    created_at: datetime
