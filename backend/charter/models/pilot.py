"""
Pilot Pydantic models for the charter backend.
"""

from datetime import datetime
from typing import ClassVar, FrozenSet, Optional
from pydantic import BaseModel, Field, ConfigDict

from .patch import RecordPatch


class PilotCreate(BaseModel):
    """Fields accepted when registering a pilot."""

    name: str = Field(..., max_length=120)
    license_number: str = Field(..., max_length=50)
    rating: Optional[str] = Field(None, max_length=50, description="Type or class rating")
    total_hours: Optional[float] = Field(None, ge=0)
    contact_number: Optional[str] = Field(None, max_length=30)
    email: Optional[str] = Field(None, max_length=255)


class PilotPatch(RecordPatch):
    """Partial update of a pilot."""
    non_nullable: ClassVar[FrozenSet[str]] = frozenset({"name", "license_number"})

    name: Optional[str] = Field(None, max_length=120)
    license_number: Optional[str] = Field(None, max_length=50)
    rating: Optional[str] = Field(None, max_length=50)
    total_hours: Optional[float] = Field(None, ge=0)
    contact_number: Optional[str] = Field(None, max_length=30)
    email: Optional[str] = Field(None, max_length=255)


class PilotModel(BaseModel):
    """Stored pilot."""
    model_config = ConfigDict(from_attributes=True)

    pilot_id: int
    owner_id: int
    name: str
    license_number: str
    rating: Optional[str] = None
    total_hours: Optional[float] = None
    contact_number: Optional[str] = None
    email: Optional[str] = None
    created_at: datetime
