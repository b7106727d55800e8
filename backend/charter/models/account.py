"""
Account Pydantic models for the charter backend.
"""

from datetime import datetime
from typing import Optional
from pydantic import BaseModel, Field, ConfigDict


class AccountCreate(BaseModel):
    """Company account registration."""

    email: str = Field(..., min_length=3, max_length=255, description="Login email, unique per account")
    company_name: Optional[str] = Field(None, max_length=120)


class AccountModel(BaseModel):
    """Registered company account."""
    model_config = ConfigDict(from_attributes=True)

    account_id: int
    email: str
    company_name: Optional[str] = None
    created_at: datetime
