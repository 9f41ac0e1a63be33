"""
Workshop profile schemas.
"""

from datetime import datetime
from pydantic import EmailStr, Field

from app.schemas.base import BaseSchema


class WorkshopBase(BaseSchema):
    """Workshop profile fields."""

    name: str = Field(..., min_length=2, max_length=255)
    email: EmailStr | None = None
    phone: str | None = Field(None, max_length=50)
    address: str | None = None


class WorkshopReplace(WorkshopBase):
    """Full replacement of the workshop profile."""
    pass


class WorkshopResponse(WorkshopBase):
    """Workshop profile response."""

    updated_at: datetime
