"""
Client schemas for request/response validation.
"""

from pydantic import EmailStr, Field

from app.schemas.base import BaseSchema, TimestampSchema


class ClientBase(BaseSchema):
    """Base client schema with common fields."""

    first_name: str = Field(..., min_length=2, max_length=100)
    last_name: str = Field(..., min_length=2, max_length=100)
    email: EmailStr
    phone: str | None = Field(None, max_length=50)
    address: str | None = None


class ClientCreate(ClientBase):
    """Schema for creating a new client."""
    pass


class ClientReplace(ClientBase):
    """Full replacement of a client: every field is sent again."""
    pass


class ClientResponse(ClientBase, TimestampSchema):
    """Client response schema."""

    id: int
    full_name: str


class ClientListResponse(BaseSchema):
    """Paginated client list response."""

    items: list[ClientResponse]
    total: int
    page: int
    per_page: int
    pages: int
