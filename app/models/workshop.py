"""
Workshop profile: the single row describing the atelier itself.
"""

from typing import Optional
from sqlalchemy import String, Text
from sqlalchemy.orm import Mapped, mapped_column

from app.models.base import BaseModel


class Workshop(BaseModel):
    """
    Workshop profile, printed on order slips.

    Attributes:
        name: Workshop name
        email: Contact email
        phone: Contact phone
        address: Postal address
    """

    __tablename__ = "workshop"

    name: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
    )
    email: Mapped[Optional[str]] = mapped_column(
        String(255),
        nullable=True,
    )
    phone: Mapped[Optional[str]] = mapped_column(
        String(50),
        nullable=True,
    )
    address: Mapped[Optional[str]] = mapped_column(
        Text,
        nullable=True,
    )

    def __repr__(self) -> str:
        return f"<Workshop(id={self.id}, name='{self.name}')>"
