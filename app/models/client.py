"""
Client model: the workshop's registered customers.
"""

from typing import Optional
from sqlalchemy import String, Text
from sqlalchemy.orm import Mapped, mapped_column

from app.models.base import BaseModel


class Client(BaseModel):
    """
    Client model representing a registered customer.

    Orders reference clients by id only; what happens to those orders when
    a client is deleted is decided by ClientService according to
    CLIENT_DELETE_POLICY.

    Attributes:
        first_name: Client's first name
        last_name: Client's last name
        phone: Client's phone number
        email: Client's email address
        address: Client's postal address
    """

    __tablename__ = "clients"

    first_name: Mapped[str] = mapped_column(
        String(100),
        nullable=False,
    )
    last_name: Mapped[str] = mapped_column(
        String(100),
        nullable=False,
        index=True,
    )
    phone: Mapped[Optional[str]] = mapped_column(
        String(50),
        nullable=True,
    )
    email: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
    )
    address: Mapped[Optional[str]] = mapped_column(
        Text,
        nullable=True,
    )

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}"

    def __repr__(self) -> str:
        return f"<Client(id={self.id}, name='{self.full_name}')>"
