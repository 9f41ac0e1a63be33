"""
Order model: a garment commissioned by a registered client or a guest.
"""

from typing import Optional, List, Any, TYPE_CHECKING
from decimal import Decimal
from datetime import date
from enum import Enum
from sqlalchemy import (
    String, Text, ForeignKey, Integer, Numeric, Date, JSON,
    CheckConstraint, Enum as SQLEnum,
)
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.models.base import BaseModel

if TYPE_CHECKING:
    from app.models.payment import Payment


class OrderStatus(str, Enum):
    """Order status enumeration, in workshop order."""
    EN_ATTENTE = "En attente"
    EN_COURS = "En cours"
    PRET_A_LIVRER = "Prêt à livrer"
    TERMINEE = "Terminée"


class Order(BaseModel):
    """
    Order model.

    Exactly one of client_id / guest_client_name is set: an order belongs
    either to a registered client or to an ad-hoc guest.

    Attributes:
        client_id: Registered client (weak reference)
        guest_client_name: Guest name when there is no registered client
        guest_client_contact: Guest phone or email
        title: Short garment title
        description: Free-text description
        images: Model image URIs
        progress_images: Work-in-progress photo URIs
        delivery_date: Promised delivery date
        total_price: Agreed price
        status: Current status
        measurements: MeasurementSet snapshot (JSON document)
    """

    __tablename__ = "orders"
    __table_args__ = (
        CheckConstraint(
            "(client_id IS NULL) <> (guest_client_name IS NULL)",
            name="ck_orders_single_owner",
        ),
        CheckConstraint("total_price >= 0", name="ck_orders_total_price_positive"),
    )

    # Owner
    client_id: Mapped[Optional[int]] = mapped_column(
        Integer,
        ForeignKey("clients.id", ondelete="RESTRICT"),
        nullable=True,
        index=True,
    )
    guest_client_name: Mapped[Optional[str]] = mapped_column(
        String(255),
        nullable=True,
    )
    guest_client_contact: Mapped[Optional[str]] = mapped_column(
        String(255),
        nullable=True,
    )

    # Order info
    title: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
    )
    description: Mapped[Optional[str]] = mapped_column(
        Text,
        nullable=True,
    )
    images: Mapped[List[str]] = mapped_column(
        JSON,
        default=list,
        nullable=False,
    )
    progress_images: Mapped[List[str]] = mapped_column(
        JSON,
        default=list,
        nullable=False,
    )
    delivery_date: Mapped[date] = mapped_column(
        Date,
        nullable=False,
        index=True,
    )
    total_price: Mapped[Decimal] = mapped_column(
        Numeric(precision=12, scale=2),
        default=Decimal("0.00"),
        nullable=False,
    )
    status: Mapped[OrderStatus] = mapped_column(
        SQLEnum(OrderStatus),
        default=OrderStatus.EN_ATTENTE,
        nullable=False,
        index=True,
    )
    measurements: Mapped[dict[str, Any]] = mapped_column(
        JSON,
        nullable=False,
    )

    # Payments, in entry order
    payments: Mapped[List["Payment"]] = relationship(
        "Payment",
        back_populates="order",
        cascade="all, delete-orphan",
        lazy="selectin",
        order_by="Payment.id",
    )

    def __repr__(self) -> str:
        return f"<Order(id={self.id}, title='{self.title}', status='{self.status}')>"
