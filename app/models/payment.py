"""
Payment model: an amount received against an order.
"""

from typing import TYPE_CHECKING
from decimal import Decimal
from datetime import date
from sqlalchemy import ForeignKey, Integer, Numeric, Date, CheckConstraint
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.models.base import BaseModel

if TYPE_CHECKING:
    from app.models.order import Order


class Payment(BaseModel):
    """
    Payment model.

    Payments are kept in entry order (by id), not sorted by date.

    Attributes:
        order_id: Foreign key to the order
        amount: Amount received
        payment_date: Date of payment
    """

    __tablename__ = "payments"
    __table_args__ = (
        CheckConstraint("amount >= 0", name="ck_payments_amount_positive"),
    )

    order_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("orders.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    amount: Mapped[Decimal] = mapped_column(
        Numeric(precision=12, scale=2),
        nullable=False,
    )
    payment_date: Mapped[date] = mapped_column(
        Date,
        nullable=False,
    )

    order: Mapped["Order"] = relationship(
        "Order",
        back_populates="payments",
    )

    def __repr__(self) -> str:
        return f"<Payment(id={self.id}, order_id={self.order_id}, amount={self.amount})>"
