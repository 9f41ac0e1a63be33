"""
Payment schemas for request/response validation.
"""

from datetime import date, datetime
from decimal import Decimal
from pydantic import Field, computed_field

from app.core.formatting import format_currency, format_date_short
from app.schemas.base import BaseSchema


class PaymentBase(BaseSchema):
    """Base payment schema."""

    amount: Decimal = Field(..., ge=0)
    payment_date: date


class PaymentCreate(PaymentBase):
    """Schema for recording a payment on an order."""
    pass


class PaymentResponse(PaymentBase):
    """Payment response schema."""

    id: int
    order_id: int
    created_at: datetime

    @computed_field
    @property
    def amount_display(self) -> str:
        return format_currency(self.amount)

    @computed_field
    @property
    def payment_date_display(self) -> str:
        return format_date_short(self.payment_date)
