"""
Dashboard schemas.
"""

from datetime import date
from decimal import Decimal

from app.models.order import OrderStatus
from app.schemas.base import BaseSchema


class DeadlineItem(BaseSchema):
    """An open order with its delivery countdown."""

    id: int
    title: str
    client_name: str
    status: OrderStatus
    delivery_date: date
    delivery_date_display: str
    days_left: int
    days_left_label: str
    badge_variant: str


class InProgressItem(BaseSchema):
    """An order currently being made."""

    id: int
    title: str
    client_name: str
    total_price: Decimal
    total_price_display: str
    delivery_date: date
    delivery_date_display: str


class DashboardResponse(BaseSchema):
    """Dashboard widgets, derived from the full order list."""

    reference_date: date
    horizon_days: int
    in_progress_count: int
    completed_revenue: Decimal
    completed_revenue_display: str
    upcoming_count: int
    late_count: int
    upcoming: list[DeadlineItem]
    in_progress: list[InProgressItem]
    late: list[DeadlineItem]
