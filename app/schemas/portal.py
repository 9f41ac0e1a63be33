"""
Client portal schemas: what the end customer sees of an order.
"""

from datetime import date

from app.models.order import OrderStatus
from app.schemas.base import BaseSchema


class PortalOrderResponse(BaseSchema):
    """Read-only order tracking view, without financial details."""

    id: int
    title: str
    client_name: str
    status: OrderStatus
    status_variant: str
    progress: int
    progress_label: str
    delivery_date: date
    delivery_date_display: str
    images: list[str]
    progress_images: list[str]
