"""
Client portal service.
Builds the read-only tracking view shared with the end customer.
"""

from typing import Any, Dict
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.formatting import format_date_long
from app.services import derivations
from app.services.client import ClientService
from app.services.order import OrderService


class PortalService:
    """Service for the customer-facing order view."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def get_order_view(self, order_id: int) -> Dict[str, Any]:
        """
        Tracking view of an order: status, progress and photos.
        Prices and payments are left out.

        Raises:
            HTTPException: If order not found
        """
        order = await OrderService(self.db).get_or_404(order_id)
        clients = await ClientService(self.db).get_registry([order.client_id])
        progress = derivations.progress_percent(order.status)

        return {
            "id": order.id,
            "title": order.title,
            "client_name": derivations.resolve_client_name(order, clients),
            "status": order.status,
            "status_variant": derivations.status_variant(order.status),
            "progress": progress,
            "progress_label": f"Avancement : {progress}%",
            "delivery_date": order.delivery_date,
            "delivery_date_display": format_date_long(order.delivery_date),
            "images": list(order.images or []),
            "progress_images": list(order.progress_images or []),
        }
