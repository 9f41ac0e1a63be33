"""
Dashboard Service.
Derives the workshop widgets from the full order list on every read.
"""

from datetime import date
from typing import Any, Dict, Mapping
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.config import settings
from app.core.formatting import (
    format_currency,
    format_date_compact,
    format_date_medium,
)
from app.models.order import Order
from app.services import derivations, listing
from app.services.client import ClientService
from app.services.order import OrderService


class DashboardService:
    """Service for dashboard statistics."""

    def __init__(self, db: AsyncSession):
        self.db = db

    @staticmethod
    def _deadline_item(
        order: Order,
        clients: Mapping[int, Any],
        today: date,
    ) -> Dict[str, Any]:
        days_left = listing.days_until(order.delivery_date, today)
        return {
            "id": order.id,
            "title": order.title,
            "client_name": derivations.resolve_client_name(order, clients),
            "status": order.status,
            "delivery_date": order.delivery_date,
            "delivery_date_display": format_date_medium(order.delivery_date),
            "days_left": days_left,
            "days_left_label": listing.days_until_label(days_left),
            "badge_variant": listing.deadline_variant(days_left),
        }

    @staticmethod
    def _in_progress_item(order: Order, clients: Mapping[int, Any]) -> Dict[str, Any]:
        return {
            "id": order.id,
            "title": order.title,
            "client_name": derivations.resolve_client_name(order, clients),
            "total_price": order.total_price,
            "total_price_display": format_currency(order.total_price),
            "delivery_date": order.delivery_date,
            "delivery_date_display": format_date_compact(order.delivery_date),
        }

    async def get_dashboard(
        self,
        today: date | None = None,
        horizon_days: int | None = None,
    ) -> Dict[str, Any]:
        """
        Get complete dashboard data.

        Args:
            today: Reference date (defaults to the current date)
            horizon_days: Upcoming window (defaults to DELIVERY_HORIZON_DAYS)

        Returns:
            Counters and lists for the dashboard widgets
        """
        if today is None:
            today = date.today()
        if horizon_days is None:
            horizon_days = settings.DELIVERY_HORIZON_DAYS

        orders = await OrderService(self.db).list_all()
        clients = await ClientService(self.db).get_registry(o.client_id for o in orders)

        upcoming = listing.upcoming(orders, today, horizon_days)
        in_progress = listing.in_progress(orders)
        late = sorted(listing.late(orders, today), key=lambda o: o.delivery_date)
        revenue = listing.completed_revenue(orders)

        return {
            "reference_date": today,
            "horizon_days": horizon_days,
            "in_progress_count": len(in_progress),
            "completed_revenue": revenue,
            "completed_revenue_display": format_currency(revenue),
            "upcoming_count": len(upcoming),
            "late_count": len(late),
            "upcoming": [self._deadline_item(o, clients, today) for o in upcoming],
            "in_progress": [self._in_progress_item(o, clients) for o in in_progress],
            "late": [self._deadline_item(o, clients, today) for o in late],
        }
