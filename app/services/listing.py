"""
Listing and query helpers for dashboard widgets.
All filters are pure and re-derived on every read.
"""

from datetime import date, datetime, timedelta
from decimal import Decimal
from typing import Any, Iterable, List

from app.models.order import OrderStatus


TODAY_LABEL = "Aujourd'hui"


def _as_date(value: date | datetime) -> date:
    if isinstance(value, datetime):
        return value.date()
    return value


def _is_completed(order: Any) -> bool:
    return order.status == OrderStatus.TERMINEE


def upcoming(
    orders: Iterable[Any],
    now: date | datetime,
    horizon_days: int = 7,
) -> List[Any]:
    """
    Open orders due within [now, now + horizon_days], soonest first.
    Completed orders are never included.
    """
    start = _as_date(now)
    end = start + timedelta(days=horizon_days)
    selected = [
        o for o in orders
        if start <= _as_date(o.delivery_date) <= end and not _is_completed(o)
    ]
    return sorted(selected, key=lambda o: o.delivery_date)


def in_progress(orders: Iterable[Any]) -> List[Any]:
    return [o for o in orders if o.status == OrderStatus.EN_COURS]


def late(orders: Iterable[Any], now: date | datetime) -> List[Any]:
    """Open orders whose delivery date is already past."""
    today = _as_date(now)
    return [
        o for o in orders
        if _as_date(o.delivery_date) < today and not _is_completed(o)
    ]


def completed_revenue(orders: Iterable[Any]) -> Decimal:
    """Sum of total_price over completed orders."""
    total = Decimal("0")
    for o in orders:
        if _is_completed(o):
            total += Decimal(str(o.total_price))
    return total


def days_until(delivery_date: date | datetime, now: date | datetime) -> int:
    return (_as_date(delivery_date) - _as_date(now)).days


def days_until_label(days: int) -> str:
    """
    Human label for a delivery countdown.

    0 -> "Aujourd'hui", 1 -> "Dans 1 jour", 2 -> "Dans 2 jours".
    Past dates read "En retard de N jour(s)".
    """
    if days == 0:
        return TODAY_LABEL
    if days < 0:
        overdue = -days
        return f"En retard de {overdue} jour{'s' if overdue > 1 else ''}"
    return f"Dans {days} jour{'s' if days > 1 else ''}"


def deadline_variant(days: int) -> str:
    """Badge variant for a countdown: urgent within two days."""
    return "destructive" if days <= 2 else "secondary"
