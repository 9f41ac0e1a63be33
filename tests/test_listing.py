"""
Tests for dashboard listing helpers.
"""

from datetime import date, datetime
from decimal import Decimal
from types import SimpleNamespace

import pytest

from app.models.order import OrderStatus
from app.services import listing


NOW = date(2024, 1, 10)


def make_order(order_id, delivery_date, status, total_price=100):
    return SimpleNamespace(
        id=order_id,
        delivery_date=delivery_date,
        status=status,
        total_price=Decimal(str(total_price)),
    )


@pytest.fixture
def orders():
    return [
        make_order(1, date(2024, 1, 12), OrderStatus.EN_COURS, 450),
        make_order(2, date(2024, 1, 10), OrderStatus.EN_ATTENTE, 80),
        make_order(3, date(2024, 1, 15), OrderStatus.TERMINEE, 300),
        make_order(4, date(2024, 1, 5), OrderStatus.PRET_A_LIVRER, 120),
        make_order(5, date(2024, 1, 1), OrderStatus.TERMINEE, 200),
        make_order(6, date(2024, 1, 30), OrderStatus.EN_COURS, 500),
        make_order(7, date(2024, 1, 17), OrderStatus.EN_ATTENTE, 60),
    ]


def test_upcoming_window_and_order(orders):
    """Open orders due within seven days, soonest first, bounds included."""
    result = listing.upcoming(orders, NOW)

    assert [o.id for o in result] == [2, 1, 7]


def test_upcoming_excludes_completed(orders):
    result = listing.upcoming(orders, NOW, horizon_days=10)

    assert 3 not in [o.id for o in result]


def test_upcoming_accepts_datetime(orders):
    result = listing.upcoming(orders, datetime(2024, 1, 10, 18, 30))

    assert [o.id for o in result] == [2, 1, 7]


def test_in_progress(orders):
    assert [o.id for o in listing.in_progress(orders)] == [1, 6]


def test_late_excludes_completed_and_today(orders):
    """An order due today is not late; completed orders never are."""
    assert [o.id for o in listing.late(orders, NOW)] == [4]


def test_completed_revenue(orders):
    assert listing.completed_revenue(orders) == Decimal("500")


def test_completed_revenue_empty():
    assert listing.completed_revenue([]) == Decimal("0")


def test_days_until():
    assert listing.days_until(date(2024, 1, 12), date(2024, 1, 10)) == 2
    assert listing.days_until(date(2024, 1, 8), date(2024, 1, 10)) == -2


@pytest.mark.parametrize("days,label", [
    (0, "Aujourd'hui"),
    (1, "Dans 1 jour"),
    (2, "Dans 2 jours"),
    (-1, "En retard de 1 jour"),
    (-3, "En retard de 3 jours"),
])
def test_days_until_label(days, label):
    assert listing.days_until_label(days) == label


@pytest.mark.parametrize("days,variant", [
    (0, "destructive"),
    (2, "destructive"),
    (3, "secondary"),
])
def test_deadline_variant(days, variant):
    assert listing.deadline_variant(days) == variant
