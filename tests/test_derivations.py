"""
Tests for order derivations: balance, progress, badges and client labels.
"""

from datetime import date
from decimal import Decimal
from types import SimpleNamespace

import pytest

from app.models.order import OrderStatus
from app.services import derivations


def make_payment(amount):
    return SimpleNamespace(amount=Decimal(str(amount)), payment_date=date(2024, 1, 2))


def make_order(total_price, amounts=(), client_id=None, guest_client_name=None):
    return SimpleNamespace(
        total_price=Decimal(str(total_price)),
        payments=[make_payment(a) for a in amounts],
        client_id=client_id,
        guest_client_name=guest_client_name,
    )


class TestBalance:
    """Tests for amount paid and remaining balance."""

    def test_partial_payments(self):
        """450 with payments of 200 and 100 leaves 150 to pay."""
        order = make_order(450, [200, 100])

        assert derivations.amount_paid(order.payments) == Decimal("300")
        assert derivations.balance(order) == Decimal("150")

    def test_no_payments(self):
        """Without payments the balance is the full price."""
        order = make_order(300)

        assert derivations.amount_paid(order.payments) == Decimal("0")
        assert derivations.balance(order) == Decimal("300")

    def test_overpaid_balance_is_negative(self):
        """Balance is not floored at zero."""
        order = make_order(100, [150])

        assert derivations.balance(order) == Decimal("-50")

    @pytest.mark.parametrize("value,tone", [
        (Decimal("150"), "warning"),
        (Decimal("0"), "success"),
        (Decimal("-50"), "success"),
    ])
    def test_balance_tone(self, value, tone):
        assert derivations.balance_tone(value) == tone


class TestStatusDerivations:
    """Tests for progress percentages and badge variants."""

    @pytest.mark.parametrize("status,progress", [
        (OrderStatus.EN_ATTENTE, 10),
        (OrderStatus.EN_COURS, 50),
        (OrderStatus.PRET_A_LIVRER, 90),
        (OrderStatus.TERMINEE, 100),
        ("Prêt à livrer", 90),
    ])
    def test_progress_percent(self, status, progress):
        assert derivations.progress_percent(status) == progress

    def test_progress_unknown_status_is_zero(self):
        assert derivations.progress_percent("Annulée") == 0
        assert derivations.progress_percent(None) == 0

    @pytest.mark.parametrize("status,variant", [
        (OrderStatus.TERMINEE, "secondary"),
        (OrderStatus.EN_COURS, "default"),
        (OrderStatus.PRET_A_LIVRER, "destructive"),
        (OrderStatus.EN_ATTENTE, "outline"),
        ("Annulée", "secondary"),
    ])
    def test_status_variant(self, status, variant):
        assert derivations.status_variant(status) == variant


class TestResolveClientName:
    """Tests for client label resolution."""

    def test_registered_client(self):
        clients = {1: SimpleNamespace(first_name="Marie", last_name="Dubois", email="m@example.com")}
        order = make_order(100, client_id=1)

        assert derivations.resolve_client_name(order, clients) == "Marie Dubois"
        assert derivations.resolve_client_email(order, clients) == "m@example.com"

    def test_missing_registered_client(self):
        """A dangling client id degrades to a placeholder."""
        order = make_order(100, client_id=99)

        assert derivations.resolve_client_name(order, {}) == "Client Inconnu"
        assert derivations.resolve_client_email(order, {}) is None

    def test_guest_client(self):
        order = make_order(100, guest_client_name="Awa Diop")

        assert derivations.resolve_client_name(order, {}) == "Awa Diop"

    def test_guest_without_name(self):
        order = make_order(100)

        assert derivations.resolve_client_name(order, {}) == "Client Invité"
