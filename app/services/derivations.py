"""
Order derivations.
Pure functions computing balance, progress, badge variants and client labels.
They accept ORM objects or any object exposing the same attributes.
"""

from decimal import Decimal
from typing import Any, Iterable, Mapping

from app.models.order import OrderStatus


GUEST_CLIENT_LABEL = "Client Invité"
UNKNOWN_CLIENT_LABEL = "Client Inconnu"

PROGRESS_BY_STATUS = {
    OrderStatus.EN_ATTENTE: 10,
    OrderStatus.EN_COURS: 50,
    OrderStatus.PRET_A_LIVRER: 90,
    OrderStatus.TERMINEE: 100,
}

# Badge variants. "destructive" on Prêt à livrer marks urgency, not an error.
STATUS_VARIANTS = {
    OrderStatus.TERMINEE: "secondary",
    OrderStatus.EN_COURS: "default",
    OrderStatus.PRET_A_LIVRER: "destructive",
    OrderStatus.EN_ATTENTE: "outline",
}
DEFAULT_STATUS_VARIANT = "secondary"


def _to_decimal(value: Any) -> Decimal:
    if isinstance(value, Decimal):
        return value
    return Decimal(str(value))


def coerce_status(status: Any) -> OrderStatus | None:
    """Return the matching OrderStatus, or None for anything unknown."""
    try:
        return OrderStatus(status)
    except (ValueError, TypeError):
        return None


def amount_paid(payments: Iterable[Any]) -> Decimal:
    """Sum of recorded payment amounts."""
    return sum((_to_decimal(p.amount) for p in payments), Decimal("0"))


def balance(order: Any) -> Decimal:
    """
    Remaining balance of an order.

    total_price minus the sum of payments, with no floor: a negative
    balance means the client overpaid.
    """
    return _to_decimal(order.total_price) - amount_paid(order.payments)


def balance_tone(value: Decimal) -> str:
    """'success' when nothing is left to pay (or overpaid), 'warning' otherwise."""
    return "success" if value <= 0 else "warning"


def progress_percent(status: Any) -> int:
    """Completion percentage shown to the customer; 0 for unknown statuses."""
    known = coerce_status(status)
    if known is None:
        return 0
    return PROGRESS_BY_STATUS[known]


def status_variant(status: Any) -> str:
    known = coerce_status(status)
    if known is None:
        return DEFAULT_STATUS_VARIANT
    return STATUS_VARIANTS[known]


def resolve_client_name(order: Any, clients: Mapping[int, Any]) -> str:
    """
    Display name of the order's owner.

    A client id pointing to no registered client degrades to
    "Client Inconnu" instead of raising.
    """
    if order.client_id is not None:
        client = clients.get(order.client_id)
        if client is None:
            return UNKNOWN_CLIENT_LABEL
        return f"{client.first_name} {client.last_name}"
    return order.guest_client_name or GUEST_CLIENT_LABEL


def resolve_client_email(order: Any, clients: Mapping[int, Any]) -> str | None:
    if order.client_id is None:
        return None
    client = clients.get(order.client_id)
    return client.email if client is not None else None
