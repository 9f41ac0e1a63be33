"""
Database models module.
All SQLAlchemy models are exported from here for easy imports.
"""

from app.models.client import Client
from app.models.pattern import Pattern
from app.models.order import Order, OrderStatus
from app.models.payment import Payment
from app.models.workshop import Workshop


__all__ = [
    "Client",
    "Pattern",
    "Order",
    "OrderStatus",
    "Payment",
    "Workshop",
]
