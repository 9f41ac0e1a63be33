"""
Pydantic schemas for request/response validation.
"""

from app.schemas.measurement import (
    MeasurementUnit,
    StandardMeasurements,
    CustomMeasurement,
    MeasurementSet,
    MeasurementView,
)
from app.schemas.client import (
    ClientCreate,
    ClientReplace,
    ClientResponse,
)
from app.schemas.pattern import (
    PatternCreate,
    PatternReplace,
    PatternResponse,
)
from app.schemas.payment import (
    PaymentCreate,
    PaymentResponse,
)
from app.schemas.order import (
    RegisteredOwner,
    GuestOwner,
    OrderCreate,
    OrderReplace,
    OrderStatusChange,
    OrderResponse,
)
from app.schemas.dashboard import DashboardResponse
from app.schemas.portal import PortalOrderResponse
from app.schemas.workshop import WorkshopReplace, WorkshopResponse

__all__ = [
    # Measurements
    "MeasurementUnit",
    "StandardMeasurements",
    "CustomMeasurement",
    "MeasurementSet",
    "MeasurementView",
    # Client
    "ClientCreate",
    "ClientReplace",
    "ClientResponse",
    # Pattern
    "PatternCreate",
    "PatternReplace",
    "PatternResponse",
    # Payment
    "PaymentCreate",
    "PaymentResponse",
    # Order
    "RegisteredOwner",
    "GuestOwner",
    "OrderCreate",
    "OrderReplace",
    "OrderStatusChange",
    "OrderResponse",
    # Dashboard / portal / workshop
    "DashboardResponse",
    "PortalOrderResponse",
    "WorkshopReplace",
    "WorkshopResponse",
]
