"""
Order schemas for request/response validation.
"""

from datetime import date, datetime
from decimal import Decimal
from typing import Annotated, Any, Literal, Mapping, Union
from pydantic import Field, computed_field

from app.core.formatting import format_currency, format_date_long
from app.models.order import OrderStatus
from app.schemas.base import BaseSchema, TimestampSchema
from app.schemas.measurement import MeasurementSet, MeasurementView
from app.schemas.payment import PaymentBase, PaymentResponse
from app.services import derivations
from app.services import measurements as measurement_views


class RegisteredOwner(BaseSchema):
    """Order owned by a client of the registry."""

    kind: Literal["registered"] = "registered"
    client_id: int


class GuestOwner(BaseSchema):
    """Order owned by a guest known only by name and contact."""

    kind: Literal["guest"] = "guest"
    name: str = Field(..., min_length=1, max_length=255)
    contact: str | None = Field(None, max_length=255)


OrderOwner = Annotated[Union[RegisteredOwner, GuestOwner], Field(discriminator="kind")]


class OrderBase(BaseSchema):
    """Base order schema with common fields."""

    owner: OrderOwner
    title: str = Field(..., min_length=2, max_length=255)
    description: str | None = None
    images: list[str] = Field(default_factory=list)
    progress_images: list[str] = Field(default_factory=list)
    delivery_date: date
    total_price: Decimal = Field(..., ge=0)
    status: OrderStatus = OrderStatus.EN_ATTENTE
    measurements: MeasurementSet = Field(default_factory=MeasurementSet)
    payments: list[PaymentBase] = Field(default_factory=list)


class OrderCreate(OrderBase):
    """
    Schema for creating an order.

    When pattern_id is given, the pattern's measurements replace the
    submitted ones.
    """

    pattern_id: int | None = None


class OrderReplace(OrderBase):
    """Full replacement of an order, payments included."""
    pass


class OrderStatusChange(BaseSchema):
    """Explicit status transition."""

    status: OrderStatus


class OrderResponse(TimestampSchema):
    """Order enriched with its client label and derived figures."""

    id: int
    client_id: int | None = None
    guest_client_name: str | None = None
    guest_client_contact: str | None = None
    client_name: str = ""
    client_email: str | None = None
    title: str
    description: str | None = None
    images: list[str]
    progress_images: list[str]
    delivery_date: date
    total_price: Decimal
    status: OrderStatus
    measurements: MeasurementSet
    payments: list[PaymentResponse]

    @classmethod
    def from_order(cls, order: Any, clients: Mapping[int, Any]) -> "OrderResponse":
        """Build the response, resolving the client label against the registry."""
        response = cls.model_validate(order)
        return response.model_copy(update={
            "client_name": derivations.resolve_client_name(order, clients),
            "client_email": derivations.resolve_client_email(order, clients),
        })

    @computed_field
    @property
    def owner(self) -> Union[RegisteredOwner, GuestOwner]:
        if self.client_id is not None:
            return RegisteredOwner(client_id=self.client_id)
        return GuestOwner(
            name=self.guest_client_name or derivations.GUEST_CLIENT_LABEL,
            contact=self.guest_client_contact,
        )

    @computed_field
    @property
    def amount_paid(self) -> Decimal:
        return derivations.amount_paid(self.payments)

    @computed_field
    @property
    def balance(self) -> Decimal:
        return derivations.balance(self)

    @computed_field
    @property
    def balance_tone(self) -> str:
        return derivations.balance_tone(self.balance)

    @computed_field
    @property
    def progress(self) -> int:
        return derivations.progress_percent(self.status)

    @computed_field
    @property
    def status_variant(self) -> str:
        return derivations.status_variant(self.status)

    @computed_field
    @property
    def total_price_display(self) -> str:
        return format_currency(self.total_price)

    @computed_field
    @property
    def amount_paid_display(self) -> str:
        return format_currency(self.amount_paid)

    @computed_field
    @property
    def balance_display(self) -> str:
        return format_currency(self.balance)

    @computed_field
    @property
    def delivery_date_display(self) -> str:
        return format_date_long(self.delivery_date)

    @computed_field
    @property
    def measurements_view(self) -> MeasurementView:
        return MeasurementView.model_validate(measurement_views.build_view(self.measurements.to_document()))


class OrderListResponse(BaseSchema):
    """Paginated order list response."""

    items: list[OrderResponse]
    total: int
    page: int
    per_page: int
    pages: int
