"""
Pattern schemas for request/response validation.
"""

from pydantic import Field, computed_field

from app.schemas.base import BaseSchema, TimestampSchema
from app.schemas.measurement import MeasurementSet, MeasurementView
from app.services import measurements as measurement_views


class PatternBase(BaseSchema):
    """Base pattern schema."""

    name: str = Field(..., min_length=2, max_length=255)
    measurements: MeasurementSet = Field(default_factory=MeasurementSet)


class PatternCreate(PatternBase):
    """Schema for creating a pattern."""
    pass


class PatternReplace(PatternBase):
    """Full replacement of a pattern."""
    pass


class PatternResponse(PatternBase, TimestampSchema):
    """Pattern response schema."""

    id: int

    @computed_field
    @property
    def measurements_view(self) -> MeasurementView:
        return MeasurementView.model_validate(measurement_views.build_view(self.measurements.to_document()))


class PatternListResponse(BaseSchema):
    """Pattern list response."""

    items: list[PatternResponse]
    total: int
