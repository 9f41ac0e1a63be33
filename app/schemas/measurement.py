"""
Measurement schemas: a unit-tagged set of standard and custom body measurements.
"""

from enum import Enum
from pydantic import ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from app.schemas.base import BaseSchema


class MeasurementUnit(str, Enum):
    """Measurement unit enumeration."""
    CM = "cm"
    IN = "in"


class StandardMeasurements(BaseSchema):
    """
    The closed set of standard measurements.
    Exposed and stored under camelCase keys (tourDePoitrine, ...).
    Values are display strings, not numbers.
    """

    model_config = ConfigDict(alias_generator=to_camel, extra="forbid")

    tour_de_poitrine: str | None = Field(None, max_length=50)
    tour_de_taille: str | None = Field(None, max_length=50)
    tour_de_hanches: str | None = Field(None, max_length=50)
    longueur_bras: str | None = Field(None, max_length=50)
    longueur_jambe: str | None = Field(None, max_length=50)
    carrure_dos: str | None = Field(None, max_length=50)

    @field_validator("*", mode="after")
    @classmethod
    def blank_as_missing(cls, value: str | None) -> str | None:
        return value or None


class CustomMeasurement(BaseSchema):
    """A free-form named measurement."""

    name: str = Field(..., min_length=1, max_length=100)
    value: str = Field(..., min_length=1, max_length=50)


class MeasurementSet(BaseSchema):
    """Unit, standard measurements and custom measurements."""

    model_config = ConfigDict(extra="forbid")

    unit: MeasurementUnit = MeasurementUnit.CM
    standard: StandardMeasurements = Field(default_factory=StandardMeasurements)
    custom: list[CustomMeasurement] = Field(default_factory=list)

    @field_validator("custom", mode="before")
    @classmethod
    def none_as_empty(cls, value):
        return [] if value is None else value

    def to_document(self) -> dict:
        """JSON document as stored on orders and patterns (absent fields omitted)."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


class MeasurementEntry(BaseSchema):
    """One displayable measurement line."""

    key: str
    label: str
    value: str
    display: str


class MeasurementView(BaseSchema):
    """Measurements ready for display, with an explicit empty state."""

    unit: MeasurementUnit
    entries: list[MeasurementEntry]
    is_empty: bool
    empty_message: str | None = None
