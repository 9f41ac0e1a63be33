"""
Pattern model: a named, reusable set of body measurements.
"""

from typing import Any
from sqlalchemy import String, JSON
from sqlalchemy.orm import Mapped, mapped_column

from app.models.base import BaseModel


class Pattern(BaseModel):
    """
    Measurement pattern ("patron").

    Attributes:
        name: Display name of the pattern
        measurements: MeasurementSet document (unit, standard, custom)
    """

    __tablename__ = "patterns"

    name: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
    )
    measurements: Mapped[dict[str, Any]] = mapped_column(
        JSON,
        nullable=False,
    )

    def __repr__(self) -> str:
        return f"<Pattern(id={self.id}, name='{self.name}')>"
