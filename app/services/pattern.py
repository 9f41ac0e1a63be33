"""
Pattern service.
Handles the catalog of reusable measurement patterns.
"""

import logging
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select
from fastapi import HTTPException, status

from app.models.pattern import Pattern
from app.schemas.pattern import PatternCreate, PatternReplace

logger = logging.getLogger(__name__)


class PatternService:
    """Service for pattern operations."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def create(self, data: PatternCreate) -> Pattern:
        """Create a new pattern."""
        pattern = Pattern(
            name=data.name,
            measurements=data.measurements.to_document(),
        )

        self.db.add(pattern)
        await self.db.flush()
        await self.db.refresh(pattern)

        logger.info(f"Patron créé: {pattern.name} (id={pattern.id})")
        return pattern

    async def get_by_id(self, pattern_id: int) -> Pattern | None:
        result = await self.db.execute(
            select(Pattern).where(Pattern.id == pattern_id)
        )
        return result.scalar_one_or_none()

    async def get_or_404(self, pattern_id: int) -> Pattern:
        """
        Get pattern by ID or raise 404.

        Raises:
            HTTPException: If pattern not found
        """
        pattern = await self.get_by_id(pattern_id)
        if not pattern:
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail="Patron non trouvé",
            )
        return pattern

    async def list(self) -> list[Pattern]:
        """List all patterns by name."""
        result = await self.db.execute(
            select(Pattern).order_by(Pattern.name, Pattern.id)
        )
        return list(result.scalars().all())

    async def replace(self, pattern: Pattern, data: PatternReplace) -> Pattern:
        """Replace name and measurements of a pattern."""
        pattern.name = data.name
        pattern.measurements = data.measurements.to_document()

        await self.db.flush()
        await self.db.refresh(pattern)

        logger.info(f"Patron mis à jour: id={pattern.id}")
        return pattern

    async def delete(self, pattern: Pattern) -> None:
        """
        Delete a pattern.

        Orders keep the measurements they copied from it.
        """
        await self.db.delete(pattern)
        await self.db.flush()
        logger.info(f"Patron supprimé: id={pattern.id}")
