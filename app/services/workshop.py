"""
Workshop profile service.
"""

import logging
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select

from app.core.config import settings
from app.models.workshop import Workshop
from app.schemas.workshop import WorkshopReplace

logger = logging.getLogger(__name__)


class WorkshopService:
    """Service for the single workshop profile."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def get_profile(self) -> Workshop:
        """Return the profile, creating it from settings on first access."""
        result = await self.db.execute(
            select(Workshop).order_by(Workshop.id).limit(1)
        )
        workshop = result.scalar_one_or_none()
        if workshop is None:
            workshop = Workshop(
                name=settings.WORKSHOP_NAME,
                email=settings.WORKSHOP_EMAIL,
                phone=settings.WORKSHOP_PHONE,
                address=settings.WORKSHOP_ADDRESS,
            )
            self.db.add(workshop)
            await self.db.flush()
            await self.db.refresh(workshop)
            logger.info("Profil de l'atelier initialisé")
        return workshop

    async def replace(self, data: WorkshopReplace) -> Workshop:
        """Replace every field of the workshop profile."""
        workshop = await self.get_profile()
        for field, value in data.model_dump().items():
            setattr(workshop, field, value)

        await self.db.flush()
        await self.db.refresh(workshop)

        logger.info("Profil de l'atelier mis à jour")
        return workshop
