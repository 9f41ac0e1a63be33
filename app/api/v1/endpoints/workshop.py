"""
Workshop profile endpoints.
"""

from fastapi import APIRouter

from app.api.deps import DbSession
from app.schemas.workshop import WorkshopReplace, WorkshopResponse
from app.services.workshop import WorkshopService


router = APIRouter()


@router.get(
    "",
    response_model=WorkshopResponse,
    summary="Profil de l'atelier",
)
async def get_workshop(
    db: DbSession,
) -> WorkshopResponse:
    """Obtenir le profil de l'atelier."""
    workshop = await WorkshopService(db).get_profile()
    return WorkshopResponse.model_validate(workshop)


@router.put(
    "",
    response_model=WorkshopResponse,
    summary="Modifier le profil de l'atelier",
    description="Remplacer les informations de l'atelier",
)
async def replace_workshop(
    data: WorkshopReplace,
    db: DbSession,
) -> WorkshopResponse:
    """Remplacer le profil de l'atelier."""
    workshop = await WorkshopService(db).replace(data)
    return WorkshopResponse.model_validate(workshop)
