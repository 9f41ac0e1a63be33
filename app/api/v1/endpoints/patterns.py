"""
Pattern endpoints.
CRUD operations for the measurement pattern catalog.
"""

from fastapi import APIRouter, status

from app.api.deps import DbSession
from app.schemas.pattern import (
    PatternCreate,
    PatternReplace,
    PatternResponse,
    PatternListResponse,
)
from app.schemas.base import MessageResponse
from app.services.pattern import PatternService


router = APIRouter()


@router.post(
    "",
    response_model=PatternResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Créer un patron",
    description="Enregistrer un nouveau patron de mensurations",
)
async def create_pattern(
    data: PatternCreate,
    db: DbSession,
) -> PatternResponse:
    service = PatternService(db)
    pattern = await service.create(data)
    return PatternResponse.model_validate(pattern)


@router.get(
    "",
    response_model=PatternListResponse,
    summary="Lister les patrons",
    description="Obtenir tous les patrons, par nom",
)
async def list_patterns(
    db: DbSession,
) -> PatternListResponse:
    service = PatternService(db)
    patterns = await service.list()
    return PatternListResponse(
        items=[PatternResponse.model_validate(p) for p in patterns],
        total=len(patterns),
    )


@router.get(
    "/{pattern_id}",
    response_model=PatternResponse,
    summary="Détails d'un patron",
)
async def get_pattern(
    pattern_id: int,
    db: DbSession,
) -> PatternResponse:
    service = PatternService(db)
    pattern = await service.get_or_404(pattern_id)
    return PatternResponse.model_validate(pattern)


@router.put(
    "/{pattern_id}",
    response_model=PatternResponse,
    summary="Remplacer un patron",
    description="Remplacer le nom et toutes les mensurations d'un patron",
)
async def replace_pattern(
    pattern_id: int,
    data: PatternReplace,
    db: DbSession,
) -> PatternResponse:
    service = PatternService(db)
    pattern = await service.get_or_404(pattern_id)
    pattern = await service.replace(pattern, data)
    return PatternResponse.model_validate(pattern)


@router.delete(
    "/{pattern_id}",
    response_model=MessageResponse,
    summary="Supprimer un patron",
    description="Supprimer un patron (les commandes gardent leurs mensurations)",
)
async def delete_pattern(
    pattern_id: int,
    db: DbSession,
) -> MessageResponse:
    service = PatternService(db)
    pattern = await service.get_or_404(pattern_id)
    await service.delete(pattern)
    return MessageResponse(message="Patron supprimé avec succès")
