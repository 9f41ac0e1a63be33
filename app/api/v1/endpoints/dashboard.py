"""
Dashboard endpoints.
Workshop activity at a glance.
"""

from datetime import date
from fastapi import APIRouter, Query

from app.api.deps import DbSession
from app.schemas.dashboard import DashboardResponse
from app.services.dashboard import DashboardService


router = APIRouter()


@router.get(
    "",
    response_model=DashboardResponse,
    summary="Tableau de bord",
    description="Commandes en cours, revenus des commandes terminées, échéances proches et retards",
)
async def get_dashboard(
    db: DbSession,
    reference_date: date | None = Query(None, description="Date de référence (défaut: aujourd'hui)"),
    horizon_days: int | None = Query(None, ge=0, le=90, description="Fenêtre des échéances en jours"),
) -> DashboardResponse:
    """Obtenir le tableau de bord."""
    service = DashboardService(db)
    data = await service.get_dashboard(today=reference_date, horizon_days=horizon_days)
    return DashboardResponse.model_validate(data)
