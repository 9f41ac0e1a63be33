"""
Client portal endpoints.
Read-only order tracking for the end customer.
"""

from fastapi import APIRouter

from app.api.deps import DbSession
from app.schemas.portal import PortalOrderResponse
from app.services.portal import PortalService


router = APIRouter()


@router.get(
    "/orders/{order_id}",
    response_model=PortalOrderResponse,
    summary="Suivi de commande",
    description="Statut, avancement et photos d'une commande, sans informations financières",
)
async def get_portal_order(
    order_id: int,
    db: DbSession,
) -> PortalOrderResponse:
    """Obtenir le suivi d'une commande."""
    service = PortalService(db)
    return PortalOrderResponse.model_validate(await service.get_order_view(order_id))
