"""
Client management endpoints.
CRUD operations for clients.
"""

from fastapi import APIRouter, Query, status

from app.api.deps import DbSession
from app.schemas.client import (
    ClientCreate,
    ClientReplace,
    ClientResponse,
    ClientListResponse,
)
from app.schemas.base import MessageResponse, page_count
from app.schemas.order import OrderResponse
from app.services.client import ClientService
from app.services.order import OrderService


router = APIRouter()


@router.post(
    "",
    response_model=ClientResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Créer un client",
    description="Créer un nouveau client",
)
async def create_client(
    data: ClientCreate,
    db: DbSession,
) -> ClientResponse:
    """Create a new client."""
    service = ClientService(db)
    client = await service.create(data)
    return ClientResponse.model_validate(client)


@router.get(
    "",
    response_model=ClientListResponse,
    summary="Lister les clients",
    description="Obtenir la liste paginée des clients",
)
async def list_clients(
    db: DbSession,
    page: int = Query(1, ge=1, description="Numéro de page"),
    per_page: int = Query(20, ge=1, le=100, description="Éléments par page"),
    search: str | None = Query(None, description="Rechercher par nom ou email"),
) -> ClientListResponse:
    """List all clients with pagination."""
    service = ClientService(db)
    skip = (page - 1) * per_page

    clients, total = await service.list(
        skip=skip,
        limit=per_page,
        search=search,
    )

    return ClientListResponse(
        items=[ClientResponse.model_validate(c) for c in clients],
        total=total,
        page=page,
        per_page=per_page,
        pages=page_count(total, per_page),
    )


@router.get(
    "/{client_id}",
    response_model=ClientResponse,
    summary="Détails d'un client",
    description="Obtenir les détails d'un client",
)
async def get_client(
    client_id: int,
    db: DbSession,
) -> ClientResponse:
    """Get client by ID."""
    service = ClientService(db)
    client = await service.get_or_404(client_id)
    return ClientResponse.model_validate(client)


@router.get(
    "/{client_id}/orders",
    response_model=list[OrderResponse],
    summary="Commandes d'un client",
    description="Obtenir toutes les commandes d'un client",
)
async def list_client_orders(
    client_id: int,
    db: DbSession,
) -> list[OrderResponse]:
    """List every order of a client, latest delivery first."""
    await ClientService(db).get_or_404(client_id)
    service = OrderService(db)
    orders = await service.list_by_client(client_id)
    return await service.to_responses(orders)


@router.put(
    "/{client_id}",
    response_model=ClientResponse,
    summary="Remplacer un client",
    description="Remplacer toutes les informations d'un client",
)
async def replace_client(
    client_id: int,
    data: ClientReplace,
    db: DbSession,
) -> ClientResponse:
    """Replace a client."""
    service = ClientService(db)
    client = await service.get_or_404(client_id)
    client = await service.replace(client, data)
    return ClientResponse.model_validate(client)


@router.delete(
    "/{client_id}",
    response_model=MessageResponse,
    summary="Supprimer un client",
    description=(
        "Supprimer un client. Selon la politique configurée, la suppression "
        "est refusée si des commandes existent, ou ces commandes deviennent "
        "des commandes invité."
    ),
)
async def delete_client(
    client_id: int,
    db: DbSession,
) -> MessageResponse:
    """Delete a client."""
    service = ClientService(db)
    client = await service.get_or_404(client_id)
    detached = await service.delete(client)
    message = "Client supprimé avec succès"
    if detached:
        message += f" ({detached} commande(s) convertie(s) en commande invité)"
    return MessageResponse(message=message)
