"""
Order management endpoints.
Orders, their payments, status changes and pattern application.
"""

from fastapi import APIRouter, Query, status
from fastapi.responses import FileResponse

from app.api.deps import DbSession
from app.models.order import OrderStatus
from app.schemas.order import (
    OrderCreate,
    OrderReplace,
    OrderStatusChange,
    OrderResponse,
    OrderListResponse,
)
from app.schemas.payment import PaymentCreate, PaymentResponse
from app.schemas.base import MessageResponse, page_count
from app.services.client import ClientService
from app.services.order import OrderService
from app.services.pattern import PatternService
from app.services.payment import PaymentService
from app.services.pdf import PDFService
from app.services.workshop import WorkshopService


router = APIRouter()


@router.post(
    "",
    response_model=OrderResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Créer une commande",
    description="Créer une commande pour un client enregistré ou un client invité",
)
async def create_order(
    data: OrderCreate,
    db: DbSession,
) -> OrderResponse:
    """Create a new order."""
    service = OrderService(db)
    order = await service.create(data)
    return await service.to_response(order)


@router.get(
    "",
    response_model=OrderListResponse,
    summary="Lister les commandes",
    description="Obtenir la liste paginée des commandes, livraison la plus tardive en premier",
)
async def list_orders(
    db: DbSession,
    page: int = Query(1, ge=1, description="Numéro de page"),
    per_page: int = Query(20, ge=1, le=100, description="Éléments par page"),
    status_filter: OrderStatus | None = Query(None, alias="status", description="Filtrer par statut"),
    client_id: int | None = Query(None, description="Filtrer par client"),
    search: str | None = Query(None, description="Rechercher par titre ou client"),
) -> OrderListResponse:
    """List orders with pagination and filters."""
    service = OrderService(db)
    skip = (page - 1) * per_page

    orders, total = await service.list(
        skip=skip,
        limit=per_page,
        status_filter=status_filter,
        client_id=client_id,
        search=search,
    )

    return OrderListResponse(
        items=await service.to_responses(orders),
        total=total,
        page=page,
        per_page=per_page,
        pages=page_count(total, per_page),
    )


@router.get(
    "/{order_id}",
    response_model=OrderResponse,
    summary="Détails d'une commande",
    description="Obtenir une commande avec son solde, son avancement et ses mensurations",
)
async def get_order(
    order_id: int,
    db: DbSession,
) -> OrderResponse:
    """Get order by ID."""
    service = OrderService(db)
    order = await service.get_or_404(order_id)
    return await service.to_response(order)


@router.put(
    "/{order_id}",
    response_model=OrderResponse,
    summary="Remplacer une commande",
    description="Remplacer toute la commande, paiements et mensurations compris",
)
async def replace_order(
    order_id: int,
    data: OrderReplace,
    db: DbSession,
) -> OrderResponse:
    """Replace an order."""
    service = OrderService(db)
    order = await service.get_or_404(order_id)
    order = await service.replace(order, data)
    return await service.to_response(order)


@router.post(
    "/{order_id}/status",
    response_model=OrderResponse,
    summary="Changer le statut",
    description="Faire passer la commande à un autre statut",
)
async def change_order_status(
    order_id: int,
    data: OrderStatusChange,
    db: DbSession,
) -> OrderResponse:
    """Change the status of an order."""
    service = OrderService(db)
    order = await service.get_or_404(order_id)
    order = await service.change_status(order, data.status)
    return await service.to_response(order)


@router.post(
    "/{order_id}/apply-pattern/{pattern_id}",
    response_model=OrderResponse,
    summary="Appliquer un patron",
    description="Remplacer les mensurations de la commande par celles d'un patron",
)
async def apply_pattern(
    order_id: int,
    pattern_id: int,
    db: DbSession,
) -> OrderResponse:
    """Apply a pattern to an order."""
    service = OrderService(db)
    order = await service.get_or_404(order_id)
    pattern = await PatternService(db).get_or_404(pattern_id)
    order = await service.apply_pattern(order, pattern)
    return await service.to_response(order)


@router.get(
    "/{order_id}/payments",
    response_model=list[PaymentResponse],
    summary="Paiements d'une commande",
    description="Obtenir les paiements d'une commande dans l'ordre de saisie",
)
async def list_order_payments(
    order_id: int,
    db: DbSession,
) -> list[PaymentResponse]:
    """List the payments of an order."""
    order = await OrderService(db).get_or_404(order_id)
    return [PaymentResponse.model_validate(p) for p in order.payments]


@router.post(
    "/{order_id}/payments",
    response_model=PaymentResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Enregistrer un paiement",
    description="Enregistrer un paiement pour une commande",
)
async def create_payment(
    order_id: int,
    data: PaymentCreate,
    db: DbSession,
) -> PaymentResponse:
    """Record a payment on an order."""
    order = await OrderService(db).get_or_404(order_id)
    payment = await PaymentService(db).create(order, data)
    return PaymentResponse.model_validate(payment)


@router.delete(
    "/{order_id}/payments/{payment_id}",
    response_model=MessageResponse,
    summary="Supprimer un paiement",
)
async def delete_payment(
    order_id: int,
    payment_id: int,
    db: DbSession,
) -> MessageResponse:
    """Remove a payment from an order."""
    order = await OrderService(db).get_or_404(order_id)
    service = PaymentService(db)
    payment = service.get_or_404(order, payment_id)
    await service.delete(order, payment)
    return MessageResponse(message="Paiement supprimé avec succès")


@router.get(
    "/{order_id}/pdf",
    summary="Télécharger la fiche",
    description="Générer et télécharger la fiche de commande en PDF",
    response_class=FileResponse,
)
async def download_order_pdf(
    order_id: int,
    db: DbSession,
):
    """Generate and download the order slip."""
    order = await OrderService(db).get_or_404(order_id)
    client = None
    if order.client_id is not None:
        client = await ClientService(db).get_by_id(order.client_id)
    workshop = await WorkshopService(db).get_profile()

    pdf_service = PDFService()
    pdf_path = await pdf_service.generate_order_pdf(order, client, workshop)

    return FileResponse(
        path=pdf_path,
        filename=f"commande_{order.id}.pdf",
        media_type="application/pdf",
    )


@router.delete(
    "/{order_id}",
    response_model=MessageResponse,
    summary="Supprimer une commande",
)
async def delete_order(
    order_id: int,
    db: DbSession,
) -> MessageResponse:
    """Delete an order."""
    service = OrderService(db)
    order = await service.get_or_404(order_id)
    await service.delete(order)
    return MessageResponse(message="Commande supprimée avec succès")
