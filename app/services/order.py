"""
Order service.
Handles order creation, full replacement, status changes and pattern application.
"""

import logging
from typing import Iterable, List
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select, func, or_
from sqlalchemy.orm import selectinload
from fastapi import HTTPException, status

from app.core.config import settings
from app.models.client import Client
from app.models.order import Order, OrderStatus
from app.models.pattern import Pattern
from app.models.payment import Payment
from app.schemas.order import (
    OrderBase,
    OrderCreate,
    OrderReplace,
    OrderResponse,
    RegisteredOwner,
)
from app.services import measurements
from app.services.client import ClientService
from app.services.pattern import PatternService

logger = logging.getLogger(__name__)


class OrderService:
    """Service for order operations."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def _assign(self, order: Order, data: OrderBase) -> None:
        """Copy every field of data onto order (full replacement)."""
        owner = data.owner
        if isinstance(owner, RegisteredOwner):
            await ClientService(self.db).get_or_404(owner.client_id)
            order.client_id = owner.client_id
            order.guest_client_name = None
            order.guest_client_contact = None
        else:
            order.client_id = None
            order.guest_client_name = owner.name
            order.guest_client_contact = owner.contact

        order.title = data.title
        order.description = data.description
        order.images = list(data.images)
        order.progress_images = list(data.progress_images)
        order.delivery_date = data.delivery_date
        order.total_price = data.total_price
        order.status = data.status
        order.measurements = data.measurements.to_document()
        order.payments = [
            Payment(amount=p.amount, payment_date=p.payment_date)
            for p in data.payments
        ]

    def _check_transition(self, order: Order, new_status: OrderStatus) -> None:
        """
        Any status may follow any other, except that leaving Terminée
        requires ALLOW_REOPEN_COMPLETED_ORDERS.
        """
        if (
            order.status == OrderStatus.TERMINEE
            and new_status != OrderStatus.TERMINEE
            and not settings.ALLOW_REOPEN_COMPLETED_ORDERS
        ):
            logger.warning(f"Réouverture refusée pour la commande {order.id}")
            raise HTTPException(
                status_code=status.HTTP_409_CONFLICT,
                detail="Une commande terminée ne peut pas être rouverte",
            )

    async def _reload(self, order_id: int) -> Order:
        result = await self.db.execute(
            select(Order)
            .options(selectinload(Order.payments))
            .where(Order.id == order_id)
            .execution_options(populate_existing=True)
        )
        return result.scalar_one()

    async def create(self, data: OrderCreate) -> Order:
        """
        Create a new order.

        Args:
            data: Order data; pattern_id, when set, supplies the measurements

        Returns:
            Created order

        Raises:
            HTTPException: If the client or the pattern does not exist
        """
        order = Order()
        await self._assign(order, data)

        if data.pattern_id is not None:
            pattern = await PatternService(self.db).get_or_404(data.pattern_id)
            order.measurements = measurements.apply_pattern(order.measurements, pattern)

        self.db.add(order)
        await self.db.flush()

        logger.info(f"Commande créée: {order.title} (id={order.id})")
        return await self._reload(order.id)

    async def get_by_id(self, order_id: int) -> Order | None:
        result = await self.db.execute(
            select(Order)
            .options(selectinload(Order.payments))
            .where(Order.id == order_id)
        )
        return result.scalar_one_or_none()

    async def get_or_404(self, order_id: int) -> Order:
        """
        Get order by ID or raise 404.

        Raises:
            HTTPException: If order not found
        """
        order = await self.get_by_id(order_id)
        if not order:
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail="Commande non trouvée",
            )
        return order

    async def list(
        self,
        skip: int = 0,
        limit: int = 20,
        status_filter: OrderStatus | None = None,
        client_id: int | None = None,
        search: str | None = None,
    ) -> tuple[list[Order], int]:
        """
        List orders, latest delivery date first.

        Args:
            skip: Number of records to skip
            limit: Maximum records to return
            status_filter: Only orders with this status
            client_id: Only orders of this registered client
            search: Search term for title, guest name or client name

        Returns:
            Tuple of (orders list, total count)
        """
        query = (
            select(Order)
            .outerjoin(Client, Order.client_id == Client.id)
            .options(selectinload(Order.payments))
        )
        count_query = (
            select(func.count(Order.id))
            .outerjoin(Client, Order.client_id == Client.id)
        )

        conditions = []
        if status_filter:
            conditions.append(Order.status == status_filter)
        if client_id is not None:
            conditions.append(Order.client_id == client_id)
        if search:
            search_filter = f"%{search}%"
            conditions.append(or_(
                Order.title.ilike(search_filter),
                Order.guest_client_name.ilike(search_filter),
                Client.first_name.ilike(search_filter),
                Client.last_name.ilike(search_filter),
            ))

        if conditions:
            query = query.where(*conditions)
            count_query = count_query.where(*conditions)

        total_result = await self.db.execute(count_query)
        total = total_result.scalar() or 0

        query = (
            query.order_by(Order.delivery_date.desc(), Order.id.desc())
            .offset(skip)
            .limit(limit)
        )
        result = await self.db.execute(query)
        orders = list(result.scalars().all())

        return orders, total

    async def list_by_client(self, client_id: int) -> List[Order]:
        """Every order of a registered client, latest delivery date first."""
        result = await self.db.execute(
            select(Order)
            .options(selectinload(Order.payments))
            .where(Order.client_id == client_id)
            .order_by(Order.delivery_date.desc(), Order.id.desc())
        )
        return list(result.scalars().all())

    async def list_all(self) -> List[Order]:
        """Every order, latest delivery date first."""
        result = await self.db.execute(
            select(Order)
            .options(selectinload(Order.payments))
            .order_by(Order.delivery_date.desc(), Order.id.desc())
        )
        return list(result.scalars().all())

    async def replace(self, order: Order, data: OrderReplace) -> Order:
        """
        Replace an order wholesale, payments and measurements included.

        Raises:
            HTTPException: If the client does not exist or the order
                would be reopened
        """
        self._check_transition(order, data.status)
        await self._assign(order, data)
        await self.db.flush()

        logger.info(f"Commande remplacée: id={order.id}")
        return await self._reload(order.id)

    async def change_status(self, order: Order, new_status: OrderStatus) -> Order:
        """Move an order to another status."""
        self._check_transition(order, new_status)
        previous = order.status
        order.status = new_status
        await self.db.flush()

        logger.info(f"Commande {order.id}: {previous.value} -> {new_status.value}")
        return await self._reload(order.id)

    async def apply_pattern(self, order: Order, pattern: Pattern) -> Order:
        """Replace the order's measurements with a copy of the pattern's."""
        order.measurements = measurements.apply_pattern(order.measurements, pattern)
        await self.db.flush()

        logger.info(f"Patron {pattern.id} appliqué à la commande {order.id}")
        return await self._reload(order.id)

    async def delete(self, order: Order) -> None:
        """Delete an order and its payments."""
        await self.db.delete(order)
        await self.db.flush()
        logger.info(f"Commande supprimée: id={order.id}")

    async def to_responses(self, orders: Iterable[Order]) -> List[OrderResponse]:
        """Join orders against the client registry."""
        orders = list(orders)
        clients = await ClientService(self.db).get_registry(o.client_id for o in orders)
        return [OrderResponse.from_order(o, clients) for o in orders]

    async def to_response(self, order: Order) -> OrderResponse:
        responses = await self.to_responses([order])
        return responses[0]
