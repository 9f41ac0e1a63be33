"""
Client service.
Handles client CRUD operations and the client delete policy.
"""

import logging
from typing import Iterable
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select, func, or_
from fastapi import HTTPException, status

from app.core.config import settings
from app.models.client import Client
from app.models.order import Order
from app.schemas.client import ClientCreate, ClientReplace

logger = logging.getLogger(__name__)


class ClientService:
    """Service for client operations."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def create(self, data: ClientCreate) -> Client:
        """
        Create a new client.

        Args:
            data: Client data

        Returns:
            Created client
        """
        client = Client(**data.model_dump())

        self.db.add(client)
        await self.db.flush()
        await self.db.refresh(client)

        logger.info(f"Client créé: {client.full_name} (id={client.id})")
        return client

    async def get_by_id(self, client_id: int) -> Client | None:
        """Get client by ID."""
        result = await self.db.execute(
            select(Client).where(Client.id == client_id)
        )
        return result.scalar_one_or_none()

    async def get_or_404(self, client_id: int) -> Client:
        """
        Get client by ID or raise 404.

        Raises:
            HTTPException: If client not found
        """
        client = await self.get_by_id(client_id)
        if not client:
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail="Client non trouvé",
            )
        return client

    async def list(
        self,
        skip: int = 0,
        limit: int = 20,
        search: str | None = None,
    ) -> tuple[list[Client], int]:
        """
        List clients with pagination and search.

        Args:
            skip: Number of records to skip
            limit: Maximum records to return
            search: Search term for first name, last name or email

        Returns:
            Tuple of (clients list, total count)
        """
        query = select(Client)
        count_query = select(func.count(Client.id))

        if search:
            search_filter = f"%{search}%"
            condition = or_(
                Client.first_name.ilike(search_filter),
                Client.last_name.ilike(search_filter),
                Client.email.ilike(search_filter),
            )
            query = query.where(condition)
            count_query = count_query.where(condition)

        total_result = await self.db.execute(count_query)
        total = total_result.scalar() or 0

        query = (
            query.order_by(Client.last_name, Client.first_name)
            .offset(skip)
            .limit(limit)
        )
        result = await self.db.execute(query)
        clients = list(result.scalars().all())

        return clients, total

    async def get_registry(self, client_ids: Iterable[int | None]) -> dict[int, Client]:
        """Clients keyed by id, for resolving order owners."""
        ids = {client_id for client_id in client_ids if client_id is not None}
        if not ids:
            return {}
        result = await self.db.execute(
            select(Client).where(Client.id.in_(ids))
        )
        return {client.id: client for client in result.scalars().all()}

    async def replace(self, client: Client, data: ClientReplace) -> Client:
        """
        Replace every field of a client.

        Args:
            client: Client to replace
            data: New client data

        Returns:
            Updated client
        """
        for field, value in data.model_dump().items():
            setattr(client, field, value)

        await self.db.flush()
        await self.db.refresh(client)

        logger.info(f"Client mis à jour: id={client.id}")
        return client

    async def delete(self, client: Client) -> int:
        """
        Delete a client according to CLIENT_DELETE_POLICY.

        restrict: refuse while orders still reference the client.
        detach: turn those orders into guest orders first.

        Returns:
            Number of orders detached

        Raises:
            HTTPException: 409 when the policy forbids the deletion
        """
        result = await self.db.execute(
            select(Order).where(Order.client_id == client.id)
        )
        orders = list(result.scalars().all())

        if orders and settings.CLIENT_DELETE_POLICY == "restrict":
            logger.warning(
                f"Suppression refusée: client {client.id} a {len(orders)} commande(s)"
            )
            raise HTTPException(
                status_code=status.HTTP_409_CONFLICT,
                detail="Impossible de supprimer ce client (commandes existantes)",
            )

        for order in orders:
            order.client_id = None
            order.guest_client_name = client.full_name
            order.guest_client_contact = client.phone or client.email

        if orders:
            await self.db.flush()
            logger.info(f"{len(orders)} commande(s) détachée(s) du client {client.id}")

        await self.db.delete(client)
        await self.db.flush()

        logger.info(f"Client supprimé: id={client.id}")
        return len(orders)
