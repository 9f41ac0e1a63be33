"""
Payment service.
Records and removes payments on orders.
"""

import logging
from sqlalchemy.ext.asyncio import AsyncSession
from fastapi import HTTPException, status

from app.models.order import Order
from app.models.payment import Payment
from app.schemas.payment import PaymentCreate
from app.services import derivations

logger = logging.getLogger(__name__)


class PaymentService:
    """Service for payment operations."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def create(self, order: Order, data: PaymentCreate) -> Payment:
        """
        Record a payment on an order.

        Overpayment is accepted: the order balance simply becomes negative.

        Args:
            order: Order receiving the payment
            data: Payment data

        Returns:
            Created payment
        """
        payment = Payment(
            amount=data.amount,
            payment_date=data.payment_date,
        )
        order.payments.append(payment)

        await self.db.flush()
        await self.db.refresh(payment)

        remaining = derivations.balance(order)
        if remaining < 0:
            logger.warning(f"Commande {order.id} payée au-delà du prix ({remaining})")
        logger.info(f"Paiement de {payment.amount} enregistré pour la commande {order.id}")
        return payment

    def get_or_404(self, order: Order, payment_id: int) -> Payment:
        """
        Find a payment of the order or raise 404.

        Raises:
            HTTPException: If the payment does not belong to the order
        """
        for payment in order.payments:
            if payment.id == payment_id:
                return payment
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Paiement non trouvé",
        )

    async def delete(self, order: Order, payment: Payment) -> None:
        """Remove a payment from its order."""
        order.payments.remove(payment)
        await self.db.flush()
        logger.info(f"Paiement {payment.id} supprimé de la commande {order.id}")
