"""initial schema: clients, patterns, orders, payments, workshop

Revision ID: 0001_initial
Revises:
Create Date: 2024-06-01

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '0001_initial'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


ORDER_STATUS = sa.Enum(
    'EN_ATTENTE', 'EN_COURS', 'PRET_A_LIVRER', 'TERMINEE',
    name='orderstatus',
)


def _timestamps() -> list[sa.Column]:
    return [
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
        sa.Column('updated_at', sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
    ]


def upgrade() -> None:
    op.create_table(
        'clients',
        sa.Column('id', sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column('first_name', sa.String(100), nullable=False),
        sa.Column('last_name', sa.String(100), nullable=False),
        sa.Column('phone', sa.String(50), nullable=True),
        sa.Column('email', sa.String(255), nullable=False),
        sa.Column('address', sa.Text(), nullable=True),
        *_timestamps(),
    )
    op.create_index('ix_clients_last_name', 'clients', ['last_name'])

    op.create_table(
        'patterns',
        sa.Column('id', sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column('name', sa.String(255), nullable=False),
        sa.Column('measurements', sa.JSON(), nullable=False),
        *_timestamps(),
    )

    op.create_table(
        'orders',
        sa.Column('id', sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column('client_id', sa.Integer(), sa.ForeignKey('clients.id', ondelete='RESTRICT'), nullable=True),
        sa.Column('guest_client_name', sa.String(255), nullable=True),
        sa.Column('guest_client_contact', sa.String(255), nullable=True),
        sa.Column('title', sa.String(255), nullable=False),
        sa.Column('description', sa.Text(), nullable=True),
        sa.Column('images', sa.JSON(), nullable=False),
        sa.Column('progress_images', sa.JSON(), nullable=False),
        sa.Column('delivery_date', sa.Date(), nullable=False),
        sa.Column('total_price', sa.Numeric(precision=12, scale=2), nullable=False),
        sa.Column('status', ORDER_STATUS, nullable=False),
        sa.Column('measurements', sa.JSON(), nullable=False),
        *_timestamps(),
        sa.CheckConstraint(
            '(client_id IS NULL) <> (guest_client_name IS NULL)',
            name='ck_orders_single_owner',
        ),
        sa.CheckConstraint('total_price >= 0', name='ck_orders_total_price_positive'),
    )
    op.create_index('ix_orders_client_id', 'orders', ['client_id'])
    op.create_index('ix_orders_delivery_date', 'orders', ['delivery_date'])
    op.create_index('ix_orders_status', 'orders', ['status'])

    op.create_table(
        'payments',
        sa.Column('id', sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column('order_id', sa.Integer(), sa.ForeignKey('orders.id', ondelete='CASCADE'), nullable=False),
        sa.Column('amount', sa.Numeric(precision=12, scale=2), nullable=False),
        sa.Column('payment_date', sa.Date(), nullable=False),
        *_timestamps(),
        sa.CheckConstraint('amount >= 0', name='ck_payments_amount_positive'),
    )
    op.create_index('ix_payments_order_id', 'payments', ['order_id'])

    op.create_table(
        'workshop',
        sa.Column('id', sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column('name', sa.String(255), nullable=False),
        sa.Column('email', sa.String(255), nullable=True),
        sa.Column('phone', sa.String(50), nullable=True),
        sa.Column('address', sa.Text(), nullable=True),
        *_timestamps(),
    )


def downgrade() -> None:
    op.drop_table('workshop')
    op.drop_index('ix_payments_order_id', table_name='payments')
    op.drop_table('payments')
    op.drop_index('ix_orders_status', table_name='orders')
    op.drop_index('ix_orders_delivery_date', table_name='orders')
    op.drop_index('ix_orders_client_id', table_name='orders')
    op.drop_table('orders')
    ORDER_STATUS.drop(op.get_bind(), checkfirst=True)
    op.drop_index('ix_clients_last_name', table_name='clients')
    op.drop_table('clients')
