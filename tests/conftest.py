"""
Pytest configuration and fixtures.
"""

import os

# Point the application at SQLite before it is imported.
os.environ["ENVIRONMENT"] = "testing"
os.environ["DATABASE_URL"] = "sqlite+aiosqlite:///:memory:"

from datetime import date
from decimal import Decimal
from typing import AsyncGenerator
import pytest
from httpx import AsyncClient, ASGITransport
from sqlalchemy.ext.asyncio import AsyncSession, create_async_engine, async_sessionmaker
from sqlalchemy.pool import StaticPool

import app.models  # noqa: F401
from app.core.config import settings
from app.core.database import Base, get_db
from app.main import app
from app.models.client import Client
from app.models.order import Order, OrderStatus
from app.models.pattern import Pattern
from app.models.payment import Payment


# In-memory SQLite shared by every session of a test
TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"


@pytest.fixture
async def test_engine():
    """Create a fresh test database for each test."""
    engine = create_async_engine(
        TEST_DATABASE_URL,
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
        echo=False,
    )

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield engine

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)

    await engine.dispose()


@pytest.fixture
async def db_session(test_engine) -> AsyncGenerator[AsyncSession, None]:
    """Create test database session."""
    async_session = async_sessionmaker(
        test_engine,
        class_=AsyncSession,
        expire_on_commit=False,
    )

    async with async_session() as session:
        yield session
        await session.rollback()


@pytest.fixture
async def client(db_session: AsyncSession) -> AsyncGenerator[AsyncClient, None]:
    """Create test client with database session override."""

    async def override_get_db():
        yield db_session

    app.dependency_overrides[get_db] = override_get_db

    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test"
    ) as ac:
        yield ac

    app.dependency_overrides.clear()


@pytest.fixture
async def marie(db_session: AsyncSession) -> Client:
    """A registered client."""
    customer = Client(
        first_name="Marie",
        last_name="Dubois",
        phone="06 12 34 56 78",
        email="marie.dubois@example.com",
        address="123 Rue de la Couture, 75001 Paris",
    )
    db_session.add(customer)
    await db_session.flush()
    await db_session.refresh(customer)
    return customer


@pytest.fixture
async def waist_pattern(db_session: AsyncSession) -> Pattern:
    """A pattern holding a single waist measurement."""
    pattern = Pattern(
        name="Taille fine",
        measurements={"unit": "cm", "standard": {"tourDeTaille": "70"}, "custom": []},
    )
    db_session.add(pattern)
    await db_session.flush()
    await db_session.refresh(pattern)
    return pattern


@pytest.fixture
async def evening_dress(db_session: AsyncSession, marie: Client) -> Order:
    """An order of Marie, in progress, partly paid."""
    order = Order(
        client_id=marie.id,
        title="Robe de Soirée Élégance",
        description="Robe longue en satin de soie bleu nuit.",
        images=["https://picsum.photos/seed/10/600/400"],
        progress_images=[],
        delivery_date=date(2024, 1, 12),
        total_price=Decimal("450"),
        status=OrderStatus.EN_COURS,
        measurements={
            "unit": "cm",
            "standard": {"tourDePoitrine": "90"},
            "custom": [{"name": "x", "value": "1"}],
        },
        payments=[
            Payment(amount=Decimal("200"), payment_date=date(2024, 1, 2)),
            Payment(amount=Decimal("100"), payment_date=date(2024, 1, 5)),
        ],
    )
    db_session.add(order)
    await db_session.flush()
    await db_session.refresh(order)
    return order


@pytest.fixture
def pdf_dir(tmp_path, monkeypatch):
    """Write generated PDFs to a temporary directory."""
    monkeypatch.setattr(settings, "PDF_STORAGE_PATH", str(tmp_path))
    return tmp_path
