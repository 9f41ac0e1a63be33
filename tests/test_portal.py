"""
Client portal and workshop profile tests.
"""

import pytest
from httpx import AsyncClient


@pytest.mark.asyncio
async def test_portal_order_view(client: AsyncClient, evening_dress):
    """Test the customer tracking view of an order."""
    await client.post(
        f"/api/v1/orders/{evening_dress.id}/status",
        json={"status": "Prêt à livrer"},
    )

    response = await client.get(f"/api/v1/portal/orders/{evening_dress.id}")

    assert response.status_code == 200
    data = response.json()
    assert data["title"] == "Robe de Soirée Élégance"
    assert data["client_name"] == "Marie Dubois"
    assert data["progress"] == 90
    assert data["progress_label"] == "Avancement : 90%"
    assert data["status_variant"] == "destructive"
    assert data["delivery_date_display"] == "12 janvier 2024"
    assert data["images"] == ["https://picsum.photos/seed/10/600/400"]
    assert data["progress_images"] == []


@pytest.mark.asyncio
async def test_portal_hides_financial_data(client: AsyncClient, evening_dress):
    response = await client.get(f"/api/v1/portal/orders/{evening_dress.id}")

    data = response.json()
    for key in ("total_price", "payments", "balance", "amount_paid"):
        assert key not in data


@pytest.mark.asyncio
async def test_portal_unknown_order(client: AsyncClient):
    response = await client.get("/api/v1/portal/orders/999")

    assert response.status_code == 404


@pytest.mark.asyncio
async def test_workshop_profile_defaults(client: AsyncClient):
    """Test that the profile starts from the configured defaults."""
    response = await client.get("/api/v1/workshop")

    assert response.status_code == 200
    data = response.json()
    assert data["name"] == "Atelier Chic"
    assert data["email"] == "contact@atelier-chic.com"


@pytest.mark.asyncio
async def test_replace_workshop_profile(client: AsyncClient):
    response = await client.put(
        "/api/v1/workshop",
        json={
            "name": "Atelier Ndiaye",
            "email": "bonjour@atelier-ndiaye.sn",
            "phone": "33 800 00 00",
            "address": "Rue 10, Dakar",
        },
    )

    assert response.status_code == 200
    assert response.json()["name"] == "Atelier Ndiaye"

    response = await client.get("/api/v1/workshop")
    assert response.json()["address"] == "Rue 10, Dakar"
