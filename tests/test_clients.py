"""
Client endpoint tests.
"""

import pytest
from httpx import AsyncClient

from app.core.config import settings


CLIENT_PAYLOAD = {
    "first_name": "Sophie",
    "last_name": "Martin",
    "email": "sophie.martin@example.com",
    "phone": "07 87 65 43 21",
    "address": "45 Avenue des Champs, 75008 Paris",
}


@pytest.mark.asyncio
async def test_create_client(client: AsyncClient):
    """Test client creation."""
    response = await client.post("/api/v1/clients", json=CLIENT_PAYLOAD)

    assert response.status_code == 201
    data = response.json()
    assert data["id"] > 0
    assert data["full_name"] == "Sophie Martin"
    assert data["email"] == "sophie.martin@example.com"


@pytest.mark.asyncio
async def test_create_client_invalid_email(client: AsyncClient):
    """Test that a malformed email is rejected with French details."""
    response = await client.post(
        "/api/v1/clients",
        json={**CLIENT_PAYLOAD, "email": "pas-un-email"},
    )

    assert response.status_code == 422
    data = response.json()
    assert data["detail"] == "Erreur de validation des données"
    assert any(e["field"].endswith("email") for e in data["errors"])


@pytest.mark.asyncio
async def test_create_client_short_name(client: AsyncClient):
    """Test that first and last names need two characters."""
    response = await client.post(
        "/api/v1/clients",
        json={**CLIENT_PAYLOAD, "first_name": "S"},
    )

    assert response.status_code == 422


@pytest.mark.asyncio
async def test_list_clients(client: AsyncClient, marie):
    """Test listing clients with search."""
    await client.post("/api/v1/clients", json=CLIENT_PAYLOAD)

    response = await client.get("/api/v1/clients")
    assert response.status_code == 200
    data = response.json()
    assert data["total"] == 2
    assert [c["last_name"] for c in data["items"]] == ["Dubois", "Martin"]

    response = await client.get("/api/v1/clients", params={"search": "sophie"})
    data = response.json()
    assert data["total"] == 1
    assert data["items"][0]["full_name"] == "Sophie Martin"


@pytest.mark.asyncio
async def test_get_client_not_found(client: AsyncClient):
    """Test getting an unknown client."""
    response = await client.get("/api/v1/clients/999")

    assert response.status_code == 404
    assert response.json()["detail"] == "Client non trouvé"


@pytest.mark.asyncio
async def test_replace_client(client: AsyncClient, marie):
    """Test that PUT replaces every field."""
    response = await client.put(
        f"/api/v1/clients/{marie.id}",
        json={
            "first_name": "Marie",
            "last_name": "Lefèvre",
            "email": "marie.lefevre@example.com",
        },
    )

    assert response.status_code == 200
    data = response.json()
    assert data["full_name"] == "Marie Lefèvre"
    assert data["phone"] is None
    assert data["address"] is None


@pytest.mark.asyncio
async def test_client_orders(client: AsyncClient, marie, evening_dress):
    """Test listing the orders of a client."""
    response = await client.get(f"/api/v1/clients/{marie.id}/orders")

    assert response.status_code == 200
    data = response.json()
    assert len(data) == 1
    assert data[0]["title"] == "Robe de Soirée Élégance"
    assert data[0]["client_name"] == "Marie Dubois"


@pytest.mark.asyncio
async def test_delete_client_without_orders(client: AsyncClient, marie):
    """Test deleting a client that has no orders."""
    response = await client.delete(f"/api/v1/clients/{marie.id}")

    assert response.status_code == 200
    assert response.json()["success"] is True

    response = await client.get(f"/api/v1/clients/{marie.id}")
    assert response.status_code == 404


@pytest.mark.asyncio
async def test_delete_client_with_orders_restricted(client: AsyncClient, marie, evening_dress, monkeypatch):
    """Test that the default policy refuses to orphan orders."""
    monkeypatch.setattr(settings, "CLIENT_DELETE_POLICY", "restrict")

    response = await client.delete(f"/api/v1/clients/{marie.id}")

    assert response.status_code == 409
    assert "commandes existantes" in response.json()["detail"]

    response = await client.get(f"/api/v1/orders/{evening_dress.id}")
    assert response.json()["client_name"] == "Marie Dubois"


@pytest.mark.asyncio
async def test_delete_client_with_orders_detached(client: AsyncClient, marie, evening_dress, monkeypatch):
    """Test that the detach policy turns orders into guest orders."""
    monkeypatch.setattr(settings, "CLIENT_DELETE_POLICY", "detach")

    response = await client.delete(f"/api/v1/clients/{marie.id}")

    assert response.status_code == 200
    assert "1 commande(s)" in response.json()["message"]

    response = await client.get(f"/api/v1/orders/{evening_dress.id}")
    data = response.json()
    assert data["client_id"] is None
    assert data["client_name"] == "Marie Dubois"
    assert data["owner"] == {
        "kind": "guest",
        "name": "Marie Dubois",
        "contact": "06 12 34 56 78",
    }
