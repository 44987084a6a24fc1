"""HTTP tests for the inventory, order and user endpoints."""

from decimal import Decimal

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from commerce_api.infrastructure.dependencies import (
    get_inventory_service,
    get_order_service,
    get_user_service,
)
from commerce_api.main import app


@pytest_asyncio.fixture
async def api(inventory_service, order_service, user_service):
    app.dependency_overrides[get_inventory_service] = lambda: inventory_service
    app.dependency_overrides[get_order_service] = lambda: order_service
    app.dependency_overrides[get_user_service] = lambda: user_service
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
    app.dependency_overrides.clear()


@pytest.mark.asyncio
async def test_inventory_lifecycle(api):
    response = await api.post("/api/v1/inventory", json={"item": "Cable", "sale_price": "9.99"})
    assert response.status_code == 201
    item_id = response.json()["id"]

    response = await api.post("/api/v1/inventory", json={"item": "Cable", "sale_price": "1"})
    assert response.status_code == 409

    response = await api.patch(f"/api/v1/inventory/{item_id}", json={"sale_price": "5"})
    assert response.status_code == 200
    assert response.json()["item"] == "Cable"
    assert Decimal(response.json()["sale_price"]) == Decimal("5")

    response = await api.delete(f"/api/v1/inventory/{item_id}")
    assert response.status_code == 200
    response = await api.get(f"/api/v1/inventory/{item_id}")
    assert response.status_code == 404


@pytest.mark.asyncio
async def test_order_create_and_fetch(api):
    response = await api.post(
        "/api/v1/orders",
        json={
            "client_id": "c1",
            "lines": [{"item": "Cable", "quantity": 3, "unit_price": "2.50"}],
        },
    )
    assert response.status_code == 201
    body = response.json()
    assert Decimal(body["total"]) == Decimal("7.50")
    assert body["status"] == "PENDING"

    response = await api.get(f"/api/v1/orders/{body['id']}")
    assert response.status_code == 200

    response = await api.get("/api/v1/orders/by-client/c1")
    assert [o["id"] for o in response.json()] == [body["id"]]


@pytest.mark.asyncio
async def test_order_without_lines_is_400(api):
    response = await api.post("/api/v1/orders", json={"client_id": "c1", "lines": []})
    assert response.status_code == 400


@pytest.mark.asyncio
async def test_user_registration_hides_password(api):
    response = await api.post(
        "/api/v1/users",
        json={"email": "jane@example.com", "password": "s3cret", "role": "EMPLOYEE"},
    )
    assert response.status_code == 201
    body = response.json()
    assert "password" not in body
    assert "password_hash" not in body
    assert body["role_with_prefix"] == "ROLE_EMPLOYEE"

    response = await api.get("/api/v1/users", params={"role": "EMPLOYEE"})
    assert [u["email"] for u in response.json()] == ["jane@example.com"]

    response = await api.get("/api/v1/users/by-email/jane@example.com")
    assert response.status_code == 200
