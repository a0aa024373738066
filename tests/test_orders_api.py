"""Tests for the purchase order API endpoints."""

import pytest
from fastapi import status
from fastapi.testclient import TestClient

ORDERS_URL = "/api/v1/orders"


def test_health_endpoint(client: TestClient) -> None:
    """Test health check endpoint."""
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json() == {"status": "healthy"}


class TestCreateOrder:
    """Test suite for POST /orders."""

    def test_create_empty_order(self, client: TestClient) -> None:
        response = client.post(ORDERS_URL, json={"order_id": "ORD-100", "currency": "usd"})

        assert response.status_code == status.HTTP_201_CREATED
        assert response.json() == {
            "id": "ORD-100",
            "currency": "USD",
            "items": [],
            "total": "0.00",
        }

    def test_create_with_seed_items(self, client: TestClient) -> None:
        response = client.post(
            ORDERS_URL,
            json={
                "order_id": "ORD-100",
                "currency": "USD",
                "items": [
                    {"sku": "MOUSE001", "quantity": 1},
                    {"sku": "mouse001", "quantity": 2},
                    {"sku": "KEYBOARD001", "quantity": 1},
                ],
            },
        )

        assert response.status_code == status.HTTP_201_CREATED
        data = response.json()
        assert data["total"] == "169.96"
        assert data["items"] == [
            {"product_id": "MOUSE001", "unit_price": "29.99", "quantity": 3, "subtotal": "89.97"},
            {
                "product_id": "KEYBOARD001",
                "unit_price": "79.99",
                "quantity": 1,
                "subtotal": "79.99",
            },
        ]

    def test_duplicate_order_is_conflict(self, client: TestClient) -> None:
        client.post(ORDERS_URL, json={"order_id": "ORD-100", "currency": "USD"})

        response = client.post(ORDERS_URL, json={"order_id": "ORD-100", "currency": "USD"})

        assert response.status_code == status.HTTP_409_CONFLICT
        assert response.json()["error"]["type"] == "conflict"

    def test_invalid_currency_is_validation_error(self, client: TestClient) -> None:
        response = client.post(ORDERS_URL, json={"order_id": "ORD-100", "currency": "DOLLAR"})

        assert response.status_code == 422
        error = response.json()["error"]
        assert error["type"] == "validation"
        assert error["details"]["code"] == "invalid_currency"

    def test_unknown_seed_sku_is_not_found(self, client: TestClient) -> None:
        response = client.post(
            ORDERS_URL,
            json={
                "order_id": "ORD-100",
                "currency": "USD",
                "items": [{"sku": "GHOST001", "quantity": 1}],
            },
        )

        assert response.status_code == status.HTTP_404_NOT_FOUND
        assert response.json()["error"]["type"] == "not_found"

        # Nothing was stored, so the id is still free
        retry = client.post(ORDERS_URL, json={"order_id": "ORD-100", "currency": "USD"})
        assert retry.status_code == status.HTTP_201_CREATED


class TestAddItem:
    """Test suite for POST /orders/{order_id}/items."""

    def test_add_item(self, client: TestClient) -> None:
        client.post(ORDERS_URL, json={"order_id": "ORD-100", "currency": "EUR"})

        response = client.post(
            f"{ORDERS_URL}/ORD-100/items", json={"sku": "monitor001", "quantity": 2}
        )

        assert response.status_code == status.HTTP_200_OK
        data = response.json()
        assert data["currency"] == "EUR"
        assert data["items"][0]["product_id"] == "MONITOR001"
        assert data["total"] == "539.98"

    def test_add_item_to_missing_order(self, client: TestClient) -> None:
        response = client.post(
            f"{ORDERS_URL}/ORD-404/items", json={"sku": "MOUSE001", "quantity": 1}
        )

        assert response.status_code == status.HTTP_404_NOT_FOUND
        error = response.json()["error"]
        assert error["type"] == "not_found"
        assert error["message"] == 'order "ORD-404" not found'

    def test_zero_quantity_is_validation_error(self, client: TestClient) -> None:
        client.post(ORDERS_URL, json={"order_id": "ORD-100", "currency": "USD"})

        response = client.post(
            f"{ORDERS_URL}/ORD-100/items", json={"sku": "MOUSE001", "quantity": 0}
        )

        assert response.status_code == 422
        assert response.json()["error"]["details"]["code"] == "invalid_quantity"

    def test_missing_body_field_is_rejected(self, client: TestClient) -> None:
        response = client.post(f"{ORDERS_URL}/ORD-100/items", json={"sku": "MOUSE001"})

        assert response.status_code == 422
        error = response.json()["error"]
        assert error["type"] == "validation"
        assert "body.quantity" in error["details"]

    def test_non_integer_quantity_uses_error_body(self, client: TestClient) -> None:
        response = client.post(
            f"{ORDERS_URL}/ORD-100/items", json={"sku": "MOUSE001", "quantity": "two"}
        )

        assert response.status_code == 422
        assert "detail" not in response.json()
        assert response.json()["error"]["type"] == "validation"


@pytest.mark.parametrize("fixture_name", ["client", "sql_client"])
def test_order_lifecycle(fixture_name: str, request: pytest.FixtureRequest) -> None:
    """The same flow behaves identically on both repository backends."""
    client: TestClient = request.getfixturevalue(fixture_name)

    created = client.post(
        ORDERS_URL,
        json={
            "order_id": "ORD-100",
            "currency": "USD",
            "items": [{"sku": "MOUSE001", "quantity": 1}],
        },
    )
    assert created.status_code == status.HTTP_201_CREATED

    client.post(f"{ORDERS_URL}/ORD-100/items", json={"sku": "MOUSE001", "quantity": 2})
    response = client.post(
        f"{ORDERS_URL}/ORD-100/items", json={"sku": "KEYBOARD001", "quantity": 1}
    )

    assert response.status_code == status.HTTP_200_OK
    data = response.json()
    assert [item["quantity"] for item in data["items"]] == [3, 1]
    assert data["total"] == "169.96"
