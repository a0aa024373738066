"""Pytest configuration and fixtures."""

from collections.abc import Generator
from typing import Any

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.orm import Session, sessionmaker

from purchase_orders.config import Settings
from purchase_orders.database import create_session_factory
from purchase_orders.domain.ordering.entities.order import Order
from purchase_orders.domain.ordering.value_objects import SKU, Money, OrderId, OrderItem
from purchase_orders.infrastructure.ordering.messaging import InMemoryEventBus
from purchase_orders.infrastructure.ordering.repositories import InMemoryOrderRepository
from purchase_orders.infrastructure.ordering.services import StaticPricingService
from purchase_orders.main import create_app

# Test database URL (in-memory SQLite)
TEST_DATABASE_URL = "sqlite:///:memory:"


@pytest.fixture
def order_repository() -> InMemoryOrderRepository:
    return InMemoryOrderRepository()


@pytest.fixture
def pricing_service() -> StaticPricingService:
    return StaticPricingService()


@pytest.fixture
def event_bus() -> InMemoryEventBus:
    return InMemoryEventBus(keep_history=True)


@pytest.fixture
def session_factory() -> sessionmaker[Session]:
    """Fresh in-memory database per test."""
    return create_session_factory(TEST_DATABASE_URL)


@pytest.fixture
def client() -> Generator[TestClient, Any, None]:
    """Create a test client backed by the in-memory repository."""
    app = create_app(Settings(ENVIRONMENT="test", ORDER_REPOSITORY="memory"))
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def sql_client() -> Generator[TestClient, Any, None]:
    """Create a test client backed by an in-memory SQLite database."""
    app = create_app(
        Settings(ENVIRONMENT="test", ORDER_REPOSITORY="sql", DATABASE_URL=TEST_DATABASE_URL)
    )
    with TestClient(app) as test_client:
        yield test_client


def create_test_order(
    order_id: str = "ORD-100",
    currency: str = "USD",
    lines: list[tuple[str, str, int]] | None = None,
) -> Order:
    """Build an order with ``(sku, unit_price, quantity)`` lines and no pending events."""
    order = Order.create(OrderId(order_id), currency)
    for sku, price, quantity in lines or []:
        order.add_item(OrderItem.of(SKU(sku), Money.of(price, currency), quantity))
    order.pull_events()
    return order
