"""Tests for domain event serialization and the event registry."""

from dataclasses import dataclass
from datetime import UTC, datetime
from decimal import Decimal
from typing import ClassVar
from uuid import UUID

import pytest

from purchase_orders.domain.common.domain_event import (
    EVENT_TYPES,
    DomainEvent,
    event_from_dict,
    register_event,
)
from purchase_orders.domain.ordering.events import (
    ItemAddedToOrder,
    OrderCreated,
    OrderTotalRecalculated,
)


class TestDomainEvent:
    def test_events_get_identity_and_utc_timestamp(self) -> None:
        event = OrderCreated("ORD-100", "USD")
        assert isinstance(event.event_id, UUID)
        assert event.occurred_at.tzinfo is not None
        assert OrderCreated("ORD-100", "USD").event_id != event.event_id

    def test_events_are_frozen(self) -> None:
        event = OrderCreated("ORD-100", "USD")
        with pytest.raises(AttributeError):
            event.currency = "EUR"  # type: ignore[misc]

    def test_to_dict_includes_type_tag(self) -> None:
        occurred_at = datetime(2024, 1, 2, 3, 4, 5, tzinfo=UTC)
        event = OrderTotalRecalculated(
            "ORD-100",
            Decimal("169.96"),
            "USD",
            event_id=UUID("12345678-1234-5678-1234-567812345678"),
            occurred_at=occurred_at,
        )

        assert event.to_dict() == {
            "type": "order.total_recalculated",
            "event_id": "12345678-1234-5678-1234-567812345678",
            "occurred_at": "2024-01-02T03:04:05+00:00",
            "order_id": "ORD-100",
            "total": "169.96",
            "currency": "USD",
        }

    def test_event_from_dict_rebuilds_equal_event(self) -> None:
        event = ItemAddedToOrder("ORD-100", "MOUSE001", 2)
        restored = event_from_dict(event.to_dict())
        assert isinstance(restored, ItemAddedToOrder)
        assert restored == event

    def test_event_from_dict_parses_decimal_fields(self) -> None:
        event = OrderTotalRecalculated("ORD-100", Decimal("0.00"), "USD")
        restored = event_from_dict(event.to_dict())
        assert isinstance(restored, OrderTotalRecalculated)
        assert restored.total == Decimal("0.00")

    def test_event_from_dict_unknown_type(self) -> None:
        with pytest.raises(KeyError):
            event_from_dict({"type": "order.shipped"})

    def test_registry_contains_order_events(self) -> None:
        assert EVENT_TYPES["order.created"] is OrderCreated
        assert EVENT_TYPES["order.item_added"] is ItemAddedToOrder
        assert EVENT_TYPES["order.total_recalculated"] is OrderTotalRecalculated

    def test_register_event_rejects_duplicate_tag(self) -> None:
        @dataclass(frozen=True)
        class DuplicateCreated(DomainEvent):
            type: ClassVar[str] = "order.created"

        with pytest.raises(ValueError, match="already registered"):
            register_event(DuplicateCreated)
