"""Tests for InMemoryEventBus."""

from dataclasses import dataclass
from datetime import datetime
from typing import Any

import pytest

from purchase_orders.domain.common.domain_event import DomainEvent
from purchase_orders.domain.ordering.events import ItemAddedToOrder, OrderCreated
from purchase_orders.exceptions import ApplicationError
from purchase_orders.infrastructure.ordering.messaging import InMemoryEventBus, log_domain_event


@dataclass(frozen=True)
class UntypedEvent(DomainEvent):
    order_id: str


class TestInMemoryEventBus:
    @pytest.mark.asyncio
    async def test_publish_records_events_in_order(self, event_bus: InMemoryEventBus) -> None:
        events = [OrderCreated("ORD-1", "USD"), ItemAddedToOrder("ORD-1", "MOUSE001", 1)]

        await event_bus.publish(events)

        assert event_bus.published == events

    @pytest.mark.asyncio
    async def test_empty_batch_is_a_no_op(self, event_bus: InMemoryEventBus) -> None:
        await event_bus.publish([])
        assert event_bus.published == []

    @pytest.mark.asyncio
    async def test_dispatches_to_typed_then_catch_all_handlers(
        self, event_bus: InMemoryEventBus
    ) -> None:
        calls: list[str] = []

        async def on_created(event: DomainEvent) -> None:
            calls.append(f"created:{event.type}")

        def on_any(event: DomainEvent) -> None:
            calls.append(f"any:{event.type}")

        event_bus.subscribe_all(on_any)
        event_bus.subscribe("order.created", on_created)

        await event_bus.publish(
            [OrderCreated("ORD-1", "USD"), ItemAddedToOrder("ORD-1", "MOUSE001", 1)]
        )

        assert calls == [
            "created:order.created",
            "any:order.created",
            "any:order.item_added",
        ]

    @pytest.mark.asyncio
    async def test_handler_error_propagates(self, event_bus: InMemoryEventBus) -> None:
        def explode(event: DomainEvent) -> None:
            raise RuntimeError("handler failed")

        event_bus.subscribe("order.created", explode)

        with pytest.raises(RuntimeError, match="handler failed"):
            await event_bus.publish([OrderCreated("ORD-1", "USD")])

    @pytest.mark.asyncio
    @pytest.mark.parametrize("batch", ["order.created", None, {"type": "order.created"}])
    async def test_rejects_non_sequence_batches(
        self, event_bus: InMemoryEventBus, batch: Any
    ) -> None:
        with pytest.raises(ApplicationError) as exc_info:
            await event_bus.publish(batch)
        assert exc_info.value.error.type == "infra"

    @pytest.mark.asyncio
    async def test_malformed_event_rejects_whole_batch(self, event_bus: InMemoryEventBus) -> None:
        with pytest.raises(ApplicationError):
            await event_bus.publish([OrderCreated("ORD-1", "USD"), {"type": "order.created"}])  # type: ignore[list-item]
        assert event_bus.published == []

    @pytest.mark.asyncio
    async def test_rejects_event_without_concrete_type(self, event_bus: InMemoryEventBus) -> None:
        with pytest.raises(ApplicationError):
            await event_bus.publish([UntypedEvent("ORD-1")])

    @pytest.mark.asyncio
    async def test_rejects_naive_timestamp(self, event_bus: InMemoryEventBus) -> None:
        event = OrderCreated("ORD-1", "USD", occurred_at=datetime(2024, 1, 1))

        with pytest.raises(ApplicationError):
            await event_bus.publish([event])

    @pytest.mark.asyncio
    async def test_log_listener_as_catch_all(self) -> None:
        bus = InMemoryEventBus(catch_all_handlers=[log_domain_event], keep_history=True)

        await bus.publish([OrderCreated("ORD-1", "USD")])

        assert len(bus.published) == 1

    @pytest.mark.asyncio
    async def test_history_is_off_by_default(self) -> None:
        delivered: list[DomainEvent] = []
        bus = InMemoryEventBus(catch_all_handlers=[delivered.append])

        await bus.publish([OrderCreated("ORD-1", "USD"), OrderCreated("ORD-2", "USD")])

        assert len(delivered) == 2
        assert bus.published == []
