"""Tests for AggregateRoot event buffering."""

from purchase_orders.domain.ordering.entities.order import Order
from purchase_orders.domain.ordering.events import OrderCreated
from purchase_orders.domain.ordering.value_objects import OrderId


class TestAggregateRoot:
    def test_pull_events_drains_buffer(self) -> None:
        order = Order.create(OrderId("ORD-100"), "USD")

        first = order.pull_events()
        second = order.pull_events()

        assert len(first) == 1
        assert isinstance(first[0], OrderCreated)
        assert second == []

    def test_pending_events_does_not_drain(self) -> None:
        order = Order.create(OrderId("ORD-100"), "USD")

        assert len(order.pending_events) == 1
        assert len(order.pending_events) == 1
        assert len(order.pull_events()) == 1

    def test_buffers_are_per_instance(self) -> None:
        first = Order.create(OrderId("ORD-1"), "USD")
        second = Order.create(OrderId("ORD-2"), "USD")

        first.pull_events()
        assert len(second.pending_events) == 1