"""In-memory repository for Order aggregates."""

import copy

from purchase_orders.domain.ordering.entities.order import Order
from purchase_orders.domain.ordering.value_objects import OrderId


class InMemoryOrderRepository:
    """
    Dictionary-backed repository keyed by order id.

    Stores and returns copies so callers never share aggregate state
    with the store.
    """

    def __init__(self) -> None:
        self._orders: dict[str, Order] = {}

    async def find_by_id(self, order_id: OrderId) -> Order | None:
        order = self._orders.get(order_id.value)
        return copy.deepcopy(order) if order is not None else None

    async def save(self, order: Order) -> None:
        self._orders[order.id.value] = copy.deepcopy(order)

    async def exists(self, order_id: OrderId) -> bool:
        return order_id.value in self._orders
