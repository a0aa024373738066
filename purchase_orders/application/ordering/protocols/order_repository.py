"""Protocol for the Order repository."""

from typing import Protocol

from purchase_orders.domain.ordering.entities.order import Order
from purchase_orders.domain.ordering.value_objects import OrderId


class OrderRepositoryProtocol(Protocol):
    """Protocol for Order aggregate persistence."""

    async def find_by_id(self, order_id: OrderId) -> Order | None:
        """
        Find an order by ID.

        Args:
            order_id: The order ID

        Returns:
            Order aggregate if found, None otherwise
        """
        ...

    async def save(self, order: Order) -> None:
        """
        Save an order (create or replace).

        Id, currency and every line item must survive a save/find round trip.

        Args:
            order: The order aggregate to save
        """
        ...

    async def exists(self, order_id: OrderId) -> bool:
        """
        Check whether an order with this ID is stored.

        Args:
            order_id: The order ID

        Returns:
            True if the order exists
        """
        ...
