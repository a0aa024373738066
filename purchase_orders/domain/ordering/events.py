"""Domain events recorded by the Order aggregate."""

from dataclasses import dataclass
from decimal import Decimal
from typing import ClassVar

from purchase_orders.domain.common.domain_event import DomainEvent, register_event


@register_event
@dataclass(frozen=True)
class OrderCreated(DomainEvent):
    """A new purchase order was opened."""

    type: ClassVar[str] = "order.created"

    order_id: str
    currency: str


@register_event
@dataclass(frozen=True)
class ItemAddedToOrder(DomainEvent):
    """A quantity of a product was added to an order (new line or merged)."""

    type: ClassVar[str] = "order.item_added"

    order_id: str
    product_id: str
    quantity: int


@register_event
@dataclass(frozen=True)
class OrderTotalRecalculated(DomainEvent):
    """The order total after the mutation that precedes this event."""

    type: ClassVar[str] = "order.total_recalculated"

    order_id: str
    total: Decimal
    currency: str
