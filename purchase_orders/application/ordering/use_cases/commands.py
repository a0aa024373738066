"""Commands accepted by the ordering use cases."""

from dataclasses import dataclass, field

from purchase_orders.application.common.command import Command


@dataclass(frozen=True)
class CreateOrderItem:
    """A seed line of a new order: the price is looked up, not supplied."""

    sku: str
    quantity: int


@dataclass(frozen=True)
class CreateOrderCommand(Command):
    order_id: str
    currency: str
    items: tuple[CreateOrderItem, ...] = field(default_factory=tuple)


@dataclass(frozen=True)
class AddItemToOrderCommand(Command):
    order_id: str
    sku: str
    quantity: int
