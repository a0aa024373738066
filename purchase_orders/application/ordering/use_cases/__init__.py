from .add_item_to_order_use_case import AddItemToOrderUseCase
from .commands import AddItemToOrderCommand, CreateOrderCommand, CreateOrderItem
from .create_order_use_case import CreateOrderUseCase

__all__ = [
    "AddItemToOrderCommand",
    "AddItemToOrderUseCase",
    "CreateOrderCommand",
    "CreateOrderItem",
    "CreateOrderUseCase",
]
