from .order_schemas import (
    AddItemRequest,
    CreateOrderRequest,
    ErrorBody,
    ErrorResponse,
    OrderItemRequest,
    OrderItemResponse,
    OrderResponse,
)

__all__ = [
    "AddItemRequest",
    "CreateOrderRequest",
    "ErrorBody",
    "ErrorResponse",
    "OrderItemRequest",
    "OrderItemResponse",
    "OrderResponse",
]
