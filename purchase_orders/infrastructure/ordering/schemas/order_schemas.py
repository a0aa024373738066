"""Pydantic schemas for Order API request/response validation."""

from pydantic import BaseModel, Field

from purchase_orders.application.common.errors import AppError
from purchase_orders.domain.ordering.entities.order import Order


class OrderItemRequest(BaseModel):
    """Schema for one seed line of a new order."""

    sku: str = Field(..., description="SKU of the product (case-insensitive)")
    quantity: int = Field(..., description="Positive number of units")


class CreateOrderRequest(BaseModel):
    """Schema for creating an order."""

    order_id: str = Field(..., description="Client-chosen order identifier")
    currency: str = Field(..., description="Three-letter currency code, fixed for the order")
    items: list[OrderItemRequest] = Field(default_factory=list, description="Optional seed lines")


class AddItemRequest(BaseModel):
    """Schema for adding a line to an existing order."""

    sku: str = Field(..., description="SKU of the product (case-insensitive)")
    quantity: int = Field(..., description="Positive number of units")


class OrderItemResponse(BaseModel):
    product_id: str
    unit_price: str
    quantity: int
    subtotal: str


class OrderResponse(BaseModel):
    """Schema for Order response."""

    id: str
    currency: str
    items: list[OrderItemResponse]
    total: str

    @classmethod
    def from_domain(cls, order: Order) -> "OrderResponse":
        return cls(
            id=order.id.value,
            currency=order.currency,
            items=[
                OrderItemResponse(
                    product_id=item.product_id.value,
                    unit_price=format(item.unit_price.amount, "f"),
                    quantity=item.quantity,
                    subtotal=format(item.subtotal().amount, "f"),
                )
                for item in order.items
            ],
            total=format(order.total().amount, "f"),
        )


class ErrorBody(BaseModel):
    type: str
    message: str
    details: dict[str, str] | None = None


class ErrorResponse(BaseModel):
    """Schema for a failed use case."""

    error: ErrorBody

    @classmethod
    def from_app_error(cls, error: AppError) -> "ErrorResponse":
        return cls(
            error=ErrorBody(
                type=error.type,
                message=error.message,
                details=getattr(error, "details", None),
            )
        )
