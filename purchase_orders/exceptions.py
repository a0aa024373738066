"""Exceptions raised by collaborators (repositories, pricing, event bus)."""

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from purchase_orders.application.common.errors import AppError


class PurchaseOrdersError(Exception):
    """Base exception for all non-domain purchase order errors."""

    code = "error"

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(self.message)


class NotFoundError(PurchaseOrdersError):
    """Resource not found error."""

    code = "not_found"

    def __init__(self, resource: str, id: str | None = None, *, message: str | None = None) -> None:
        self.resource = resource
        self.id = id
        if message:
            super().__init__(message)
        elif id is not None:
            super().__init__(f'{resource} "{id}" not found')
        else:
            super().__init__(f"{resource} not found")


class PriceNotFoundError(NotFoundError):
    """No catalog price exists for a SKU in the requested currency."""

    def __init__(self, sku: str, currency: str) -> None:
        self.sku = sku
        self.currency = currency
        super().__init__(
            "price",
            f"{sku}/{currency}",
            message=f"Price not found for SKU {sku} in {currency}",
        )


class ConflictError(PurchaseOrdersError):
    """A state precondition was violated, e.g. an order id is already taken."""

    code = "conflict"

    def __init__(self, message: str, resource: str | None = None, id: str | None = None) -> None:
        self.resource = resource
        self.id = id
        super().__init__(message)


class ApplicationError(PurchaseOrdersError):
    """
    Carries an already-classified ``AppError`` through a raise.

    Use cases unwrap it unchanged instead of re-classifying it.
    """

    def __init__(self, error: "AppError") -> None:
        self.error = error
        super().__init__(error.message)
