"""Value objects of the ordering module."""

from .ids import SKU, OrderId, ProductId, ProductIdentity
from .money import Money, normalize_currency
from .order_item import OrderItem

__all__ = [
    "SKU",
    "Money",
    "OrderId",
    "OrderItem",
    "ProductId",
    "ProductIdentity",
    "normalize_currency",
]
