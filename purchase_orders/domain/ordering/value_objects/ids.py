from dataclasses import dataclass
from typing import ClassVar

from purchase_orders.domain.common.entity import EntityId


@dataclass(frozen=True)
class OrderId(EntityId):
    """Strongly-typed purchase order identifier."""

    label: ClassVar[str] = "order"


@dataclass(frozen=True)
class ProductId(EntityId):
    """Strongly-typed catalog product identifier."""

    label: ClassVar[str] = "product"


@dataclass(frozen=True)
class SKU(EntityId):
    """
    Stock keeping unit.

    Normalized to upper case so "abc123" and "ABC123" are one identity.
    """

    label: ClassVar[str] = "sku"

    def _canonical(self, value: str) -> str:
        return value.upper()


ProductIdentity = ProductId | SKU
