"""OrderItem value object: one line of a purchase order."""

from dataclasses import dataclass
from typing import Self

from purchase_orders.domain.common.exceptions import InvalidQuantityError
from purchase_orders.domain.common.value_object import ValueObject

from .ids import ProductIdentity
from .money import Money


@dataclass(frozen=True)
class OrderItem(ValueObject):
    """
    Line item without identity of its own.

    Business Rules:
    - Quantity is a positive integer
    - Two items are the "same line" when product and currency match,
      whatever their unit price or quantity
    - Merging keeps the unit price recorded first
    """

    product_id: ProductIdentity
    unit_price: Money
    quantity: int

    def __post_init__(self) -> None:
        if (
            isinstance(self.quantity, bool)
            or not isinstance(self.quantity, int)
            or self.quantity <= 0
        ):
            raise InvalidQuantityError(self.quantity)

    @classmethod
    def of(cls, product_id: ProductIdentity, unit_price: Money, quantity: int) -> Self:
        """
        Create a line item.

        Raises:
            InvalidQuantityError: If quantity is not a positive integer
        """
        return cls(product_id=product_id, unit_price=unit_price, quantity=quantity)

    @property
    def currency(self) -> str:
        return self.unit_price.currency

    def subtotal(self) -> Money:
        return self.unit_price.multiply(self.quantity)

    def same_product(self, other: "OrderItem") -> bool:
        return self.product_id == other.product_id and self.currency == other.currency

    def merge_quantity(self, extra: int) -> "OrderItem":
        """Return a copy holding ``quantity + extra`` at the original unit price."""
        return OrderItem.of(self.product_id, self.unit_price, self.quantity + extra)
