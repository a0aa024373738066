"""
Order aggregate root.
"""

from collections.abc import Iterable
from dataclasses import dataclass, field

from purchase_orders.domain.common.aggregate_root import AggregateRoot
from purchase_orders.domain.common.exceptions import (
    CurrencyMismatchError,
    InvariantViolationError,
)
from purchase_orders.domain.ordering.events import (
    ItemAddedToOrder,
    OrderCreated,
    OrderTotalRecalculated,
)
from purchase_orders.domain.ordering.value_objects import (
    Money,
    OrderId,
    OrderItem,
    normalize_currency,
)


@dataclass(eq=False)
class Order(AggregateRoot[OrderId]):
    """
    Purchase order.

    Business Rules:
    - The currency is fixed at creation
    - Every line item is priced in the order currency
    - At most one line per product; re-adding a product merges quantity
    - The total is always the sum of line subtotals, folded on demand

    There is no status field: an order only moves from "created" to
    "has N items" through successive ``add_item`` calls.
    """

    id: OrderId
    currency: str
    _items: list[OrderItem] = field(default_factory=list, init=False, repr=False)

    def __post_init__(self) -> None:
        self.currency = normalize_currency(self.currency)

    @classmethod
    def create(cls, id: OrderId, currency: str) -> "Order":
        """
        Open a new, empty order.

        Records ``OrderCreated``.
        """
        order = cls(id=id, currency=currency)
        order._record_event(OrderCreated(order.id.value, order.currency))
        return order

    @classmethod
    def reconstitute(cls, id: OrderId, currency: str, items: Iterable[OrderItem]) -> "Order":
        """
        Rebuild an order from persistence without recording events.

        Raises:
            InvariantViolationError: If the stored lines break the order invariants
        """
        order = cls(id=id, currency=currency)
        for item in items:
            if item.currency != order.currency:
                raise InvariantViolationError(
                    "Order", f"line {item.product_id} is priced in {item.currency}"
                )
            if order._find_line(item) is not None:
                raise InvariantViolationError(
                    "Order", f"duplicate line for {item.product_id}"
                )
            order._items.append(item)
        return order

    @property
    def items(self) -> tuple[OrderItem, ...]:
        """Snapshot of the line items in insertion order."""
        return tuple(self._items)

    def add_item(self, item: OrderItem) -> None:
        """
        Add a line item, merging it into an existing line for the same product.

        Records ``ItemAddedToOrder`` followed by ``OrderTotalRecalculated``
        carrying the post-mutation total.

        Raises:
            CurrencyMismatchError: If the item is not priced in the order currency
        """
        if item.currency != self.currency:
            raise CurrencyMismatchError(self.currency, item.currency)

        index = self._find_line(item)
        if index is None:
            self._items.append(item)
        else:
            self._items[index] = self._items[index].merge_quantity(item.quantity)

        self._record_event(ItemAddedToOrder(self.id.value, item.product_id.value, item.quantity))
        total = self.total()
        self._record_event(OrderTotalRecalculated(self.id.value, total.amount, total.currency))

    def total(self) -> Money:
        total = Money.zero(self.currency)
        for item in self._items:
            total = total.add(item.subtotal())
        return total

    def _find_line(self, item: OrderItem) -> int | None:
        for index, current in enumerate(self._items):
            if current.same_product(item):
                return index
        return None
