"""Mapper for Order ORM ↔ Domain conversion."""

from purchase_orders.domain.ordering.entities.order import Order
from purchase_orders.domain.ordering.value_objects import (
    SKU,
    Money,
    OrderId,
    OrderItem,
    ProductId,
    ProductIdentity,
)
from purchase_orders.models import PurchaseOrder as PurchaseOrderORM
from purchase_orders.models import PurchaseOrderItem as PurchaseOrderItemORM

_PRODUCT_KINDS: dict[str, type[ProductIdentity]] = {"sku": SKU, "product": ProductId}


def _product_kind(product_id: ProductIdentity) -> str:
    return "sku" if isinstance(product_id, SKU) else "product"


class OrderMapper:
    """Mapper for Order ORM ↔ Domain conversion."""

    def to_domain(self, orm_model: PurchaseOrderORM) -> Order:
        """Convert ORM model to domain aggregate (no events recorded)."""
        items = [
            OrderItem.of(
                _PRODUCT_KINDS[row.product_kind](row.product_id),
                Money.of(row.unit_amount, row.currency),
                row.quantity,
            )
            for row in sorted(orm_model.items, key=lambda row: row.position)
        ]
        return Order.reconstitute(OrderId(orm_model.id), orm_model.currency, items)

    def to_orm(self, order: Order, orm_model: PurchaseOrderORM | None = None) -> PurchaseOrderORM:
        """
        Convert domain aggregate to ORM model.

        Existing rows are updated in place, matched by product, so the
        unique (order, product) constraint never sees a transient duplicate.
        """
        if orm_model is None:
            orm_model = PurchaseOrderORM(id=order.id.value, currency=order.currency, items=[])
        orm_model.currency = order.currency

        existing = {(row.product_kind, row.product_id): row for row in orm_model.items}
        rows: list[PurchaseOrderItemORM] = []
        for position, item in enumerate(order.items):
            kind = _product_kind(item.product_id)
            row = existing.pop((kind, item.product_id.value), None)
            if row is None:
                row = PurchaseOrderItemORM(product_kind=kind, product_id=item.product_id.value)
            row.position = position
            row.unit_amount = item.unit_price.amount
            row.currency = item.currency
            row.quantity = item.quantity
            rows.append(row)
        orm_model.items = rows
        return orm_model
