"""Database models."""

from datetime import datetime
from decimal import Decimal

from sqlalchemy import DateTime, ForeignKey, Numeric, String, UniqueConstraint, func
from sqlalchemy.orm import Mapped, mapped_column, relationship

from purchase_orders.database import Base


class PurchaseOrder(Base):
    """Purchase order header."""

    __tablename__ = "orders"

    id: Mapped[str] = mapped_column(String(100), primary_key=True)
    currency: Mapped[str] = mapped_column(String(3), nullable=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), nullable=False
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        server_default=func.now(),
        onupdate=func.now(),
        nullable=False,
    )

    items: Mapped[list["PurchaseOrderItem"]] = relationship(
        back_populates="order",
        cascade="all, delete-orphan",
        order_by="PurchaseOrderItem.position",
    )

    def __repr__(self) -> str:
        return f"<PurchaseOrder(id={self.id!r}, currency={self.currency!r})>"


class PurchaseOrderItem(Base):
    """One line of a purchase order; ``position`` keeps insertion order."""

    __tablename__ = "order_items"
    __table_args__ = (UniqueConstraint("order_id", "product_kind", "product_id"),)

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    order_id: Mapped[str] = mapped_column(
        ForeignKey("orders.id", ondelete="CASCADE"), nullable=False, index=True
    )
    position: Mapped[int] = mapped_column(nullable=False)
    product_kind: Mapped[str] = mapped_column(String(20), nullable=False)
    product_id: Mapped[str] = mapped_column(String(100), nullable=False)
    unit_amount: Mapped[Decimal] = mapped_column(Numeric(14, 2), nullable=False)
    currency: Mapped[str] = mapped_column(String(3), nullable=False)
    quantity: Mapped[int] = mapped_column(nullable=False)

    order: Mapped[PurchaseOrder] = relationship(back_populates="items")

    def __repr__(self) -> str:
        return f"<PurchaseOrderItem(order_id={self.order_id!r}, product_id={self.product_id!r})>"
