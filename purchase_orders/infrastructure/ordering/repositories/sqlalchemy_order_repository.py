"""SQLAlchemy repository for Order aggregates."""

import structlog
from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session, sessionmaker

from purchase_orders.domain.ordering.entities.order import Order
from purchase_orders.domain.ordering.value_objects import OrderId
from purchase_orders.exceptions import ConflictError
from purchase_orders.infrastructure.ordering.mappers.order_mapper import OrderMapper
from purchase_orders.models import PurchaseOrder as PurchaseOrderORM

logger = structlog.get_logger(__name__)


class SqlAlchemyOrderRepository:
    """
    Repository for Order aggregates backed by a relational database.

    Each call opens its own short-lived session from the factory.
    """

    def __init__(self, session_factory: sessionmaker[Session]) -> None:
        self.session_factory = session_factory
        self.mapper = OrderMapper()

    async def find_by_id(self, order_id: OrderId) -> Order | None:
        """
        Find an order by ID.

        Args:
            order_id: The order ID

        Returns:
            Order aggregate if found, None otherwise
        """
        with self.session_factory() as db:
            orm_model = db.get(PurchaseOrderORM, order_id.value)
            return self.mapper.to_domain(orm_model) if orm_model else None

    async def save(self, order: Order) -> None:
        """
        Save an order (create or update) with all of its lines.

        Raises:
            ConflictError: If the write violates a uniqueness constraint
        """
        with self.session_factory() as db:
            orm_model = db.get(PurchaseOrderORM, order.id.value)
            if orm_model is None:
                db.add(self.mapper.to_orm(order))
            else:
                self.mapper.to_orm(order, orm_model)
            try:
                db.commit()
            except IntegrityError as e:
                db.rollback()
                logger.warning("order_save_conflict", order_id=order.id.value, error=str(e.orig))
                raise ConflictError(
                    f'order "{order.id}" conflicts with stored data', "order", order.id.value
                ) from e

    async def exists(self, order_id: OrderId) -> bool:
        with self.session_factory() as db:
            stmt = select(PurchaseOrderORM.id).where(PurchaseOrderORM.id == order_id.value)
            return db.execute(stmt).scalar_one_or_none() is not None
