"""Use case for opening a purchase order."""

import structlog

from purchase_orders.application.common.command import CommandHandler
from purchase_orders.application.common.errors import (
    AppError,
    conflict_error,
    map_to_app_error,
)
from purchase_orders.application.common.result import Result, fail, ok
from purchase_orders.application.ordering.protocols import (
    EventBusProtocol,
    OrderRepositoryProtocol,
    PricingServiceProtocol,
)
from purchase_orders.application.ordering.use_cases.commands import CreateOrderCommand
from purchase_orders.domain.ordering.entities.order import Order
from purchase_orders.domain.ordering.value_objects import SKU, OrderId, OrderItem

logger = structlog.get_logger(__name__)

ORDER_RESOURCE = "order"


class CreateOrderUseCase(CommandHandler[CreateOrderCommand, Result[Order, AppError]]):
    def __init__(
        self,
        order_repository: OrderRepositoryProtocol,
        pricing_service: PricingServiceProtocol,
        event_bus: EventBusProtocol,
    ) -> None:
        self.order_repository = order_repository
        self.pricing_service = pricing_service
        self.event_bus = event_bus

    async def execute(self, command: CreateOrderCommand) -> Result[Order, AppError]:
        """
        Open an order, optionally seeded with priced line items.

        All or nothing: if any seed line fails (unknown price, currency
        mismatch, bad quantity) nothing is saved or published.

        Args:
            command: Order id, currency and optional seed lines

        Returns:
            Success with the new order, or Failure with a validation,
            conflict, not_found or infra error
        """
        try:
            order_id = OrderId(command.order_id)
            if await self.order_repository.exists(order_id):
                logger.info("order_already_exists", order_id=order_id.value)
                return fail(
                    conflict_error(
                        f'{ORDER_RESOURCE} "{order_id}" already exists',
                        ORDER_RESOURCE,
                        order_id.value,
                    )
                )

            order = Order.create(order_id, command.currency)
            for line in command.items:
                sku = SKU(line.sku)
                unit_price = await self.pricing_service.get_unit_price(sku, order.currency)
                order.add_item(OrderItem.of(sku, unit_price, line.quantity))

            events = order.pull_events()
            await self.order_repository.save(order)
            await self.event_bus.publish(events)
        except Exception as e:
            error = map_to_app_error(e, ORDER_RESOURCE, command.order_id)
            logger.warning(
                "create_order_failed",
                order_id=command.order_id,
                error_type=error.type,
                error=error.message,
            )
            return fail(error)

        logger.info(
            "order_created",
            order_id=order.id.value,
            currency=order.currency,
            line_count=len(order.items),
            total=str(order.total().amount),
        )
        return ok(order)
