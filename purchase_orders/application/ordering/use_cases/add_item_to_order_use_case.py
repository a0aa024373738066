"""Use case for adding a line item to an existing order."""

import structlog

from purchase_orders.application.common.command import CommandHandler
from purchase_orders.application.common.errors import (
    AppError,
    map_to_app_error,
    not_found_error,
)
from purchase_orders.application.common.result import Result, fail, ok
from purchase_orders.application.ordering.protocols import (
    EventBusProtocol,
    OrderRepositoryProtocol,
    PricingServiceProtocol,
)
from purchase_orders.application.ordering.use_cases.commands import AddItemToOrderCommand
from purchase_orders.application.ordering.use_cases.create_order_use_case import ORDER_RESOURCE
from purchase_orders.domain.ordering.entities.order import Order
from purchase_orders.domain.ordering.value_objects import SKU, OrderId, OrderItem

logger = structlog.get_logger(__name__)


class AddItemToOrderUseCase(CommandHandler[AddItemToOrderCommand, Result[Order, AppError]]):
    def __init__(
        self,
        order_repository: OrderRepositoryProtocol,
        pricing_service: PricingServiceProtocol,
        event_bus: EventBusProtocol,
    ) -> None:
        self.order_repository = order_repository
        self.pricing_service = pricing_service
        self.event_bus = event_bus

    async def execute(self, command: AddItemToOrderCommand) -> Result[Order, AppError]:
        """
        Price a SKU in the order currency and add it to the order.

        The order is saved and its events published only after the
        in-memory mutation succeeded.

        Args:
            command: Order id, SKU and quantity

        Returns:
            Success with the updated order, or Failure with a validation,
            not_found or infra error
        """
        try:
            order_id = OrderId(command.order_id)
            order = await self.order_repository.find_by_id(order_id)
            if order is None:
                logger.info("order_not_found", order_id=order_id.value)
                return fail(not_found_error(ORDER_RESOURCE, order_id.value))

            currency = order.total().currency
            sku = SKU(command.sku)
            unit_price = await self.pricing_service.get_unit_price(sku, currency)
            order.add_item(OrderItem.of(sku, unit_price, command.quantity))

            events = order.pull_events()
            await self.order_repository.save(order)
            await self.event_bus.publish(events)
        except Exception as e:
            error = map_to_app_error(e, ORDER_RESOURCE, command.order_id)
            logger.warning(
                "add_item_to_order_failed",
                order_id=command.order_id,
                sku=command.sku,
                error_type=error.type,
                error=error.message,
            )
            return fail(error)

        logger.info(
            "item_added_to_order",
            order_id=order.id.value,
            sku=sku.value,
            quantity=command.quantity,
            total=str(order.total().amount),
        )
        return ok(order)
