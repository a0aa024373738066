"""API routes for purchase orders."""

from collections.abc import Callable

import structlog
from fastapi import APIRouter, Depends, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from purchase_orders.application.common.errors import AppError, validation_error
from purchase_orders.application.common.result import match
from purchase_orders.application.ordering.use_cases import (
    AddItemToOrderCommand,
    AddItemToOrderUseCase,
    CreateOrderCommand,
    CreateOrderItem,
    CreateOrderUseCase,
)
from purchase_orders.domain.ordering.entities.order import Order
from purchase_orders.infrastructure.common.di import inject_use_case
from purchase_orders.infrastructure.ordering.schemas import (
    AddItemRequest,
    CreateOrderRequest,
    ErrorResponse,
    OrderResponse,
)

logger = structlog.get_logger(__name__)

router = APIRouter(prefix="/orders", tags=["orders"])

ERROR_STATUS_CODES: dict[str, int] = {
    "validation": 422,
    "not_found": status.HTTP_404_NOT_FOUND,
    "conflict": status.HTTP_409_CONFLICT,
    "infra": status.HTTP_503_SERVICE_UNAVAILABLE,
}

_ERROR_RESPONSES: dict[int | str, dict[str, object]] = {
    code: {"model": ErrorResponse} for code in ERROR_STATUS_CODES.values()
}


def error_response(error: AppError) -> JSONResponse:
    """Render an application error with the status code of its kind."""
    return JSONResponse(
        status_code=ERROR_STATUS_CODES[error.type],
        content=ErrorResponse.from_app_error(error).model_dump(),
    )


def _order_response(status_code: int) -> Callable[[Order], JSONResponse]:
    def render(order: Order) -> JSONResponse:
        return JSONResponse(
            status_code=status_code,
            content=OrderResponse.from_domain(order).model_dump(),
        )

    return render


@router.post(
    "",
    response_model=OrderResponse,
    status_code=status.HTTP_201_CREATED,
    responses=_ERROR_RESPONSES,
)
async def create_order(
    request: CreateOrderRequest,
    use_case: CreateOrderUseCase = Depends(inject_use_case("create_order_use_case")),
) -> JSONResponse:
    """
    Open a purchase order, optionally with seed lines priced from the catalog.

    Args:
        request: Order id, currency and optional seed lines
        use_case: CreateOrderUseCase injected via dependency container

    Returns:
        The created order (201) or an error body with 422/404/409/503
    """
    command = CreateOrderCommand(
        order_id=request.order_id,
        currency=request.currency,
        items=tuple(CreateOrderItem(sku=item.sku, quantity=item.quantity) for item in request.items),
    )
    result = await use_case.execute(command)
    return match(result, _order_response(status.HTTP_201_CREATED), error_response)


@router.post(
    "/{order_id}/items",
    response_model=OrderResponse,
    status_code=status.HTTP_200_OK,
    responses=_ERROR_RESPONSES,
)
async def add_item_to_order(
    order_id: str,
    request: AddItemRequest,
    use_case: AddItemToOrderUseCase = Depends(inject_use_case("add_item_to_order_use_case")),
) -> JSONResponse:
    """
    Add a catalog-priced line to an existing order.

    Args:
        order_id: ID of the order to extend
        request: SKU and quantity
        use_case: AddItemToOrderUseCase injected via dependency container

    Returns:
        The updated order (200) or an error body with 422/404/503
    """
    command = AddItemToOrderCommand(order_id=order_id, sku=request.sku, quantity=request.quantity)
    result = await use_case.execute(command)
    return match(result, _order_response(status.HTTP_200_OK), error_response)


async def request_validation_error_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Render malformed request bodies in the same shape as use case failures."""
    details = {
        ".".join(str(part) for part in error["loc"]): error["msg"] for error in exc.errors()
    }
    logger.info("request_rejected", path=request.url.path, details=details)
    return error_response(validation_error("Request validation failed", details))
