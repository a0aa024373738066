"""
FastAPI application factory.

Run with: ``uvicorn purchase_orders.main:create_app --factory``
"""

from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError

from purchase_orders.config import Settings, configure_logging, get_settings
from purchase_orders.infrastructure.container import create_container
from purchase_orders.infrastructure.ordering.routers import (
    request_validation_error_handler,
    router as orders_router,
)


def create_app(settings: Settings | None = None) -> FastAPI:
    """
    Build the HTTP application.

    Args:
        settings: Settings to use; defaults to the cached environment settings

    Returns:
        Configured FastAPI app with its own dependency container
    """
    settings = settings or get_settings()
    configure_logging(settings.ENVIRONMENT, settings.LOG_LEVEL)

    app = FastAPI(title=settings.PROJECT_NAME, version=settings.VERSION)
    app.state.container = create_container(settings)
    app.add_exception_handler(
        RequestValidationError,
        request_validation_error_handler,  # type: ignore[arg-type]
    )
    app.include_router(orders_router, prefix=settings.API_PREFIX)

    @app.get("/health")
    async def health() -> dict[str, str]:
        return {"status": "healthy"}

    return app
