"""Dependency injection container."""

from dependency_injector import containers, providers

from purchase_orders.application.ordering.use_cases.add_item_to_order_use_case import (
    AddItemToOrderUseCase,
)
from purchase_orders.application.ordering.use_cases.create_order_use_case import (
    CreateOrderUseCase,
)
from purchase_orders.config import Settings
from purchase_orders.database import create_session_factory
from purchase_orders.infrastructure.ordering.messaging import InMemoryEventBus, log_domain_event
from purchase_orders.infrastructure.ordering.repositories import (
    InMemoryOrderRepository,
    SqlAlchemyOrderRepository,
)
from purchase_orders.infrastructure.ordering.services import StaticPricingService


class Container(containers.DeclarativeContainer):
    """Dependency injection container."""

    config = providers.Configuration()

    # Persistence, selected by config.order_repository ("memory" or "sql")
    session_factory = providers.Singleton(
        create_session_factory, database_url=config.database_url
    )
    order_repository = providers.Selector(
        config.order_repository,
        memory=providers.Singleton(InMemoryOrderRepository),
        sql=providers.Singleton(SqlAlchemyOrderRepository, session_factory=session_factory),
    )

    # External collaborators
    pricing_service = providers.Singleton(StaticPricingService)
    event_bus = providers.Singleton(
        InMemoryEventBus,
        catch_all_handlers=providers.List(providers.Object(log_domain_event)),
    )

    # Ordering use cases
    create_order_use_case = providers.Factory(
        CreateOrderUseCase,
        order_repository=order_repository,
        pricing_service=pricing_service,
        event_bus=event_bus,
    )
    add_item_to_order_use_case = providers.Factory(
        AddItemToOrderUseCase,
        order_repository=order_repository,
        pricing_service=pricing_service,
        event_bus=event_bus,
    )


def create_container(settings: Settings) -> Container:
    """Build a container configured from application settings."""
    container = Container()
    container.config.from_dict(
        {
            "order_repository": settings.ORDER_REPOSITORY,
            "database_url": settings.DATABASE_URL,
        }
    )
    return container
