"""Ports the ordering use cases depend on."""

from .event_bus import EventBusProtocol
from .order_repository import OrderRepositoryProtocol
from .pricing_service import PricingServiceProtocol

__all__ = ["EventBusProtocol", "OrderRepositoryProtocol", "PricingServiceProtocol"]
