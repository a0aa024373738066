from .in_memory_event_bus import EventHandler, InMemoryEventBus
from .listeners import log_domain_event

__all__ = ["EventHandler", "InMemoryEventBus", "log_domain_event"]
