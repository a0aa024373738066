"""Event listeners wired onto the bus by the container."""

import structlog

from purchase_orders.domain.common.domain_event import DomainEvent

logger = structlog.get_logger(__name__)


def log_domain_event(event: DomainEvent) -> None:
    """Write every published event to the structured log."""
    payload = event.to_dict()
    event_type = payload.pop("type")
    logger.info("domain_event", event_type=event_type, **payload)
