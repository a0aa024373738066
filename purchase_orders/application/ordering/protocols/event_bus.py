from collections.abc import Sequence
from typing import Protocol

from purchase_orders.domain.common.domain_event import DomainEvent


class EventBusProtocol(Protocol):
    async def publish(self, events: Sequence[DomainEvent]) -> None:
        """
        Publish events in the order given.

        Raises:
            ApplicationError: With an infra error when the transport rejects them
        """
        ...
