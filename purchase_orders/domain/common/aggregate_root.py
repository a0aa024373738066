"""
Aggregate root base.

An aggregate root guards a consistency boundary: outside code holds a
reference to the root only, and every change goes through its methods so
the invariants are checked in one place. Each accepted change is recorded
as a domain event in a buffer owned by that instance.

Example:
    @dataclass(eq=False)
    class Order(AggregateRoot[OrderId]):
        id: OrderId
        currency: str

        def cancel(self) -> None:
            self._record_event(OrderCancelled(self.id.value))
"""

from dataclasses import dataclass, field
from typing import Generic

from .domain_event import DomainEvent
from .entity import Entity, IdType


@dataclass(eq=False)
class AggregateRoot(Entity[IdType], Generic[IdType]):
    """
    Entity that records domain events.

    Publishing is not its job: the use case drains the buffer with
    ``pull_events`` once the mutation has succeeded, then saves and
    publishes.
    """

    _events: list[DomainEvent] = field(
        default_factory=list, repr=False, compare=False, kw_only=True
    )

    def _record_event(self, event: DomainEvent) -> None:
        self._events.append(event)

    def pull_events(self) -> list[DomainEvent]:
        """
        Hand over the recorded events and start a fresh buffer.

        A second call with no mutation in between returns ``[]``.
        """
        drained, self._events = self._events, []
        return drained

    @property
    def pending_events(self) -> tuple[DomainEvent, ...]:
        """Events recorded since the last ``pull_events``, left in place."""
        return tuple(self._events)
