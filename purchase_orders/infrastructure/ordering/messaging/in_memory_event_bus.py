"""In-process event bus."""

import inspect
from collections import defaultdict
from collections.abc import Awaitable, Callable, Iterable, Sequence

import structlog

from purchase_orders.application.common.errors import infra_error
from purchase_orders.domain.common.domain_event import DomainEvent
from purchase_orders.exceptions import ApplicationError

logger = structlog.get_logger(__name__)

EventHandler = Callable[[DomainEvent], Awaitable[None] | None]


class InMemoryEventBus:
    """
    Dispatches events to subscribed handlers inside the current process.

    Events are delivered one at a time in the order received, and each
    event's handlers run in subscription order: per-type handlers first,
    then catch-all handlers. With ``keep_history`` every published event is
    also kept in ``published``; otherwise the bus retains nothing.
    """

    def __init__(
        self,
        catch_all_handlers: Iterable[EventHandler] = (),
        keep_history: bool = False,
    ) -> None:
        self._handlers: dict[str, list[EventHandler]] = defaultdict(list)
        self._catch_all: list[EventHandler] = list(catch_all_handlers)
        self._keep_history = keep_history
        self.published: list[DomainEvent] = []

    def subscribe(self, event_type: str, handler: EventHandler) -> None:
        """Call ``handler`` for every event whose ``type`` equals ``event_type``."""
        self._handlers[event_type].append(handler)

    def subscribe_all(self, handler: EventHandler) -> None:
        self._catch_all.append(handler)

    async def publish(self, events: Sequence[DomainEvent]) -> None:
        """
        Validate then dispatch events.

        Nothing is dispatched when any event in the batch is malformed.

        Raises:
            ApplicationError: With an infra error for a malformed batch
        """
        self._validate(events)
        for event in events:
            if self._keep_history:
                self.published.append(event)
            for handler in [*self._handlers.get(event.type, ()), *self._catch_all]:
                outcome = handler(event)
                if inspect.isawaitable(outcome):
                    await outcome
            logger.debug("event_published", event_type=event.type, event_id=str(event.event_id))

    def _validate(self, events: Sequence[DomainEvent]) -> None:
        if isinstance(events, str | bytes) or not isinstance(events, Sequence):
            raise ApplicationError(infra_error("Events must be a sequence"))
        for event in events:
            if not isinstance(event, DomainEvent):
                raise ApplicationError(infra_error(f"Not a domain event: {event!r}"))
            if not event.type or event.type == DomainEvent.type:
                raise ApplicationError(infra_error("Every event needs a concrete type"))
            if event.occurred_at.tzinfo is None:
                raise ApplicationError(infra_error(f"Event {event.type} has a naive timestamp"))
