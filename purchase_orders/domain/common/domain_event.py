"""
Domain events: immutable facts an aggregate records about itself.

Each concrete event declares a ``type`` discriminant and registers itself
in ``EVENT_TYPES`` so serialized events can be rebuilt from that tag.

Example:
    @register_event
    @dataclass(frozen=True)
    class OrderShipped(DomainEvent):
        type: ClassVar[str] = "order.shipped"
        order_id: str
"""

from dataclasses import dataclass, field, fields
from datetime import UTC, datetime
from decimal import Decimal
from typing import Any, ClassVar, TypeVar
from uuid import UUID, uuid4

E = TypeVar("E", bound="DomainEvent")

EVENT_TYPES: dict[str, type["DomainEvent"]] = {}


@dataclass(frozen=True)
class DomainEvent:
    """
    Past-tense record of a change, stamped with an id and a UTC time.

    Payload fields hold primitives so an event can be logged or
    serialized without touching the domain model. ``event_id`` and
    ``occurred_at`` are keyword-only, leaving positional slots for the
    payload.
    """

    type: ClassVar[str] = "domain_event"

    event_id: UUID = field(default_factory=uuid4, kw_only=True)
    occurred_at: datetime = field(default_factory=lambda: datetime.now(UTC), kw_only=True)

    def to_dict(self) -> dict[str, object]:
        """Flatten to primitives, with the ``type`` tag included."""
        result: dict[str, object] = {}
        for key, value in self.__dict__.items():
            if isinstance(value, datetime):
                result[key] = value.isoformat()
            elif isinstance(value, UUID):
                result[key] = str(value)
            elif isinstance(value, Decimal):
                result[key] = format(value, "f")
            elif hasattr(value, "to_primitive"):
                result[key] = value.to_primitive()
            else:
                result[key] = value
        result["type"] = self.type
        return result


def register_event(cls: type[E]) -> type[E]:
    """Class decorator that maps the event's ``type`` tag to the class."""
    if cls.type in EVENT_TYPES:
        raise ValueError(f"Event type {cls.type!r} is already registered")
    EVENT_TYPES[cls.type] = cls
    return cls


def event_from_dict(data: dict[str, Any]) -> DomainEvent:
    """
    Rebuild an event from the output of ``DomainEvent.to_dict``.

    Raises:
        KeyError: If the ``type`` tag is unknown
    """
    cls = EVENT_TYPES[data["type"]]
    kwargs: dict[str, Any] = {}
    for f in fields(cls):
        if f.name not in data:
            continue
        value = data[f.name]
        if f.name == "event_id":
            value = UUID(value)
        elif f.name == "occurred_at":
            value = datetime.fromisoformat(value)
        elif f.type in (Decimal, "Decimal"):
            value = Decimal(value)
        kwargs[f.name] = value
    return cls(**kwargs)
