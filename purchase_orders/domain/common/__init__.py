"""
Domain common module.

Contains base classes for domain modeling:
- ValueObject: Immutable objects defined by their attributes
- Entity / EntityId: Objects with identity and their string identifiers
- AggregateRoot: Consistency boundaries with domain events
- DomainEvent: Notifications of significant domain occurrences
"""

from .aggregate_root import AggregateRoot
from .domain_event import EVENT_TYPES, DomainEvent, event_from_dict, register_event
from .entity import Entity, EntityId
from .exceptions import (
    CurrencyMismatchError,
    DomainError,
    InvalidAmountError,
    InvalidCurrencyError,
    InvalidIdentifierError,
    InvalidQuantityError,
    InvariantViolationError,
)
from .value_object import ValueObject

__all__ = [
    "EVENT_TYPES",
    "AggregateRoot",
    "CurrencyMismatchError",
    "DomainError",
    "DomainEvent",
    "Entity",
    "EntityId",
    "InvalidAmountError",
    "InvalidCurrencyError",
    "InvalidIdentifierError",
    "InvalidQuantityError",
    "InvariantViolationError",
    "ValueObject",
    "event_from_dict",
    "register_event",
]
