"""
Entities and their string identifiers.

An entity keeps its identity while its state changes: two instances are
the same entity when their ids match, whatever else differs.

Example:
    @dataclass(eq=False)
    class Customer(Entity[CustomerId]):
        id: CustomerId
        name: str
"""

from abc import ABC
from dataclasses import dataclass
from typing import ClassVar, Generic, TypeVar

from .exceptions import InvalidIdentifierError
from .value_object import ValueObject

MIN_IDENTIFIER_LENGTH = 3


@dataclass(frozen=True)
class EntityId(ValueObject):
    """
    Base class for strongly-typed string identifiers.

    The raw value is trimmed and must keep at least three characters.
    Subclasses set ``label`` for error messages and may override
    ``_canonical`` to apply extra normalization (e.g. upper-casing).

    Example:
        @dataclass(frozen=True)
        class CustomerId(EntityId):
            label: ClassVar[str] = "customer"

        CustomerId("  c-42 ")  # value == "c-42"
        CustomerId("ab")       # raises InvalidIdentifierError
    """

    value: str
    label: ClassVar[str] = "identifier"

    def __post_init__(self) -> None:
        if not isinstance(self.value, str):
            raise InvalidIdentifierError(self.value, self.label)
        normalized = self.value.strip()
        if len(normalized) < MIN_IDENTIFIER_LENGTH:
            raise InvalidIdentifierError(self.value, self.label)
        self._normalize("value", self._canonical(normalized))

    def _canonical(self, value: str) -> str:
        return value

    def __str__(self) -> str:
        return self.value


IdType = TypeVar("IdType", bound=EntityId)


class Entity(ABC, Generic[IdType]):
    """
    Identity-compared domain object.

    Subclasses provide an ``id`` of type IdType. Dataclass subclasses must
    pass ``eq=False`` or the generated field-wise ``__eq__`` replaces this one.
    """

    id: IdType

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, self.__class__):
            return False
        return self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(id={self.id})"
