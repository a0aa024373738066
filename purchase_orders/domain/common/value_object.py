"""
Value object base.

A value object has no identity: two instances holding the same data are
interchangeable. Concrete value objects are frozen dataclasses, so equality
and hashing come from their fields, and they validate or normalize their
input in ``__post_init__``.

Example:
    @dataclass(frozen=True)
    class CountryCode(ValueObject):
        value: str

        def __post_init__(self) -> None:
            self._normalize("value", self.value.strip().upper())
"""

from decimal import Decimal


class ValueObject:
    """Mixin for frozen dataclass value objects."""

    def _normalize(self, name: str, value: object) -> None:
        """Overwrite a field of a frozen instance; only valid in ``__post_init__``."""
        object.__setattr__(self, name, value)

    def to_primitive(self) -> object:
        """
        Flatten to JSON-friendly Python values.

        A single-field object collapses to that field. Decimals are rendered
        as plain strings so cents survive serialization exactly.
        """
        flattened = {name: _primitive(value) for name, value in vars(self).items()}
        if len(flattened) == 1:
            (only,) = flattened.values()
            return only
        return flattened


def _primitive(value: object) -> object:
    if isinstance(value, ValueObject):
        return value.to_primitive()
    if isinstance(value, Decimal):
        return format(value, "f")
    return value
