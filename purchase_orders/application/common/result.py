"""
Outcome of a use case as a value.

A Result is a ``Success`` carrying the produced value or a ``Failure``
carrying an error, never both. Use cases return one instead of raising, so
the caller decides how each failure kind is rendered.

Example:
    result = await create_order.execute(command)
    message = match(
        result,
        lambda order: f"Created {order.id}",
        lambda error: f"{error.type}: {error.message}",
    )
"""

from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Generic, Literal, TypeGuard, TypeVar

T = TypeVar("T")
E = TypeVar("E")
U = TypeVar("U")
R = TypeVar("R")


@dataclass(frozen=True)
class Success(Generic[T]):
    value: T
    kind: Literal["success"] = field(default="success", init=False)

    @property
    def is_success(self) -> bool:
        return True

    @property
    def is_failure(self) -> bool:
        return False

    def unwrap(self) -> T:
        return self.value

    def unwrap_error(self) -> None:
        raise ValueError("Success carries no error")

    def value_or(self, default: T) -> T:
        return self.value

    def map(self, fn: Callable[[T], U]) -> "Success[U]":
        """Transform the carried value."""
        return Success(fn(self.value))

    def map_error(self, fn: Callable[[E], U]) -> "Success[T]":
        return self

    def match(self, on_success: Callable[[T], R], on_failure: Callable[[E], R]) -> R:
        return on_success(self.value)

    def __repr__(self) -> str:
        return f"Success({self.value!r})"


@dataclass(frozen=True)
class Failure(Generic[E]):
    error: E
    kind: Literal["failure"] = field(default="failure", init=False)

    @property
    def is_success(self) -> bool:
        return False

    @property
    def is_failure(self) -> bool:
        return True

    def unwrap(self) -> None:
        raise ValueError("Failure carries no value")

    def unwrap_error(self) -> E:
        return self.error

    def value_or(self, default: T) -> T:
        return default

    def map(self, fn: Callable[[T], U]) -> "Failure[E]":
        return self

    def map_error(self, fn: Callable[[E], U]) -> "Failure[U]":
        """Transform the carried error."""
        return Failure(fn(self.error))

    def match(self, on_success: Callable[[T], R], on_failure: Callable[[E], R]) -> R:
        return on_failure(self.error)

    def __repr__(self) -> str:
        return f"Failure({self.error!r})"


Result = Success[T] | Failure[E]


def ok(value: T) -> Success[T]:
    return Success(value)


def fail(error: E) -> Failure[E]:
    return Failure(error)


def is_success(result: "Result[T, E]") -> TypeGuard[Success[T]]:
    return isinstance(result, Success)


def is_failure(result: "Result[T, E]") -> TypeGuard[Failure[E]]:
    return isinstance(result, Failure)


def match(
    result: "Result[T, E]",
    on_success: Callable[[T], R],
    on_failure: Callable[[E], R],
) -> R:
    """
    Fold a Result into a single value.

    Args:
        result: Success or Failure to inspect
        on_success: Receives the value of a Success
        on_failure: Receives the error of a Failure

    Returns:
        The output of whichever callback ran
    """
    if isinstance(result, Success):
        return on_success(result.value)
    return on_failure(result.error)
