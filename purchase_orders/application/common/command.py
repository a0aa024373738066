"""
Commands and their handlers.

A command is a frozen bag of raw input naming something the caller wants
done (CreateOrder, AddItemToOrder). Its handler turns that input into
value objects, drives the aggregate and reports the outcome as a Result.

Example:
    @dataclass(frozen=True)
    class CancelOrderCommand(Command):
        order_id: str

    class CancelOrderUseCase(CommandHandler[CancelOrderCommand, Result[Order, AppError]]):
        async def execute(self, command: CancelOrderCommand) -> Result[Order, AppError]:
            ...
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Generic, TypeVar

CommandT = TypeVar("CommandT", bound="Command")
OutcomeT = TypeVar("OutcomeT")


@dataclass(frozen=True)
class Command:
    """
    Marker base for commands.

    Fields hold primitives straight from the caller; validation happens
    when the handler builds value objects from them.
    """


class CommandHandler(ABC, Generic[CommandT, OutcomeT]):
    """
    One handler per command type.

    ``execute`` owns the whole write: build value objects, load or create
    the aggregate, mutate it, save it, then publish what it recorded.
    Failures come back inside the outcome instead of escaping as exceptions.
    """

    @abstractmethod
    async def execute(self, command: CommandT) -> OutcomeT:
        """Run the command to completion and return its outcome."""
        raise NotImplementedError
