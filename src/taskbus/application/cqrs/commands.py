"""Application CQRS – CommandBus port and InProcessCommandBus."""
from __future__ import annotations

import abc
from typing import Any

from taskbus.application.cqrs.bus import DispatchBus
from taskbus.application.cqrs.contracts import Command, CommandHandler
from taskbus.application.cqrs.registry import CommandRegistry


class CommandBus(abc.ABC):
    """Dispatches commands to their registered handlers."""

    @abc.abstractmethod
    def register(self, command_type: type[Command], handler: CommandHandler[Any, Any]) -> None: ...

    @abc.abstractmethod
    async def execute(self, command: Command) -> Any: ...


class InProcessCommandBus(DispatchBus[Command, CommandHandler[Any, Any]], CommandBus):
    """In-process command bus over an injected :class:`CommandRegistry`.

    Usage::

        bus = InProcessCommandBus(CommandRegistry())
        bus.register(CreateTodoCommand, CreateTodoHandler(repository))
        result = await bus.execute(CreateTodoCommand(title="Buy milk", user_id="u1"))
    """

    kind = "Command"

    def __init__(self, registry: CommandRegistry) -> None:
        super().__init__(registry)


__all__ = ["CommandBus", "InProcessCommandBus"]
