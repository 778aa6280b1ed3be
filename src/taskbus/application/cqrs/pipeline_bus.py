"""CQRS – middleware-aware decorators over an existing bus.

Usage::

    commands = MiddlewareAwareCommandBus(
        InProcessCommandBus(CommandRegistry()),
        Pipeline().add(LoggingMiddleware()).add(TimeoutMiddleware(5.0)),
    )
    commands.register(CreateTodoCommand, CreateTodoHandler(repository))
    result = await commands.execute(CreateTodoCommand(title="Buy milk", user_id="u1"))

The wrapped bus stays the terminal handler of the pipeline, so its
validation and lookup rules apply unchanged.
"""
from __future__ import annotations

from typing import Any

from taskbus.application.cqrs.commands import CommandBus
from taskbus.application.cqrs.contracts import Command, CommandHandler, Query, QueryHandler
from taskbus.application.cqrs.queries import QueryBus
from taskbus.application.pipeline.pipeline import Pipeline


class MiddlewareAwareCommandBus(CommandBus):
    """Command bus that routes every ``execute`` through a middleware Pipeline."""

    def __init__(self, inner: CommandBus, pipeline: Pipeline) -> None:
        self._inner = inner
        self._pipeline = pipeline

    @property
    def inner(self) -> CommandBus:
        return self._inner

    def register(self, command_type: type[Command], handler: CommandHandler[Any, Any]) -> None:
        self._inner.register(command_type, handler)

    async def execute(self, command: Command) -> Any:
        return await self._pipeline.execute(command, self._inner.execute)


class MiddlewareAwareQueryBus(QueryBus):
    """Query bus that routes every ``execute`` through a middleware Pipeline."""

    def __init__(self, inner: QueryBus, pipeline: Pipeline) -> None:
        self._inner = inner
        self._pipeline = pipeline

    @property
    def inner(self) -> QueryBus:
        return self._inner

    def register(self, query_type: type[Query], handler: QueryHandler[Any, Any]) -> None:
        self._inner.register(query_type, handler)

    async def execute(self, query: Query) -> Any:
        return await self._pipeline.execute(query, self._inner.execute)


__all__ = ["MiddlewareAwareCommandBus", "MiddlewareAwareQueryBus"]
