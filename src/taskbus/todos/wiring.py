"""Todo wiring – build the command and query buses for the todo use cases.

Usage::

    settings = BusSettings.from_env()
    configure_logging(settings)
    buses = build_buses(InMemoryTodoRepository(), settings)
    result = await buses.commands.execute(CreateTodoCommand(title="Buy milk", user_id="u1"))
"""
from __future__ import annotations

import dataclasses
from typing import Any

from taskbus.application.cqrs import (
    CommandBus,
    CommandRegistry,
    InProcessCommandBus,
    InProcessQueryBus,
    MiddlewareAwareCommandBus,
    MiddlewareAwareQueryBus,
    QueryBus,
    QueryRegistry,
)
from taskbus.application.pipeline import LoggingMiddleware, Pipeline, TimeoutMiddleware, ValidationMiddleware
from taskbus.config import BusSettings
from taskbus.kernel.time import Clock
from taskbus.observability.logging import JsonLoggerFactory, get_logger
from taskbus.todos.commands import (
    CreateTodoCommand,
    CreateTodoHandler,
    DeleteTodoCommand,
    DeleteTodoHandler,
    UpdateTodoCommand,
    UpdateTodoHandler,
)
from taskbus.todos.queries import (
    GetTodoByIdHandler,
    GetTodoByIdQuery,
    GetTodosHandler,
    GetTodosQuery,
    GetTodoStatsHandler,
    GetTodoStatsQuery,
)
from taskbus.todos.repository import TodoRepository

logger = get_logger(__name__)


@dataclasses.dataclass(frozen=True)
class TodoBuses:
    commands: CommandBus
    queries: QueryBus


def warn_on_replace(request_type: type, previous: Any, current: Any) -> None:
    logger.warning(
        "bus.handler.replaced",
        request=request_type.__name__,
        previous=type(previous).__name__,
        current=type(current).__name__,
    )


def configure_logging(settings: BusSettings) -> None:
    JsonLoggerFactory.configure(settings.log_level_number, json=settings.log_json)


def build_pipeline(settings: BusSettings) -> Pipeline:
    pipeline = Pipeline()
    if settings.logging_middleware:
        pipeline.add(LoggingMiddleware())
    if settings.validation_middleware:
        pipeline.add(ValidationMiddleware())
    if settings.timeout_seconds > 0:
        pipeline.add(TimeoutMiddleware(settings.timeout_seconds))
    return pipeline


def build_buses(
    repository: TodoRepository,
    settings: BusSettings | None = None,
    *,
    clock: Clock | None = None,
) -> TodoBuses:
    """Register every todo handler against *repository* and return the buses."""
    settings = settings or BusSettings()
    hook = warn_on_replace if settings.warn_on_handler_replace else None

    commands: CommandBus = InProcessCommandBus(CommandRegistry(on_replace=hook))
    queries: QueryBus = InProcessQueryBus(QueryRegistry(on_replace=hook))

    pipeline = build_pipeline(settings)
    if len(pipeline):
        commands = MiddlewareAwareCommandBus(commands, pipeline)
        queries = MiddlewareAwareQueryBus(queries, pipeline)

    commands.register(CreateTodoCommand, CreateTodoHandler(repository, clock))
    commands.register(UpdateTodoCommand, UpdateTodoHandler(repository, clock))
    commands.register(DeleteTodoCommand, DeleteTodoHandler(repository))
    queries.register(GetTodoByIdQuery, GetTodoByIdHandler(repository))
    queries.register(GetTodosQuery, GetTodosHandler(repository))
    queries.register(GetTodoStatsQuery, GetTodoStatsHandler(repository, clock))
    return TodoBuses(commands=commands, queries=queries)


__all__ = ["TodoBuses", "build_buses", "build_pipeline", "configure_logging", "warn_on_replace"]
