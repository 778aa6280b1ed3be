"""Todo use cases – commands, queries, repository and bus wiring."""
from taskbus.todos.commands import (
    CreateTodoCommand,
    CreateTodoHandler,
    DeleteTodoCommand,
    DeleteTodoHandler,
    TodoCommandResult,
    UpdateTodoCommand,
    UpdateTodoHandler,
)
from taskbus.todos.model import Priority, Todo, TodoStatus
from taskbus.todos.queries import (
    GetTodoByIdHandler,
    GetTodoByIdQuery,
    GetTodoByIdResult,
    GetTodosHandler,
    GetTodosQuery,
    GetTodosResult,
    GetTodoStatsHandler,
    GetTodoStatsQuery,
    GetTodoStatsResult,
    TodoStats,
)
from taskbus.todos.repository import InMemoryTodoRepository, TodoFilter, TodoRepository
from taskbus.todos.wiring import TodoBuses, build_buses, configure_logging

__all__ = [
    "CreateTodoCommand",
    "CreateTodoHandler",
    "DeleteTodoCommand",
    "DeleteTodoHandler",
    "GetTodoByIdHandler",
    "GetTodoByIdQuery",
    "GetTodoByIdResult",
    "GetTodoStatsHandler",
    "GetTodoStatsQuery",
    "GetTodoStatsResult",
    "GetTodosHandler",
    "GetTodosQuery",
    "GetTodosResult",
    "InMemoryTodoRepository",
    "Priority",
    "Todo",
    "TodoBuses",
    "TodoCommandResult",
    "TodoFilter",
    "TodoStats",
    "TodoRepository",
    "TodoStatus",
    "UpdateTodoCommand",
    "UpdateTodoHandler",
    "build_buses",
    "configure_logging",
]
