"""Todo use cases – read side."""
from __future__ import annotations

import dataclasses
from typing import Any, Callable

from taskbus.application.cqrs import Query, QueryHandler
from taskbus.application.pagination import Page, PageRequest, Sort, SortDirection
from taskbus.kernel.errors import ValidationError
from taskbus.kernel.time import Clock, SystemClock
from taskbus.todos.model import Todo, TodoStatus
from taskbus.todos.repository import TodoFilter, TodoRepository

DEFAULT_SORT = Sort("created_at", SortDirection.DESC)

_SORT_KEYS: dict[str, Callable[[Todo], Any]] = {
    "created_at": lambda t: t.created_at,
    "updated_at": lambda t: t.updated_at,
    "due_date": lambda t: t.due_date,
    "priority": lambda t: t.priority.rank,
    "title": lambda t: t.title.lower(),
}


@dataclasses.dataclass(frozen=True)
class GetTodoByIdQuery(Query):
    todo_id: str
    user_id: str


@dataclasses.dataclass(frozen=True)
class GetTodoByIdResult:
    success: bool
    todo: Todo | None = None
    error: str | None = None


@dataclasses.dataclass(frozen=True)
class GetTodosQuery(Query):
    user_id: str
    criteria: TodoFilter | None = None
    sort: Sort = DEFAULT_SORT
    page: PageRequest = dataclasses.field(default_factory=PageRequest)

    def validate(self) -> None:
        if self.sort.field not in _SORT_KEYS:
            raise ValidationError(
                f"Cannot sort todos by {self.sort.field!r}",
                errors=[{"field": "sort", "error": "unsupported"}],
            )


@dataclasses.dataclass(frozen=True)
class GetTodosResult:
    success: bool
    page: Page[Todo] | None = None
    error: str | None = None


class GetTodoByIdHandler(QueryHandler[GetTodoByIdQuery, GetTodoByIdResult]):
    def __init__(self, repository: TodoRepository) -> None:
        self._repository = repository

    async def handle(self, query: GetTodoByIdQuery) -> GetTodoByIdResult:
        if not query.todo_id or not query.todo_id.strip():
            return GetTodoByIdResult(success=False, error="todo_id is required")
        if not query.user_id or not query.user_id.strip():
            return GetTodoByIdResult(success=False, error="user_id is required")
        todo = await self._repository.get(query.todo_id)
        if todo is None:
            return GetTodoByIdResult(success=False, error="Todo not found")
        if todo.user_id != query.user_id:
            return GetTodoByIdResult(success=False, error="Todo belongs to another user")
        return GetTodoByIdResult(success=True, todo=todo)


def sort_todos(todos: list[Todo], sort: Sort) -> list[Todo]:
    """Order *todos* by *sort*; todos missing the key always go last."""
    key = _SORT_KEYS[sort.field]
    present = [t for t in todos if key(t) is not None]
    missing = [t for t in todos if key(t) is None]
    present.sort(key=key, reverse=sort.direction.descending)
    return present + missing


class GetTodosHandler(QueryHandler[GetTodosQuery, GetTodosResult]):
    def __init__(self, repository: TodoRepository) -> None:
        self._repository = repository

    async def handle(self, query: GetTodosQuery) -> GetTodosResult:
        if not query.user_id or not query.user_id.strip():
            return GetTodosResult(success=False, error="user_id is required")
        if query.sort.field not in _SORT_KEYS:
            return GetTodosResult(success=False, error=f"Cannot sort todos by {query.sort.field!r}")
        todos = await self._repository.find_by_user(query.user_id, query.criteria)
        return GetTodosResult(success=True, page=Page.of(sort_todos(todos, query.sort), query.page))


@dataclasses.dataclass(frozen=True)
class GetTodoStatsQuery(Query):
    user_id: str


@dataclasses.dataclass(frozen=True)
class TodoStats:
    total: int = 0
    pending: int = 0
    important: int = 0
    due_today: int = 0
    overdue: int = 0
    upcoming: int = 0


@dataclasses.dataclass(frozen=True)
class GetTodoStatsResult:
    success: bool
    stats: TodoStats | None = None
    error: str | None = None


class GetTodoStatsHandler(QueryHandler[GetTodoStatsQuery, GetTodoStatsResult]):
    """Summarise a user's todos relative to the clock's current date."""

    def __init__(self, repository: TodoRepository, clock: Clock | None = None) -> None:
        self._repository = repository
        self._clock = clock or SystemClock()

    async def handle(self, query: GetTodoStatsQuery) -> GetTodoStatsResult:
        if not query.user_id or not query.user_id.strip():
            return GetTodoStatsResult(success=False, error="user_id is required")
        todos = await self._repository.find_by_user(query.user_id)
        today = self._clock.now().date()
        open_todos = [t for t in todos if t.status is not TodoStatus.COMPLETED]
        stats = TodoStats(
            total=len(todos),
            pending=len(open_todos),
            important=sum(1 for t in todos if t.is_important),
            due_today=sum(1 for t in todos if t.due_date == today),
            overdue=sum(1 for t in todos if t.is_overdue(today)),
            upcoming=sum(1 for t in open_todos if t.due_date is not None and t.due_date > today),
        )
        return GetTodoStatsResult(success=True, stats=stats)


__all__ = [
    "DEFAULT_SORT",
    "GetTodoByIdHandler",
    "GetTodoByIdQuery",
    "GetTodoByIdResult",
    "GetTodoStatsHandler",
    "GetTodoStatsQuery",
    "GetTodoStatsResult",
    "GetTodosHandler",
    "GetTodosQuery",
    "GetTodosResult",
    "TodoStats",
    "sort_todos",
]
