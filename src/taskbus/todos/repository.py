"""Todo persistence – TodoRepository port, TodoFilter and an in-memory adapter."""
from __future__ import annotations

import abc
import dataclasses
from datetime import date

from taskbus.todos.model import Todo


@dataclasses.dataclass(frozen=True)
class TodoFilter:
    """Criteria for listing a user's todos; ``None`` means "don't filter"."""

    is_completed: bool | None = None
    is_important: bool | None = None
    category_id: str | None = None
    search_term: str | None = None
    due_from: date | None = None
    due_until: date | None = None

    def matches(self, todo: Todo) -> bool:
        if self.is_completed is not None and todo.is_completed != self.is_completed:
            return False
        if self.is_important is not None and todo.is_important != self.is_important:
            return False
        if self.category_id and todo.category_id != self.category_id:
            return False
        if self.search_term:
            needle = self.search_term.strip().lower()
            haystack = f"{todo.title} {todo.description or ''}".lower()
            if needle and needle not in haystack:
                return False
        if self.due_from is not None and (todo.due_date is None or todo.due_date < self.due_from):
            return False
        if self.due_until is not None and (todo.due_date is None or todo.due_date > self.due_until):
            return False
        return True


class TodoRepository(abc.ABC):
    """Port: storage for :class:`Todo` entities."""

    @abc.abstractmethod
    async def get(self, todo_id: str) -> Todo | None: ...

    @abc.abstractmethod
    async def save(self, todo: Todo) -> Todo: ...

    @abc.abstractmethod
    async def delete(self, todo_id: str) -> bool: ...

    @abc.abstractmethod
    async def find_by_user(self, user_id: str, criteria: TodoFilter | None = None) -> list[Todo]: ...


class InMemoryTodoRepository(TodoRepository):
    """Dict-backed repository; stores and hands out copies."""

    def __init__(self, todos: list[Todo] | None = None) -> None:
        self._todos: dict[str, Todo] = {t.id: dataclasses.replace(t) for t in todos or []}

    async def get(self, todo_id: str) -> Todo | None:
        todo = self._todos.get(todo_id)
        return dataclasses.replace(todo) if todo is not None else None

    async def save(self, todo: Todo) -> Todo:
        self._todos[todo.id] = dataclasses.replace(todo)
        return dataclasses.replace(todo)

    async def delete(self, todo_id: str) -> bool:
        return self._todos.pop(todo_id, None) is not None

    async def find_by_user(self, user_id: str, criteria: TodoFilter | None = None) -> list[Todo]:
        criteria = criteria or TodoFilter()
        return [
            dataclasses.replace(t)
            for t in self._todos.values()
            if t.user_id == user_id and criteria.matches(t)
        ]

    def __len__(self) -> int:
        return len(self._todos)


__all__ = ["InMemoryTodoRepository", "TodoFilter", "TodoRepository"]
