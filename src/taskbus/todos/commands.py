"""Todo use cases – write side.

Each handler turns expected business failures (bad input, unknown todo,
wrong owner) into a ``TodoCommandResult`` with ``success=False``.
Anything else, e.g. a repository outage, propagates to the caller.
"""
from __future__ import annotations

import dataclasses
from datetime import date

from taskbus.application.cqrs import Command, CommandHandler
from taskbus.kernel.errors import DomainError, ForbiddenError, NotFoundError, ValidationError
from taskbus.kernel.time import Clock, SystemClock
from taskbus.observability.logging import get_logger
from taskbus.todos.model import Priority, Todo, TodoStatus
from taskbus.todos.repository import TodoRepository

logger = get_logger(__name__)


@dataclasses.dataclass(frozen=True)
class TodoCommandResult:
    success: bool
    todo_id: str | None = None
    error: str | None = None

    @classmethod
    def ok(cls, todo_id: str) -> "TodoCommandResult":
        return cls(success=True, todo_id=todo_id)

    @classmethod
    def fail(cls, error: str) -> "TodoCommandResult":
        return cls(success=False, error=error)


@dataclasses.dataclass(frozen=True)
class CreateTodoCommand(Command):
    title: str
    user_id: str
    description: str | None = None
    due_date: date | None = None
    priority: Priority | None = None
    category_id: str | None = None


@dataclasses.dataclass(frozen=True)
class UpdateTodoCommand(Command):
    """Change a todo; fields left as ``None`` keep their current value."""

    todo_id: str
    user_id: str
    title: str | None = None
    description: str | None = None
    due_date: date | None = None
    priority: Priority | None = None
    status: TodoStatus | None = None


@dataclasses.dataclass(frozen=True)
class DeleteTodoCommand(Command):
    todo_id: str
    user_id: str


def _require(value: str | None, field: str) -> None:
    if not value or not value.strip():
        raise ValidationError.required(field)


async def _load_owned(repository: TodoRepository, todo_id: str, user_id: str) -> Todo:
    _require(todo_id, "todo_id")
    _require(user_id, "user_id")
    todo = await repository.get(todo_id)
    if todo is None:
        raise NotFoundError("Todo", todo_id)
    if todo.user_id != user_id:
        raise ForbiddenError("Todo belongs to another user", resource=todo_id)
    return todo


class CreateTodoHandler(CommandHandler[CreateTodoCommand, TodoCommandResult]):
    def __init__(self, repository: TodoRepository, clock: Clock | None = None) -> None:
        self._repository = repository
        self._clock = clock or SystemClock()

    async def handle(self, command: CreateTodoCommand) -> TodoCommandResult:
        try:
            _require(command.user_id, "user_id")
            todo = Todo.create(
                title=command.title,
                user_id=command.user_id,
                description=command.description,
                due_date=command.due_date,
                priority=command.priority,
                category_id=command.category_id,
                now=self._clock.now(),
            )
        except DomainError as exc:
            return TodoCommandResult.fail(exc.message)
        saved = await self._repository.save(todo)
        logger.info("todo.created", todo_id=saved.id, user_id=saved.user_id)
        return TodoCommandResult.ok(saved.id)


class UpdateTodoHandler(CommandHandler[UpdateTodoCommand, TodoCommandResult]):
    def __init__(self, repository: TodoRepository, clock: Clock | None = None) -> None:
        self._repository = repository
        self._clock = clock or SystemClock()

    async def handle(self, command: UpdateTodoCommand) -> TodoCommandResult:
        try:
            todo = await _load_owned(self._repository, command.todo_id, command.user_id)
            if command.title is not None:
                todo.rename(command.title)
            if command.description is not None:
                todo.describe(command.description)
            if command.due_date is not None:
                todo.reschedule(command.due_date)
            if command.priority is not None:
                todo.reprioritize(command.priority)
            if command.status is not None:
                todo.move_to(command.status)
            todo.touch(self._clock.now())
        except (DomainError, ForbiddenError) as exc:
            return TodoCommandResult.fail(exc.message)
        saved = await self._repository.save(todo)
        logger.info("todo.updated", todo_id=saved.id, user_id=saved.user_id)
        return TodoCommandResult.ok(saved.id)


class DeleteTodoHandler(CommandHandler[DeleteTodoCommand, TodoCommandResult]):
    def __init__(self, repository: TodoRepository) -> None:
        self._repository = repository

    async def handle(self, command: DeleteTodoCommand) -> TodoCommandResult:
        try:
            todo = await _load_owned(self._repository, command.todo_id, command.user_id)
        except (DomainError, ForbiddenError) as exc:
            return TodoCommandResult.fail(exc.message)
        if not await self._repository.delete(todo.id):
            return TodoCommandResult.fail("Todo could not be deleted")
        logger.info("todo.deleted", todo_id=todo.id, user_id=todo.user_id)
        return TodoCommandResult.ok(todo.id)


__all__ = [
    "CreateTodoCommand",
    "CreateTodoHandler",
    "DeleteTodoCommand",
    "DeleteTodoHandler",
    "TodoCommandResult",
    "UpdateTodoCommand",
    "UpdateTodoHandler",
]
