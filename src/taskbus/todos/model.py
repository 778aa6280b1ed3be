"""Todo domain model – Todo entity, Priority and TodoStatus."""
from __future__ import annotations

import dataclasses
import uuid
from datetime import date, datetime
from enum import Enum

from taskbus.kernel.errors import InvalidTransitionError, ValidationError
from taskbus.kernel.time import utc_now

MAX_TITLE_LENGTH = 200


class Priority(str, Enum):
    LOW = "LOW"
    NORMAL = "NORMAL"
    HIGH = "HIGH"
    URGENT = "URGENT"

    @property
    def rank(self) -> int:
        return _PRIORITY_RANK[self]


_PRIORITY_RANK = {Priority.LOW: 1, Priority.NORMAL: 2, Priority.HIGH: 3, Priority.URGENT: 4}


class TodoStatus(str, Enum):
    PENDING = "PENDING"
    IN_PROGRESS = "IN_PROGRESS"
    COMPLETED = "COMPLETED"
    CANCELLED = "CANCELLED"

    @property
    def is_finished(self) -> bool:
        return self in (TodoStatus.COMPLETED, TodoStatus.CANCELLED)


def new_todo_id() -> str:
    return str(uuid.uuid4())


def _clean_title(title: str) -> str:
    cleaned = (title or "").strip()
    if not cleaned:
        raise ValidationError("Title is required", errors=[{"field": "title", "error": "required"}])
    if len(cleaned) > MAX_TITLE_LENGTH:
        raise ValidationError(
            f"Title must be at most {MAX_TITLE_LENGTH} characters",
            errors=[{"field": "title", "error": "too_long"}],
        )
    return cleaned


@dataclasses.dataclass
class Todo:
    """A single task owned by one user."""

    id: str
    title: str
    user_id: str
    description: str | None = None
    due_date: date | None = None
    priority: Priority = Priority.NORMAL
    status: TodoStatus = TodoStatus.PENDING
    category_id: str | None = None
    created_at: datetime = dataclasses.field(default_factory=utc_now)
    updated_at: datetime = dataclasses.field(default_factory=utc_now)

    @classmethod
    def create(
        cls,
        *,
        title: str,
        user_id: str,
        description: str | None = None,
        due_date: date | None = None,
        priority: Priority | None = None,
        category_id: str | None = None,
        now: datetime | None = None,
    ) -> "Todo":
        now = now or utc_now()
        return cls(
            id=new_todo_id(),
            title=_clean_title(title),
            user_id=user_id,
            description=description.strip() if description else None,
            due_date=due_date,
            priority=priority or Priority.NORMAL,
            category_id=category_id,
            created_at=now,
            updated_at=now,
        )

    @property
    def is_completed(self) -> bool:
        return self.status is TodoStatus.COMPLETED

    @property
    def is_important(self) -> bool:
        return self.priority in (Priority.HIGH, Priority.URGENT)

    def rename(self, title: str) -> None:
        self.title = _clean_title(title)

    def describe(self, description: str | None) -> None:
        self.description = description.strip() if description else None

    def reschedule(self, due_date: date | None) -> None:
        self.due_date = due_date

    def reprioritize(self, priority: Priority) -> None:
        self.priority = priority

    def move_to(self, status: TodoStatus) -> None:
        # finished todos may only be reopened
        if self.status.is_finished and status is not self.status and status is not TodoStatus.PENDING:
            raise InvalidTransitionError(self.status.value, status.value)
        self.status = status

    def is_overdue(self, today: date) -> bool:
        return self.due_date is not None and self.due_date < today and not self.status.is_finished

    def touch(self, at: datetime | None = None) -> None:
        self.updated_at = at or utc_now()


__all__ = ["MAX_TITLE_LENGTH", "Priority", "Todo", "TodoStatus", "new_todo_id"]
