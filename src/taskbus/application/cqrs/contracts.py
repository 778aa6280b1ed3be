"""Application CQRS – Request, Command, Query and the handler contracts.

Requests are frozen dataclasses.  Every request carries a keyword-only
``timestamp`` (UTC, defaults to now), so subclasses are free to declare
positional fields of their own::

    @dataclasses.dataclass(frozen=True)
    class CreateTodoCommand(Command):
        title: str
        user_id: str

Buses route a request by its exact class, never by a string tag.
"""
from __future__ import annotations

import abc
import dataclasses
from datetime import datetime
from typing import Generic, TypeVar

from taskbus.kernel.time import utc_now

C = TypeVar("C", bound="Command")
Q = TypeVar("Q", bound="Query")
R = TypeVar("R")


@dataclasses.dataclass(frozen=True)
class Request:
    """Immutable unit of work handed to a bus."""

    timestamp: datetime = dataclasses.field(default_factory=utc_now, kw_only=True)


@dataclasses.dataclass(frozen=True)
class Command(Request):
    """Marker base for commands (intent to change state)."""


@dataclasses.dataclass(frozen=True)
class Query(Request):
    """Marker base for queries (read-only intent)."""


class CommandHandler(abc.ABC, Generic[C, R]):
    """Handle a single command type."""

    @abc.abstractmethod
    async def handle(self, command: C) -> R: ...


class QueryHandler(abc.ABC, Generic[Q, R]):
    """Handle a single query type and return a result."""

    @abc.abstractmethod
    async def handle(self, query: Q) -> R: ...


__all__ = ["Command", "CommandHandler", "Query", "QueryHandler", "Request"]
