"""Application CQRS – handler registries.

A registry is plain storage: request type -> currently active handler.
It performs no validation; rejecting ``None`` handlers is the bus's job.
Registering a second handler for a type silently replaces the first unless
an ``on_replace`` hook was supplied.
"""
from __future__ import annotations

from typing import Any, Callable, Generic, TypeVar

from taskbus.application.cqrs.contracts import Command, CommandHandler, Query, QueryHandler

TRequest = TypeVar("TRequest")
THandler = TypeVar("THandler")

ReplaceHook = Callable[[type, Any, Any], None]


class HandlerRegistry(Generic[TRequest, THandler]):
    """Mapping of request type to exactly one handler.

    Parameters
    ----------
    on_replace:
        Optional callback invoked as ``on_replace(request_type, previous,
        current)`` after an existing registration has been overwritten.
    """

    def __init__(self, on_replace: ReplaceHook | None = None) -> None:
        self._handlers: dict[type[TRequest], THandler] = {}
        self._on_replace = on_replace

    def register_handler(self, request_type: type[TRequest], handler: THandler) -> None:
        """Store or overwrite the handler for *request_type*."""
        replacing = request_type in self._handlers
        previous = self._handlers.get(request_type)
        self._handlers[request_type] = handler
        if replacing and self._on_replace is not None:
            self._on_replace(request_type, previous, handler)

    def get_handler(self, request_type: type[TRequest]) -> THandler | None:
        return self._handlers.get(request_type)

    def get_all_handlers(self) -> dict[type[TRequest], THandler]:
        """Return a snapshot; mutating it never touches the registry."""
        return dict(self._handlers)

    def __contains__(self, request_type: object) -> bool:
        return request_type in self._handlers

    def __len__(self) -> int:
        return len(self._handlers)


class CommandRegistry(HandlerRegistry[Command, CommandHandler[Any, Any]]):
    """Registry of command handlers."""


class QueryRegistry(HandlerRegistry[Query, QueryHandler[Any, Any]]):
    """Registry of query handlers."""


__all__ = ["CommandRegistry", "HandlerRegistry", "QueryRegistry", "ReplaceHook"]
