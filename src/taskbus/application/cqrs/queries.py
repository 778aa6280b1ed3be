"""Application CQRS – QueryBus port and InProcessQueryBus."""
from __future__ import annotations

import abc
from typing import Any

from taskbus.application.cqrs.bus import DispatchBus
from taskbus.application.cqrs.contracts import Query, QueryHandler
from taskbus.application.cqrs.registry import QueryRegistry


class QueryBus(abc.ABC):
    """Dispatches queries to their registered handlers."""

    @abc.abstractmethod
    def register(self, query_type: type[Query], handler: QueryHandler[Any, Any]) -> None: ...

    @abc.abstractmethod
    async def execute(self, query: Query) -> Any: ...


class InProcessQueryBus(DispatchBus[Query, QueryHandler[Any, Any]], QueryBus):
    """In-process query bus over an injected :class:`QueryRegistry`."""

    kind = "Query"

    def __init__(self, registry: QueryRegistry) -> None:
        super().__init__(registry)


__all__ = ["InProcessQueryBus", "QueryBus"]
