"""Application pipeline – Pipeline class."""
from __future__ import annotations

import functools
from typing import Any

from taskbus.application.pipeline.middleware import Handler, Middleware


class Pipeline:
    """Ordered chain of middleware; the first one added runs outermost."""

    def __init__(self, middlewares: list[Middleware] | None = None) -> None:
        self._middlewares: list[Middleware] = list(middlewares or [])

    def add(self, middleware: Middleware) -> "Pipeline":
        """Append a middleware (fluent API)."""
        self._middlewares.append(middleware)
        return self

    @property
    def middlewares(self) -> tuple[Middleware, ...]:
        return tuple(self._middlewares)

    def __len__(self) -> int:
        return len(self._middlewares)

    async def execute(self, request: Any, handler: Handler) -> Any:
        """Run *request* through every middleware, ending with *handler*."""
        chain: Handler = handler
        for middleware in reversed(self._middlewares):
            chain = functools.partial(_invoke, middleware, chain)
        return await chain(request)


async def _invoke(middleware: Middleware, next_: Handler, request: Any) -> Any:
    return await middleware(request, next_)


__all__ = ["Pipeline"]
