"""Application pipeline – built-in middleware implementations."""
from __future__ import annotations

import asyncio
import time
from typing import Any

from taskbus.application.pipeline.middleware import Middleware, Next
from taskbus.kernel.errors import BaseError
from taskbus.kernel.errors import TimeoutError as DispatchTimeoutError
from taskbus.observability.logging import get_logger

logger = get_logger(__name__)


class LoggingMiddleware(Middleware):
    """Log each request's outcome with its type name and timing."""

    def __init__(self, log: Any = None) -> None:
        self._log = log if log is not None else logger

    async def __call__(self, request: Any, next_: Next) -> Any:
        name = type(request).__name__
        start = time.perf_counter()
        try:
            result = await next_(request)
        except Exception as exc:
            duration = (time.perf_counter() - start) * 1000
            extra = exc.log_fields() if isinstance(exc, BaseError) else {}
            self._log.error(
                "bus.request.failed",
                request=name,
                duration_ms=round(duration, 2),
                error=type(exc).__name__,
                **extra,
            )
            raise
        duration = (time.perf_counter() - start) * 1000
        self._log.info("bus.request.completed", request=name, duration_ms=round(duration, 2))
        return result


class ValidationMiddleware(Middleware):
    """Call ``request.validate()`` if it exists."""

    async def __call__(self, request: Any, next_: Next) -> Any:
        validate = getattr(request, "validate", None)
        if callable(validate):
            validate()
        return await next_(request)


class TimeoutMiddleware(Middleware):
    """Raise :class:`~taskbus.kernel.errors.TimeoutError` if the rest of the
    chain runs longer than *timeout_seconds*."""

    def __init__(self, timeout_seconds: float) -> None:
        if timeout_seconds <= 0:
            raise ValueError("timeout_seconds must be > 0")
        self._timeout = timeout_seconds

    async def __call__(self, request: Any, next_: Next) -> Any:
        try:
            return await asyncio.wait_for(next_(request), timeout=self._timeout)
        except asyncio.TimeoutError as exc:
            raise DispatchTimeoutError(
                f"{type(request).__name__} timed out after {self._timeout}s",
                cause=exc,
            ) from exc


__all__ = ["LoggingMiddleware", "TimeoutMiddleware", "ValidationMiddleware"]
