"""Application-layer errors – dispatch failures and use-case level concerns."""

from __future__ import annotations

from typing import Any

from taskbus.kernel.errors.base import BaseError


class ApplicationError(BaseError):
    """Cross-cutting application-layer concern."""

    default_code = "application_error"


class ForbiddenError(ApplicationError):
    """The requesting user may not act on the resource."""

    default_code = "forbidden"

    def __init__(
        self,
        message: str = "Access denied",
        *,
        resource: str | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(message, **kwargs)
        self.resource = resource


class TimeoutError(ApplicationError):  # noqa: A001
    """Operation timed out."""

    default_code = "timeout"


class DispatchError(ApplicationError):
    """A bus refused to route a request."""

    default_code = "dispatch_error"


class InvalidRequestError(DispatchError, ValueError):
    """``execute()`` was called with ``None`` instead of a request."""

    default_code = "invalid_request"

    def __init__(self, kind: str, **kwargs: Any) -> None:
        super().__init__(f"{kind} cannot be None", **kwargs)
        self.kind = kind


class InvalidHandlerError(DispatchError, ValueError):
    """``register()`` was called with ``None`` instead of a handler."""

    default_code = "invalid_handler"

    def __init__(self, **kwargs: Any) -> None:
        super().__init__("Handler cannot be None", **kwargs)


class HandlerNotFoundError(DispatchError, LookupError):
    """No handler is registered for the request's type."""

    default_code = "handler_not_found"

    def __init__(self, kind: str, request_type: type, **kwargs: Any) -> None:
        super().__init__(
            f"No handler registered for {kind.lower()}: {request_type.__name__}",
            detail={"request_type": request_type.__qualname__},
            **kwargs,
        )
        self.kind = kind
        self.request_type = request_type


__all__ = [
    "ApplicationError",
    "DispatchError",
    "ForbiddenError",
    "HandlerNotFoundError",
    "InvalidHandlerError",
    "InvalidRequestError",
    "TimeoutError",
]
