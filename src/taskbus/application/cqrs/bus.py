"""Application CQRS – DispatchBus, the policy shared by both in-process buses.

``execute`` validates, looks up and invokes; it never retries, logs or wraps
a failure.  The registry is read on every call, so a handler replaced after
a call has done its lookup does not affect that call.
"""
from __future__ import annotations

from typing import Any, ClassVar, Generic, TypeVar

from taskbus.application.cqrs.registry import HandlerRegistry
from taskbus.kernel.errors import HandlerNotFoundError, InvalidHandlerError, InvalidRequestError

TRequest = TypeVar("TRequest")
THandler = TypeVar("THandler")


class DispatchBus(Generic[TRequest, THandler]):
    """Route each request to the single handler registered for its type."""

    kind: ClassVar[str] = "Request"

    def __init__(self, registry: HandlerRegistry[TRequest, THandler]) -> None:
        self._registry = registry

    @property
    def registry(self) -> HandlerRegistry[TRequest, THandler]:
        return self._registry

    def register(self, request_type: type[TRequest], handler: THandler) -> None:
        """Register *handler* for *request_type*, replacing any previous one.

        Raises:
            InvalidHandlerError: *handler* is ``None``; the registry is left untouched.
        """
        if handler is None:
            raise InvalidHandlerError()
        self._registry.register_handler(request_type, handler)

    async def execute(self, request: TRequest) -> Any:
        """Dispatch *request* and return whatever its handler returns.

        Raises:
            InvalidRequestError: *request* is ``None``.
            HandlerNotFoundError: nothing is registered for ``type(request)``.
        """
        if request is None:
            raise InvalidRequestError(self.kind)
        request_type = type(request)
        handler: Any = self._registry.get_handler(request_type)
        if handler is None:
            raise HandlerNotFoundError(self.kind, request_type)
        return await handler.handle(request)


__all__ = ["DispatchBus"]
