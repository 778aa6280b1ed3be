"""Application pipeline – Middleware base and callable aliases."""
from __future__ import annotations

import abc
from typing import Any, Awaitable, Callable

Handler = Callable[[Any], Awaitable[Any]]
Next = Callable[[Any], Awaitable[Any]]


class Middleware(abc.ABC):
    """One link of the chain wrapped around a bus's ``execute``.

    Implementations receive the request and the rest of the chain as
    ``next_``; they must either await ``next_(request)`` or raise.
    """

    @abc.abstractmethod
    async def __call__(self, request: Any, next_: Next) -> Any: ...


__all__ = ["Handler", "Middleware", "Next"]
