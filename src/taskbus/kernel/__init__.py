"""Kernel – framework-agnostic building blocks (errors, time)."""

from taskbus.kernel.errors import (
    ApplicationError,
    BaseError,
    DispatchError,
    DomainError,
    ForbiddenError,
    HandlerNotFoundError,
    InvalidHandlerError,
    InvalidRequestError,
    InvalidTransitionError,
    NotFoundError,
    TimeoutError,
    ValidationError,
)
from taskbus.kernel.time import Clock, FrozenClock, SystemClock, utc_now

__all__ = [
    "ApplicationError",
    "BaseError",
    "Clock",
    "DispatchError",
    "DomainError",
    "ForbiddenError",
    "FrozenClock",
    "HandlerNotFoundError",
    "InvalidHandlerError",
    "InvalidRequestError",
    "InvalidTransitionError",
    "NotFoundError",
    "SystemClock",
    "TimeoutError",
    "ValidationError",
    "utc_now",
]
