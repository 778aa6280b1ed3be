"""Kernel error hierarchy – public re-export surface.

Hierarchy::

    BaseError
    ├── DomainError              (domain.py)
    │   ├── ValidationError
    │   ├── NotFoundError
    │   └── InvalidTransitionError
    └── ApplicationError         (application.py)
        ├── ForbiddenError
        ├── TimeoutError
        └── DispatchError
            ├── InvalidRequestError
            ├── InvalidHandlerError
            └── HandlerNotFoundError
"""

from taskbus.kernel.errors.application import (
    ApplicationError,
    DispatchError,
    ForbiddenError,
    HandlerNotFoundError,
    InvalidHandlerError,
    InvalidRequestError,
    TimeoutError,
)
from taskbus.kernel.errors.base import BaseError
from taskbus.kernel.errors.domain import (
    DomainError,
    InvalidTransitionError,
    NotFoundError,
    ValidationError,
)

__all__ = [
    "ApplicationError",
    "BaseError",
    "DispatchError",
    "DomainError",
    "ForbiddenError",
    "HandlerNotFoundError",
    "InvalidHandlerError",
    "InvalidRequestError",
    "InvalidTransitionError",
    "NotFoundError",
    "TimeoutError",
    "ValidationError",
]
