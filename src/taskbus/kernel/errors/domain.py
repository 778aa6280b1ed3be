"""Domain errors – todo rules rejecting a request.

Todo handlers catch these and answer with a ``success=False`` result
instead of letting them escape the bus.
"""

from __future__ import annotations

from typing import Any

from taskbus.kernel.errors.base import BaseError


class DomainError(BaseError):
    """A todo business rule rejected the request."""

    default_code = "domain_error"


class ValidationError(DomainError):
    """One or more request fields are unusable.

    ``errors`` holds one ``{"field": ..., "error": ...}`` entry per problem.
    """

    default_code = "validation_error"

    def __init__(
        self,
        message: str,
        *,
        errors: list[dict[str, Any]] | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(message, **kwargs)
        self.errors: list[dict[str, Any]] = list(errors or [])

    @classmethod
    def required(cls, field: str) -> "ValidationError":
        return cls(f"{field} is required", errors=[{"field": field, "error": "required"}])

    @property
    def fields(self) -> list[str]:
        return [e["field"] for e in self.errors if "field" in e]

    def to_dict(self) -> dict[str, Any]:
        payload = super().to_dict()
        payload["errors"] = self.errors
        return payload


class NotFoundError(DomainError):
    """No *resource* exists under *identifier*."""

    default_code = "not_found"

    def __init__(self, resource: str, identifier: Any = None, **kwargs: Any) -> None:
        if identifier is None:
            message = f"{resource} not found"
        else:
            message = f"{resource} '{identifier}' not found"
        kwargs.setdefault("detail", {"resource": resource, "identifier": identifier})
        super().__init__(message, **kwargs)
        self.resource = resource
        self.identifier = identifier


class InvalidTransitionError(DomainError):
    """A todo cannot move from its current status to the requested one."""

    default_code = "invalid_transition"

    def __init__(self, current: str, requested: str, **kwargs: Any) -> None:
        kwargs.setdefault("detail", {"from": current, "to": requested})
        super().__init__(f"Cannot move a {current} todo to {requested}", **kwargs)
        self.current = current
        self.requested = requested


__all__ = [
    "DomainError",
    "InvalidTransitionError",
    "NotFoundError",
    "ValidationError",
]
