"""Root error class for the taskbus error hierarchy."""

from __future__ import annotations

import json
from typing import Any, ClassVar


class BaseError(Exception):
    """Root of every error raised by taskbus.

    Each error has a human-readable ``message``, a stable ``code`` slug and
    an optional ``detail`` mapping.  ``str(err)`` renders all three as a
    single JSON line.

    Args:
        message: Human-readable description.
        code: Overrides the class's ``default_code``.
        detail: Extra context; values must be JSON-friendly or ``str()``-able.
        cause: Exception this error wraps; stored as ``__cause__``.
    """

    default_code: ClassVar[str] = "taskbus_error"

    def __init__(
        self,
        message: str,
        *,
        code: str | None = None,
        detail: dict[str, Any] | None = None,
        cause: BaseException | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.code = code or self.default_code
        self.detail: dict[str, Any] = dict(detail or {})
        if cause is not None:
            self.__cause__ = cause

    @property
    def cause(self) -> BaseException | None:
        return self.__cause__

    def log_fields(self) -> dict[str, Any]:
        """Fields to bind on a structlog event that reports this error."""
        fields: dict[str, Any] = {"error_code": self.code}
        if self.detail:
            fields["error_detail"] = self.detail
        return fields

    def to_dict(self) -> dict[str, Any]:
        payload: dict[str, Any] = {
            "code": self.code,
            "message": self.message,
            "detail": self.detail,
        }
        if self.__cause__ is not None:
            payload["cause"] = repr(self.__cause__)
        return payload

    def __str__(self) -> str:
        return json.dumps(self.to_dict(), ensure_ascii=False, default=str)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.message!r}, code={self.code!r})"


__all__ = ["BaseError"]
