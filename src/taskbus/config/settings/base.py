"""Config settings – Settings base class."""
from __future__ import annotations

import dataclasses
from typing import ClassVar


@dataclasses.dataclass
class Settings:
    """Base class for env-driven settings dataclasses.

    Subclasses set ``_prefix`` and declare one dataclass field per setting;
    field ``timeout_seconds`` under prefix ``TASKBUS`` is read from
    ``TASKBUS_TIMEOUT_SECONDS``.  ``_validate`` runs after construction,
    whichever way the instance was built.
    """

    _prefix: ClassVar[str] = ""

    def __post_init__(self) -> None:
        self._validate()

    def _validate(self) -> None:
        """Override to reject bad values with InvalidSettingValueError."""

    @classmethod
    def env_key(cls, field_name: str) -> str:
        if not cls._prefix:
            return field_name.upper()
        return f"{cls._prefix}_{field_name}".upper()


__all__ = ["Settings"]
