"""Config – BusSettings, the knobs read by :func:`taskbus.todos.build_buses`."""
from __future__ import annotations

import dataclasses
import logging
from typing import ClassVar

from taskbus.config.settings import EnvSettingsLoader, Settings
from taskbus.config.errors import InvalidSettingValueError

_LEVELS = frozenset({"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"})


@dataclasses.dataclass
class BusSettings(Settings):
    """Dispatch and logging settings, read from ``TASKBUS_*`` variables.

    ``timeout_seconds`` of ``0`` leaves the buses without a timeout.
    """

    _prefix: ClassVar[str] = "TASKBUS"

    log_level: str = "INFO"
    log_json: bool = True
    warn_on_handler_replace: bool = False
    logging_middleware: bool = True
    validation_middleware: bool = True
    timeout_seconds: float = 0.0

    def _validate(self) -> None:
        if self.log_level.upper() not in _LEVELS:
            raise InvalidSettingValueError("log_level", self.log_level, "unknown log level")
        if self.timeout_seconds < 0:
            raise InvalidSettingValueError("timeout_seconds", self.timeout_seconds, "must be >= 0")

    @property
    def log_level_number(self) -> int:
        return logging.getLevelName(self.log_level.upper())

    @classmethod
    def from_env(cls) -> "BusSettings":
        return EnvSettingsLoader().load(cls)


__all__ = ["BusSettings"]
