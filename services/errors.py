"""Exception taxonomy for telemetry collection."""

from __future__ import annotations

from pathlib import Path
from typing import Optional


class TelemetryError(Exception):
    """Base class for failures that abort a collection run."""


class ConfigurationError(TelemetryError):
    """Raised when a required setting is missing or unusable."""


class SensorReadError(TelemetryError):

    def __init__(self, message: str, path: Path, role: Optional[str] = None) -> None:
        super().__init__(message)
        self.path = path
        self.role = role


class SensorIOError(SensorReadError):
    """The sensor file is missing or cannot be read."""


class SensorFormatError(SensorReadError):
    """The sensor file does not hold an integer sample."""
