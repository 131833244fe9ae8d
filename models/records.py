"""Domain models shared across services."""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from enum import Enum
from pathlib import Path
from typing import Optional


class SensorRole(str, Enum):
    """Sensor positions; declaration order is the metric key order."""

    ambient = "ambient"
    freezer = "freezer"
    refrigerator = "refrigerator"


class LookupStatus(str, Enum):
    found = "found"
    absent = "absent"
    malformed = "malformed"


@dataclass(frozen=True)
class TelemetryConfig:
    """Explicit inputs for one collection run."""

    ambient_sensor_path: Path
    freezer_sensor_path: Path
    refrigerator_sensor_path: Path
    calibration_dir: Path

    def sensor_path(self, role: SensorRole) -> Path:
        return {
            SensorRole.ambient: self.ambient_sensor_path,
            SensorRole.freezer: self.freezer_sensor_path,
            SensorRole.refrigerator: self.refrigerator_sensor_path,
        }[role]


@dataclass(frozen=True, slots=True)
class CompensationRecord:
    """Celsius delta range written by the compressor controller."""

    low_delta_c: Decimal
    high_delta_c: Decimal


@dataclass(frozen=True)
class CompensationLookup:
    """Tagged outcome of resolving a compensation file."""

    status: LookupStatus
    record: Optional[CompensationRecord] = None
    path: Optional[Path] = None
    reason: Optional[str] = None

    @classmethod
    def found(cls, record: CompensationRecord, path: Path) -> "CompensationLookup":
        return cls(status=LookupStatus.found, record=record, path=path)

    @classmethod
    def absent(cls, path: Optional[Path] = None, reason: Optional[str] = None) -> "CompensationLookup":
        return cls(status=LookupStatus.absent, path=path, reason=reason)

    @classmethod
    def malformed(cls, path: Path, reason: str) -> "CompensationLookup":
        return cls(status=LookupStatus.malformed, path=path, reason=reason)


@dataclass(frozen=True, slots=True)
class TemperatureReadings:
    """Calibrated Fahrenheit values for all three sensors."""

    ambient: Decimal
    freezer: Decimal
    refrigerator: Decimal


@dataclass(frozen=True, slots=True)
class CompensationDeltas:
    """Fahrenheit deltas derived from a compensation record."""

    low: Decimal
    high: Decimal


@dataclass(frozen=True, slots=True)
class SensorSample:
    """A single sensor read, kept in every unit for diagnostics."""

    role: SensorRole
    path: Path
    raw_milli_c: int
    celsius: Decimal
    fahrenheit: Decimal
