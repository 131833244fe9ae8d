"""One-shot collection run: sensors in, metric lines out."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from decimal import Decimal
from pathlib import Path
from typing import Dict, List, Optional

from models.records import (
    CompensationDeltas,
    CompensationLookup,
    SensorRole,
    SensorSample,
    TelemetryConfig,
    TemperatureReadings,
)
from services import compensation
from services.conversion import delta_to_fahrenheit, to_celsius, to_fahrenheit
from services.errors import SensorFormatError
from services.formatter import format_compensation_line, format_temperature_line
from services.sensor_reader import read_raw_sample

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TelemetryReport:
    """Everything produced by a successful collection run."""

    readings: TemperatureReadings
    compensation: Optional[CompensationDeltas]
    lookup: CompensationLookup

    def lines(self) -> List[str]:
        output = [
            format_temperature_line(
                self.readings.ambient,
                self.readings.freezer,
                self.readings.refrigerator,
            )
        ]
        if self.compensation is not None:
            output.append(
                format_compensation_line(self.compensation.low, self.compensation.high)
            )
        return output


def read_sensor(role: SensorRole, path: Path) -> SensorSample:
    raw = read_raw_sample(path, role=role.value)
    try:
        celsius = to_celsius(raw)
        fahrenheit = to_fahrenheit(raw)
    except ValueError as exc:
        raise SensorFormatError(
            f"Sensor file {path} holds an out of range sample: {raw}",
            path=path,
            role=role.value,
        ) from exc
    return SensorSample(
        role=role,
        path=path,
        raw_milli_c=raw,
        celsius=celsius,
        fahrenheit=fahrenheit,
    )


def read_temperatures(config: TelemetryConfig) -> TemperatureReadings:
    """Read all sensors; the first failure propagates and nothing is returned."""
    values: Dict[str, Decimal] = {}
    for role in SensorRole:
        values[role.value] = read_sensor(role, config.sensor_path(role)).fahrenheit
    return TemperatureReadings(**values)


def convert_compensation(lookup: CompensationLookup) -> Optional[CompensationDeltas]:
    if lookup.record is None:
        return None
    return CompensationDeltas(
        low=delta_to_fahrenheit(lookup.record.low_delta_c),
        high=delta_to_fahrenheit(lookup.record.high_delta_c),
    )


def collect(config: TelemetryConfig) -> TelemetryReport:
    """Run a full collection.

    Sensor failures are fatal and raise before any output exists, so a
    temperature line is never emitted with missing values. Compensation is
    best effort and only decides whether the second line is present.
    """
    readings = read_temperatures(config)
    lookup = compensation.resolve(config.refrigerator_sensor_path, config.calibration_dir)
    report = TelemetryReport(
        readings=readings,
        compensation=convert_compensation(lookup),
        lookup=lookup,
    )
    logger.info("Collected telemetry", extra={"line_count": len(report.lines())})
    return report
