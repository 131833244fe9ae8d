from __future__ import annotations

import typer

from models.schemas import (
    CompensationFields,
    CompensationStatus,
    TelemetryReportSchema,
    TemperatureFields,
)
from models.records import SensorSample
from services.formatter import format_value
from services.telemetry import TelemetryReport


def build_report_schema(report: TelemetryReport) -> TelemetryReportSchema:
    readings = report.readings
    deltas = report.compensation
    lookup = report.lookup
    return TelemetryReportSchema(
        temperature=TemperatureFields(
            ambient=readings.ambient,
            freezer=readings.freezer,
            refrigerator=readings.refrigerator,
        ),
        compensation=(
            CompensationFields(low=deltas.low, high=deltas.high) if deltas is not None else None
        ),
        compensation_lookup=CompensationStatus(
            status=lookup.status,
            path=str(lookup.path) if lookup.path is not None else None,
            reason=lookup.reason,
        ),
        lines=report.lines(),
    )


def render_lines(report: TelemetryReport) -> None:
    for line in report.lines():
        typer.echo(line)


def render_json(report: TelemetryReport) -> None:
    typer.echo(build_report_schema(report).model_dump_json(indent=2))


def render_sample(sample: SensorSample) -> None:
    typer.echo(
        f"{sample.role.value}: {format_value(sample.celsius)}C "
        f"{format_value(sample.fahrenheit)}F (raw={sample.raw_milli_c})"
    )
