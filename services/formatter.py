"""Line-protocol style rendering of metric values."""

from __future__ import annotations

from decimal import Decimal
from typing import Iterable, Tuple

TEMPERATURE_MEASUREMENT = "temperature"
COMPENSATION_MEASUREMENT = "compensation"


def format_value(value: Decimal) -> str:
    rendered = f"{value:.3f}"
    # -0.000 can only come from a negative value below the rendered scale
    if rendered.startswith("-") and not rendered.strip("-0."):
        return rendered[1:]
    return rendered


def format_metric_line(measurement: str, fields: Iterable[Tuple[str, Decimal]]) -> str:
    rendered = ",".join(f"{key}={format_value(value)}" for key, value in fields)
    if not rendered:
        raise ValueError(f"Metric line {measurement!r} needs at least one field.")
    return f"{measurement} {rendered}"


def format_temperature_line(ambient: Decimal, freezer: Decimal, refrigerator: Decimal) -> str:
    return format_metric_line(
        TEMPERATURE_MEASUREMENT,
        [("ambient", ambient), ("freezer", freezer), ("refrigerator", refrigerator)],
    )


def format_compensation_line(low: Decimal, high: Decimal) -> str:
    return format_metric_line(COMPENSATION_MEASUREMENT, [("low", low), ("high", high)])
