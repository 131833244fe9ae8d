"""Fixed-scale Celsius to Fahrenheit conversion.

Every intermediate result is truncated toward zero at three fractional
digits, which matches the ``bc`` arithmetic that produced the historical
metric series.
"""

from __future__ import annotations

from decimal import ROUND_DOWN, Decimal, InvalidOperation
from typing import Union

SCALE = Decimal("0.001")
_MILLI = Decimal(1000)
_FREEZING_POINT_F = Decimal(32)
_NINE_FIFTHS = Decimal(9) / Decimal(5)

Number = Union[Decimal, int, str]


def _truncate(value: Decimal) -> Decimal:
    try:
        truncated = value.quantize(SCALE, rounding=ROUND_DOWN)
    except InvalidOperation as exc:
        raise ValueError(f"Value {value} does not fit the three digit scale") from exc
    if truncated.is_zero():
        return truncated.copy_abs()
    return truncated


def _require_int(raw_milli_c: int) -> Decimal:
    if isinstance(raw_milli_c, bool) or not isinstance(raw_milli_c, int):
        raise ValueError(f"Raw sample must be an integer, got {raw_milli_c!r}")
    return Decimal(raw_milli_c)


def _to_decimal(value: Number) -> Decimal:
    try:
        candidate = value if isinstance(value, Decimal) else Decimal(value)
    except (InvalidOperation, TypeError, ValueError) as exc:
        raise ValueError(f"Not a decimal value: {value!r}") from exc
    if not candidate.is_finite():
        raise ValueError(f"Not a finite decimal value: {value!r}")
    return candidate


def to_celsius(raw_milli_c: int) -> Decimal:
    return _truncate(_require_int(raw_milli_c) / _MILLI)


def to_fahrenheit(raw_milli_c: int) -> Decimal:
    """Convert a milli-degree Celsius sample to Fahrenheit."""
    celsius = to_celsius(raw_milli_c)
    return _truncate(_truncate(_truncate(_NINE_FIFTHS) * celsius) + _FREEZING_POINT_F)


def delta_to_fahrenheit(delta_c: Number) -> Decimal:
    """Convert a Celsius temperature difference to Fahrenheit (no offset)."""
    return _truncate(_truncate(_NINE_FIFTHS) * _to_decimal(delta_c))
