from __future__ import annotations

from decimal import Decimal

import pytest

from services.formatter import (
    format_compensation_line,
    format_metric_line,
    format_temperature_line,
    format_value,
)


def test_temperature_line_has_fixed_key_order() -> None:
    line = format_temperature_line(Decimal("68.000"), Decimal("-0.400"), Decimal("39.200"))

    assert line == "temperature ambient=68.000,freezer=-0.400,refrigerator=39.200"


def test_compensation_line() -> None:
    line = format_compensation_line(Decimal("3.600"), Decimal("9.000"))

    assert line == "compensation low=3.600,high=9.000"


def test_values_always_render_three_digits() -> None:
    assert format_value(Decimal("32")) == "32.000"
    assert format_value(Decimal("1.5")) == "1.500"
    assert format_value(Decimal("-0.0004")) == "0.000"


def test_metric_line_requires_fields() -> None:
    with pytest.raises(ValueError):
        format_metric_line("temperature", [])
