from __future__ import annotations

import logging

from logging_config import ContextualFormatter


def _record(message: str) -> logging.LogRecord:
    return logging.LogRecord("picool", logging.WARNING, __file__, 1, message, None, None)


def test_formatter_appends_known_context() -> None:
    formatter = ContextualFormatter(fmt="%(levelname)s %(message)s")
    record = _record("Ignoring malformed compensation file")
    record.identifier = "28-abc"
    record.reason = "invalid delta 'x'"
    record.unrelated = "dropped"

    assert formatter.format(record) == (
        "WARNING Ignoring malformed compensation file | identifier=28-abc reason=invalid delta 'x'"
    )


def test_formatter_skips_missing_and_none_values() -> None:
    formatter = ContextualFormatter(fmt="%(message)s", extra_keys=["sensor_path", "raw_value"])
    record = _record("Read raw sensor sample")
    record.raw_value = None

    assert formatter.format(record) == "Read raw sensor sample"
