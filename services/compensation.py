"""Lookup of per-sensor compensation ranges written by the compressor controller."""

from __future__ import annotations

import logging
from decimal import Decimal, InvalidOperation
from pathlib import Path
from typing import Union

from models.records import CompensationLookup, CompensationRecord, LookupStatus

logger = logging.getLogger(__name__)

COMPENSATION_FILE_PREFIX = "comp_"
MAX_DELTA_C = Decimal(1000)


def derive_identifier(sensor_path: Union[str, Path]) -> str:
    """Return the bus/device id, i.e. the name of the sensor file's parent directory."""
    identifier = Path(sensor_path).parent.name
    if not identifier:
        raise ValueError(f"Cannot derive a sensor identifier from {sensor_path!s}.")
    return identifier


def locate(identifier: str, calibration_dir: Union[str, Path]) -> Path:
    return Path(calibration_dir) / f"{COMPENSATION_FILE_PREFIX}{identifier}"


def _parse_delta(token: str) -> Decimal:
    try:
        value = Decimal(token)
    except InvalidOperation as exc:
        raise ValueError(f"invalid delta {token!r}") from exc
    if not value.is_finite():
        raise ValueError(f"non-finite delta {token!r}")
    if abs(value) > MAX_DELTA_C:
        raise ValueError(f"delta {token!r} exceeds {MAX_DELTA_C} C")
    return value


def load(path: Union[str, Path]) -> CompensationLookup:
    """Parse the first line of a compensation file.

    A missing file, or a first line with fewer than two tokens, means no
    compensation data is available. Two tokens that do not both parse as
    finite decimals within +/-MAX_DELTA_C, extra tokens, or an unreadable
    file (including one whose name the filesystem rejects) are reported as
    malformed. None of these outcomes raise.
    """
    comp_path = Path(path)
    try:
        with comp_path.open("r", encoding="utf-8") as handle:
            first_line = handle.readline()
    except (FileNotFoundError, NotADirectoryError, IsADirectoryError):
        return CompensationLookup.absent(path=comp_path, reason="file not found")
    except (OSError, UnicodeDecodeError) as exc:
        return CompensationLookup.malformed(comp_path, f"unreadable: {exc}")

    tokens = first_line.split()
    if len(tokens) < 2:
        return CompensationLookup.absent(path=comp_path, reason="incomplete record")
    if len(tokens) > 2:
        return CompensationLookup.malformed(
            comp_path, f"expected 2 tokens, found {len(tokens)}"
        )

    low_token, high_token = tokens
    try:
        record = CompensationRecord(
            low_delta_c=_parse_delta(low_token),
            high_delta_c=_parse_delta(high_token),
        )
    except ValueError as exc:
        return CompensationLookup.malformed(comp_path, str(exc))
    return CompensationLookup.found(record, comp_path)


def resolve(sensor_path: Union[str, Path], calibration_dir: Union[str, Path]) -> CompensationLookup:
    """Derive, locate and load the compensation record for ``sensor_path``."""
    try:
        identifier = derive_identifier(sensor_path)
    except ValueError as exc:
        logger.warning(
            "Skipping compensation lookup",
            extra={"sensor_path": sensor_path, "reason": str(exc)},
        )
        return CompensationLookup.absent(reason=str(exc))

    comp_path = locate(identifier, calibration_dir)
    lookup = load(comp_path)
    log_extra = {
        "identifier": identifier,
        "compensation_path": comp_path,
        "reason": lookup.reason,
    }
    if lookup.status is LookupStatus.malformed:
        logger.warning("Ignoring malformed compensation file", extra=log_extra)
    else:
        logger.debug("Compensation lookup %s", lookup.status.value, extra=log_extra)
    return lookup
