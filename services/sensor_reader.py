"""Reading raw samples from filesystem-exposed temperature sensors."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional, Union

from services.errors import SensorFormatError, SensorIOError

logger = logging.getLogger(__name__)


def read_raw_sample(path: Union[str, Path], role: Optional[str] = None) -> int:
    """Return the integer milli-degrees Celsius value stored at ``path``."""
    sensor_path = Path(path)
    try:
        contents = sensor_path.read_bytes()
    except OSError as exc:
        raise SensorIOError(
            f"Unable to read {role or 'sensor'} file {sensor_path}: {exc}",
            path=sensor_path,
            role=role,
        ) from exc

    candidate = contents.strip()
    try:
        value = int(candidate.decode("ascii"))
    except (UnicodeDecodeError, ValueError) as exc:
        raise SensorFormatError(
            f"Sensor file {sensor_path} does not contain an integer: {candidate!r}",
            path=sensor_path,
            role=role,
        ) from exc

    logger.debug(
        "Read raw sensor sample",
        extra={"sensor_role": role, "sensor_path": sensor_path, "raw_value": value},
    )
    return value
