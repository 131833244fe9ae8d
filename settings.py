from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache
from typing import Optional


_AMBIENT_PATH_ENV = "AMBIENT_SENSOR_PATH"
_FREEZER_PATH_ENV = "FREEZER_SENSOR_PATH"
_REFRIGERATOR_PATH_ENV = "REFRIGERATOR_SENSOR_PATH"
_CALIBRATION_DIR_ENV = "PICOOL_CALIBRATION_DIR"
_LOG_LEVEL_ENV = "LOG_LEVEL"

DEFAULT_CALIBRATION_DIR = "/var/lib/picool"


@dataclass(frozen=True)
class Settings:
    ambient_sensor_path: Optional[str]
    freezer_sensor_path: Optional[str]
    refrigerator_sensor_path: Optional[str]
    calibration_dir: str
    log_level: str


def _read_str_env(name: str, default: str) -> str:
    value = os.getenv(name)
    if value is None:
        return default
    candidate = value.strip()
    return candidate or default


def _read_optional_env(name: str) -> Optional[str]:
    value = os.getenv(name)
    if value is None:
        return None
    candidate = value.strip()
    return candidate or None


def _read_log_level(default: str) -> str:
    value = os.getenv(_LOG_LEVEL_ENV)
    if value is None:
        return default
    candidate = value.strip()
    if not candidate:
        return default
    return candidate.upper()


@lru_cache
def get_settings() -> Settings:
    return Settings(
        ambient_sensor_path=_read_optional_env(_AMBIENT_PATH_ENV),
        freezer_sensor_path=_read_optional_env(_FREEZER_PATH_ENV),
        refrigerator_sensor_path=_read_optional_env(_REFRIGERATOR_PATH_ENV),
        calibration_dir=_read_str_env(_CALIBRATION_DIR_ENV, DEFAULT_CALIBRATION_DIR),
        log_level=_read_log_level("WARNING"),
    )
