from __future__ import annotations

from pathlib import Path
from typing import Optional, Union

from models.records import SensorRole, TelemetryConfig
from services.errors import ConfigurationError
from settings import get_settings

PathLike = Union[str, Path]

_ENV_NAMES = {
    SensorRole.ambient: "AMBIENT_SENSOR_PATH",
    SensorRole.freezer: "FREEZER_SENSOR_PATH",
    SensorRole.refrigerator: "REFRIGERATOR_SENSOR_PATH",
}


def _configured_path(role: SensorRole) -> Optional[str]:
    settings = get_settings()
    return {
        SensorRole.ambient: settings.ambient_sensor_path,
        SensorRole.freezer: settings.freezer_sensor_path,
        SensorRole.refrigerator: settings.refrigerator_sensor_path,
    }[role]


def load_sensor_path(role: SensorRole, override: Optional[PathLike] = None) -> Path:
    candidate = override or _configured_path(role)
    if not candidate:
        raise ConfigurationError(
            f"No {role.value} sensor path configured. "
            f"Set {_ENV_NAMES[role]} or pass --{role.value}."
        )
    return Path(candidate)


def load_config(
    ambient: Optional[PathLike] = None,
    freezer: Optional[PathLike] = None,
    refrigerator: Optional[PathLike] = None,
    calibration_dir: Optional[PathLike] = None,
) -> TelemetryConfig:
    """Merge command line overrides with environment settings."""
    overrides = {
        SensorRole.ambient: ambient,
        SensorRole.freezer: freezer,
        SensorRole.refrigerator: refrigerator,
    }
    missing = [
        role for role in SensorRole if not (overrides[role] or _configured_path(role))
    ]
    if missing:
        names = ", ".join(_ENV_NAMES[role] for role in missing)
        raise ConfigurationError(f"Missing sensor path configuration: {names}.")

    return TelemetryConfig(
        ambient_sensor_path=load_sensor_path(SensorRole.ambient, ambient),
        freezer_sensor_path=load_sensor_path(SensorRole.freezer, freezer),
        refrigerator_sensor_path=load_sensor_path(SensorRole.refrigerator, refrigerator),
        calibration_dir=Path(calibration_dir or get_settings().calibration_dir),
    )
