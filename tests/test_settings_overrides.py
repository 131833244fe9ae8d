from __future__ import annotations

from pathlib import Path

import pytest

from cli.config import load_config
from models.records import SensorRole
from services.errors import ConfigurationError
from settings import DEFAULT_CALIBRATION_DIR, get_settings


@pytest.fixture(autouse=True)
def clear_settings_cache():
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


def test_environment_overrides_apply(monkeypatch) -> None:
    monkeypatch.setenv("AMBIENT_SENSOR_PATH", "/sys/bus/w1/devices/28-a/temperature")
    monkeypatch.setenv("FREEZER_SENSOR_PATH", " /sys/bus/w1/devices/28-f/temperature ")
    monkeypatch.setenv("REFRIGERATOR_SENSOR_PATH", "/sys/bus/w1/devices/28-r/temperature")
    monkeypatch.setenv("PICOOL_CALIBRATION_DIR", "/srv/picool")
    monkeypatch.setenv("LOG_LEVEL", "debug")

    settings = get_settings()
    config = load_config()

    assert settings.log_level == "DEBUG"
    assert config.freezer_sensor_path == Path("/sys/bus/w1/devices/28-f/temperature")
    assert config.sensor_path(SensorRole.refrigerator) == Path("/sys/bus/w1/devices/28-r/temperature")
    assert config.calibration_dir == Path("/srv/picool")


def test_defaults_when_environment_blank(monkeypatch) -> None:
    monkeypatch.setenv("PICOOL_CALIBRATION_DIR", "   ")
    monkeypatch.delenv("LOG_LEVEL", raising=False)

    settings = get_settings()

    assert settings.calibration_dir == DEFAULT_CALIBRATION_DIR
    assert settings.log_level == "WARNING"


def test_explicit_arguments_win_over_environment(monkeypatch, tmp_path: Path) -> None:
    monkeypatch.setenv("AMBIENT_SENSOR_PATH", "/env/ambient")
    monkeypatch.setenv("FREEZER_SENSOR_PATH", "/env/freezer")
    monkeypatch.setenv("REFRIGERATOR_SENSOR_PATH", "/env/refrigerator")

    config = load_config(ambient=tmp_path / "ambient", calibration_dir=tmp_path)

    assert config.ambient_sensor_path == tmp_path / "ambient"
    assert config.freezer_sensor_path == Path("/env/freezer")
    assert config.calibration_dir == tmp_path


def test_missing_sensor_paths_are_reported(monkeypatch) -> None:
    monkeypatch.setenv("AMBIENT_SENSOR_PATH", "/env/ambient")
    monkeypatch.delenv("FREEZER_SENSOR_PATH", raising=False)
    monkeypatch.setenv("REFRIGERATOR_SENSOR_PATH", "")

    with pytest.raises(ConfigurationError) as excinfo:
        load_config()

    message = str(excinfo.value)
    assert "FREEZER_SENSOR_PATH" in message
    assert "REFRIGERATOR_SENSOR_PATH" in message
    assert "AMBIENT_SENSOR_PATH" not in message
