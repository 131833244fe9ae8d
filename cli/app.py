from __future__ import annotations

import logging
from pathlib import Path
from typing import NoReturn, Optional

import typer

from cli.config import load_config, load_sensor_path
from cli.render import render_json, render_lines, render_sample
from logging_config import configure_logging
from models.records import SensorRole
from services.errors import SensorReadError, TelemetryError
from services.telemetry import collect, read_sensor

logger = logging.getLogger(__name__)

app = typer.Typer(
    help="Emit refrigerator temperature and compensation metrics for a metrics agent.",
    context_settings={"help_option_names": ["-h", "--help"]},
)


def _fail(exc: TelemetryError) -> NoReturn:
    extra = {}
    if isinstance(exc, SensorReadError):
        extra = {"sensor_role": exc.role, "sensor_path": exc.path}
    logger.debug("Collection aborted", exc_info=exc, extra=extra)
    typer.secho(f"Error: {exc}", fg=typer.colors.RED, err=True)
    raise typer.Exit(code=1)


@app.callback()
def main(
    log_level: Optional[str] = typer.Option(
        None,
        "--log-level",
        help="Logging level for stderr diagnostics (defaults to LOG_LEVEL env or WARNING).",
    ),
) -> None:
    """Entry point for the CLI."""
    configure_logging(log_level)


@app.command("collect")
def collect_command(
    ambient: Optional[Path] = typer.Option(
        None, "--ambient", help="Ambient sensor file (defaults to AMBIENT_SENSOR_PATH)."
    ),
    freezer: Optional[Path] = typer.Option(
        None, "--freezer", help="Freezer sensor file (defaults to FREEZER_SENSOR_PATH)."
    ),
    refrigerator: Optional[Path] = typer.Option(
        None,
        "--refrigerator",
        help="Refrigerator sensor file (defaults to REFRIGERATOR_SENSOR_PATH).",
    ),
    calibration_dir: Optional[Path] = typer.Option(
        None,
        "--calibration-dir",
        help="Directory holding comp_<sensor-id> files (defaults to PICOOL_CALIBRATION_DIR).",
    ),
    as_json: bool = typer.Option(
        False, "--json", help="Print a structured report instead of metric lines."
    ),
) -> None:
    """Read all sensors and print the metric lines."""
    try:
        config = load_config(
            ambient=ambient,
            freezer=freezer,
            refrigerator=refrigerator,
            calibration_dir=calibration_dir,
        )
        report = collect(config)
    except TelemetryError as exc:
        _fail(exc)

    if as_json:
        render_json(report)
    else:
        render_lines(report)


@app.command("read")
def read_command(
    role: SensorRole = typer.Argument(..., help="Sensor to read."),
    path: Optional[Path] = typer.Option(
        None, "--path", help="Sensor file (defaults to the role's environment variable)."
    ),
) -> None:
    """Show a single sensor in Celsius and Fahrenheit."""
    try:
        sample = read_sensor(role, load_sensor_path(role, path))
    except TelemetryError as exc:
        _fail(exc)
    render_sample(sample)
