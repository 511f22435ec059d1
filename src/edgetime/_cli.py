"""Command-line interface for edgetime (Typer-based).

Provides :func:`build_cli`, which constructs the ``edgetime`` Typer app.
Global options (``--version``, ``--log-level``, ``--log-format``,
``--env-file``) load :class:`~edgetime.Settings` and configure logging;
the ``probe`` command samples the system monotonic clock and prints a
:class:`~edgetime.ProbeReport`.
"""

from __future__ import annotations

import json
import logging
import sys
import time
from collections.abc import Callable
from typing import Annotated, get_args

import typer
from pydantic import ValidationError

from edgetime._clock import ClockPort, SystemClock
from edgetime._errors import TimeArithmeticError, error_details
from edgetime._logging import configure_logging
from edgetime._probe import ProbeReport, probe_clock
from edgetime._settings import LoggingSettings, ProbeSettings, Settings

logger = logging.getLogger(__name__)

SERVICE_NAME = "edgetime"

# ---------------------------------------------------------------------------
# Exit codes
# ---------------------------------------------------------------------------

EXIT_OK = 0
EXIT_CONFIG_ERROR = 1
EXIT_RUNTIME_ERROR = 3

# ---------------------------------------------------------------------------
# Allowed values (extracted from LoggingSettings Literal types)
# ---------------------------------------------------------------------------

_VALID_LOG_LEVELS: tuple[str, ...] = get_args(
    LoggingSettings.model_fields["level"].annotation,
)
_VALID_LOG_FORMATS: tuple[str, ...] = get_args(
    LoggingSettings.model_fields["format"].annotation,
)


def _package_version() -> str:
    from edgetime import __version__

    return __version__


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"{SERVICE_NAME} v{_package_version()}")
        raise typer.Exit()


def _render_report(report: ProbeReport) -> str:
    rows = [
        ("samples", str(report.samples)),
        ("span", str(report.span)),
        ("min step", str(report.min_step)),
        ("max step", str(report.max_step)),
        ("mean step", str(report.mean_step)),
        ("stalls", str(report.stalls)),
    ]
    return "\n".join(f"{label:<10} {value}" for label, value in rows)


def build_cli(
    *,
    clock: ClockPort | None = None,
    sleep: Callable[[float], None] = time.sleep,
) -> typer.Typer:
    """Construct the ``edgetime`` Typer CLI.

    Args:
        clock: Producer sampled by ``probe``.  Defaults to
            :class:`~edgetime.SystemClock`.
        sleep: Blocking sleep used between probe readings.

    Returns:
        A configured :class:`typer.Typer` ready to invoke.
    """
    probe_source = clock if clock is not None else SystemClock()

    cli = typer.Typer(
        help="Monotonic instant utilities for hardware event timestamps.",
        no_args_is_help=True,
    )

    # -- global options -----------------------------------------------------

    @cli.callback()
    def main(
        ctx: typer.Context,
        version_flag: Annotated[
            bool | None,
            typer.Option(
                "--version",
                is_eager=True,
                callback=_version_callback,
                help="Show version and exit.",
            ),
        ] = None,
        log_level: Annotated[
            str | None,
            typer.Option("--log-level", help="Override log level."),
        ] = None,
        log_format: Annotated[
            str | None,
            typer.Option("--log-format", help="Override log format."),
        ] = None,
        env_file: Annotated[
            str,
            typer.Option("--env-file", help="Path to .env file."),
        ] = ".env",
    ) -> None:
        # -- validate enum-like options -------------------------------------
        if log_level is not None and log_level.upper() not in _VALID_LOG_LEVELS:
            raise typer.BadParameter(
                f"Invalid log level '{log_level}'. "
                f"Choose from: {', '.join(_VALID_LOG_LEVELS)}",
                param_hint="'--log-level'",
            )

        if log_format is not None and log_format.lower() not in _VALID_LOG_FORMATS:
            raise typer.BadParameter(
                f"Invalid log format '{log_format}'. "
                f"Choose from: {', '.join(_VALID_LOG_FORMATS)}",
                param_hint="'--log-format'",
            )

        # -- build settings -------------------------------------------------
        try:
            settings = Settings(_env_file=env_file)  # type: ignore[call-arg]
        except ValidationError as exc:
            logger.error("Configuration error: %s", exc)
            raise SystemExit(EXIT_CONFIG_ERROR) from exc

        # -- apply CLI overrides --------------------------------------------
        if log_level is not None:
            settings.logging = settings.logging.model_copy(
                update={"level": log_level.upper()},
            )

        if log_format is not None:
            settings.logging = settings.logging.model_copy(
                update={"format": log_format.lower()},
            )

        configure_logging(
            settings.logging,
            service=SERVICE_NAME,
            version=_package_version(),
        )
        ctx.obj = settings

    # -- probe --------------------------------------------------------------

    @cli.command()
    def probe(
        ctx: typer.Context,
        samples: Annotated[
            int | None,
            typer.Option("--samples", min=2, help="Number of clock readings."),
        ] = None,
        interval: Annotated[
            float | None,
            typer.Option("--interval", min=0.0, help="Seconds between readings."),
        ] = None,
        as_json: Annotated[
            bool,
            typer.Option("--json", help="Print the report as JSON."),
        ] = False,
    ) -> None:
        """Sample the monotonic clock and report its step sizes."""
        settings: Settings = ctx.obj
        overrides: dict[str, object] = {}
        if samples is not None:
            overrides["samples"] = samples
        if interval is not None:
            overrides["interval"] = interval

        # model_copy would skip validation of the overrides
        try:
            probe_settings = ProbeSettings.model_validate(
                {**settings.probe.model_dump(), **overrides},
            )
        except ValidationError as exc:
            logger.error("Configuration error: %s", exc)
            raise SystemExit(EXIT_CONFIG_ERROR) from exc

        logger.info(
            "Probing clock: %d samples, %s apart",
            probe_settings.samples,
            probe_settings.interval_duration,
        )
        try:
            report = probe_clock(
                probe_source,
                samples=probe_settings.samples,
                interval=probe_settings.interval_duration,
                sleep=sleep,
            )
        except TimeArithmeticError as exc:
            logger.error("Clock probe failed: %s", exc)
            if as_json:
                typer.echo(json.dumps(error_details(exc)), err=True)
            sys.exit(EXIT_RUNTIME_ERROR)

        typer.echo(report.to_json() if as_json else _render_report(report))

    return cli


def main() -> None:
    """Console-script entry point."""
    build_cli()()
