"""Application configuration via pydantic-settings.

Configuration is loaded from environment variables and/or ``.env``
files.  Variables carry the ``EDGETIME_`` prefix and nested models use
``__`` as the delimiter, e.g. ``EDGETIME_PROBE__SAMPLES=5000``.

The schema covers:

* **Logging** — level, format, optional file sink, rotation.
* **Probe** — default sample count and pacing for ``edgetime probe``.

Intervals are configured in **seconds** (float) and converted to
:class:`~edgetime.Duration` at the point of use.
"""

from __future__ import annotations

from typing import Annotated, Literal

from pydantic import BaseModel, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from edgetime._duration import Duration
from edgetime._errors import DurationRangeError

# -------------------------------------------------------------------
# Sub-models (BaseModel, NOT BaseSettings — nested via composition)
# -------------------------------------------------------------------


class LoggingSettings(BaseModel):
    """Logging configuration.

    When ``file`` is set, logs are also written to a rotating file
    (rotated at ``max_file_size_mb``, ``backup_count`` generations
    kept).  When ``None``, logs go to stderr only.

    The ``format`` field selects the output format:

    - ``"json"`` (default) — structured JSON lines, one object per
      record, each stamped with the monotonic ``mono_ns`` count.
    - ``"text"`` — human-readable timestamped lines for terminal use.
    """

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="INFO",
        description="Root log level.",
    )
    format: Literal["json", "text"] = Field(
        default="json",
        description=(
            "Log output format. "
            "'json' emits structured JSON lines; "
            "'text' emits human-readable timestamped lines."
        ),
    )
    file: str | None = Field(
        default=None,
        description="Optional log file path. ``None`` means stderr only.",
    )
    max_file_size_mb: Annotated[int, Field(ge=1)] = Field(
        default=10,
        description=(
            "Maximum log file size in megabytes before rotation. "
            "Only applies when ``file`` is set."
        ),
    )
    backup_count: Annotated[int, Field(ge=0)] = Field(
        default=3,
        description="Number of rotated log files to keep.",
    )


class ProbeSettings(BaseModel):
    """Defaults for the clock probe.

    Environment variables (with ``__`` nesting)::

        EDGETIME_PROBE__SAMPLES=5000
        EDGETIME_PROBE__INTERVAL=0.001
    """

    samples: Annotated[int, Field(ge=2)] = Field(
        default=1000,
        description="Number of clock readings per probe run.",
    )
    interval: Annotated[float, Field(ge=0, allow_inf_nan=False)] = Field(
        default=0.0,
        description=(
            "Seconds to pause between readings. 0 means back-to-back. "
            "Must fit a Duration (about 584 years)."
        ),
    )

    @field_validator("interval")
    @classmethod
    def _interval_fits_duration(cls, value: float) -> float:
        try:
            Duration.from_secs_float(value)
        except DurationRangeError as exc:
            raise ValueError(str(exc)) from exc
        return value

    @property
    def interval_duration(self) -> Duration:
        """``interval`` as a :class:`~edgetime.Duration`."""
        return Duration.from_secs_float(self.interval)


# -------------------------------------------------------------------
# Root settings
# -------------------------------------------------------------------


class Settings(BaseSettings):
    """Root settings for edgetime.

    Loaded from ``EDGETIME_``-prefixed environment variables with the
    nested delimiter ``__`` and an optional ``.env`` file in the
    working directory.

    Example ``.env``::

        EDGETIME_LOGGING__LEVEL=DEBUG
        EDGETIME_LOGGING__FORMAT=text
        EDGETIME_PROBE__SAMPLES=200
    """

    model_config = SettingsConfigDict(
        env_prefix="EDGETIME_",
        env_nested_delimiter="__",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )
    """``extra="ignore"`` so that a shared ``.env`` file holding keys
    for other tools does not fail validation.
    """

    logging: LoggingSettings = Field(
        default_factory=LoggingSettings,
        description="Logging configuration.",
    )
    probe: ProbeSettings = Field(
        default_factory=ProbeSettings,
        description="Clock probe defaults.",
    )
