"""edgetime.

Opaque monotonic instants and nanosecond durations for timestamping
hardware events.
"""

from importlib.metadata import PackageNotFoundError, version

from edgetime._clock import ClockPort, SystemClock
from edgetime._duration import Duration
from edgetime._errors import (
    DurationRangeError,
    InstantOrderError,
    InstantRangeError,
    TimeArithmeticError,
    error_details,
)
from edgetime._instant import Instant
from edgetime._logging import JsonFormatter, MonotonicStampFilter, configure_logging
from edgetime._probe import ProbeReport, probe_clock
from edgetime._settings import LoggingSettings, ProbeSettings, Settings

try:
    # Prefer the generated version file (setuptools_scm at build time)
    from edgetime._version import __version__
except ImportError:
    try:
        # Fallback to installed package metadata
        __version__ = version("edgetime")
    except PackageNotFoundError:
        # Last resort fallback for editable installs without metadata
        __version__ = "0.0.0+unknown"

__all__ = [
    # Version
    "__version__",
    # Time values
    "Duration",
    "Instant",
    # Errors
    "DurationRangeError",
    "InstantOrderError",
    "InstantRangeError",
    "TimeArithmeticError",
    "error_details",
    # Clock
    "ClockPort",
    "SystemClock",
    # Probe
    "ProbeReport",
    "probe_clock",
    # Logging
    "JsonFormatter",
    "MonotonicStampFilter",
    "configure_logging",
    # Settings
    "LoggingSettings",
    "ProbeSettings",
    "Settings",
]
