"""Structured JSON log formatter and logging configuration.

Each log line is one JSON object (JSON Lines / NDJSON).  Besides the
usual wall-clock ``timestamp``, records can carry ``mono_ns``: the raw
count of the monotonic :class:`~edgetime.Instant` taken when the record
was created.  Wall-clock stamps jump under NTP; ``mono_ns`` lets log
lines be lined up against event instants captured in the same process.

``mono_ns`` is a diagnostic value.  Like
:meth:`~edgetime.Instant.into_inner`, its epoch is process-local and
it must not be compared across runs.
"""

from __future__ import annotations

import json
import logging
import sys
from datetime import UTC, datetime
from logging.handlers import RotatingFileHandler
from typing import Any

from edgetime._clock import ClockPort, SystemClock
from edgetime._settings import LoggingSettings

_ONE_MB = 1024 * 1024

_TEXT_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


class MonotonicStampFilter(logging.Filter):
    """Attach ``mono_ns`` to every record passing through.

    Never drops records.  A record that already carries ``mono_ns``
    (e.g. passed via ``extra=``) keeps its value.

    Args:
        clock: Producer used for the stamp.
    """

    def __init__(self, clock: ClockPort) -> None:
        super().__init__()
        self._clock = clock

    def filter(self, record: logging.LogRecord) -> bool:
        if not hasattr(record, "mono_ns"):
            record.mono_ns = self._clock.now().into_inner()
        return True


class JsonFormatter(logging.Formatter):
    """Emit log records as single-line JSON objects (NDJSON).

    Each record produces a JSON object with these fields:

    - ``timestamp`` — ISO 8601 with timezone (always UTC)
    - ``level`` — Python log level name
    - ``logger`` — dotted logger name
    - ``message`` — the formatted log message
    - ``service`` — application name for log correlation
    - ``version`` — application version (omitted when empty)
    - ``mono_ns`` — monotonic stamp (only present when the record
      has one, see :class:`MonotonicStampFilter`)
    - ``exception`` — formatted traceback (only present when
      an exception is logged)
    - ``stack_info`` — stack trace (only present when
      ``stack_info=True``)

    Args:
        service: Application name included in every log line.
        version: Application version string.  Omitted from
            output when empty.
    """

    def __init__(
        self,
        *,
        service: str = "",
        version: str = "",
    ) -> None:
        super().__init__()
        self._service = service
        self._version = version

    def format(self, record: logging.LogRecord) -> str:
        """Format a log record as a single-line JSON string."""
        entry: dict[str, Any] = {
            "timestamp": datetime.fromtimestamp(record.created, tz=UTC).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "service": self._service,
        }

        if self._version:
            entry["version"] = self._version

        mono_ns = getattr(record, "mono_ns", None)
        if mono_ns is not None:
            entry["mono_ns"] = mono_ns

        if record.exc_info and record.exc_info[0] is not None:
            entry["exception"] = self.formatException(record.exc_info)

        if record.stack_info:
            entry["stack_info"] = self.formatStack(record.stack_info)

        return json.dumps(entry, default=str)


def configure_logging(
    settings: LoggingSettings,
    *,
    service: str,
    version: str = "",
    clock: ClockPort | None = None,
) -> None:
    """Configure the root logger from settings.

    Clears any existing handlers on the root logger, then installs a
    ``stderr`` :class:`logging.StreamHandler` and, when
    ``settings.file`` is set, a
    :class:`~logging.handlers.RotatingFileHandler` rotating at
    ``settings.max_file_size_mb``.  Every handler gets a
    :class:`MonotonicStampFilter`.

    Args:
        settings: Logging configuration (level, format, file).
        service: Application name passed to :class:`JsonFormatter`.
        version: Application version passed to :class:`JsonFormatter`.
        clock: Producer for ``mono_ns`` stamps.  Defaults to
            :class:`~edgetime.SystemClock`.
    """
    root = logging.getLogger()

    for handler in root.handlers[:]:
        root.removeHandler(handler)

    if settings.format == "json":
        formatter: logging.Formatter = JsonFormatter(service=service, version=version)
    else:
        formatter = logging.Formatter(_TEXT_FORMAT)

    stamp = MonotonicStampFilter(clock if clock is not None else SystemClock())

    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stderr)]
    if settings.file is not None:
        handlers.append(
            RotatingFileHandler(
                settings.file,
                maxBytes=settings.max_file_size_mb * _ONE_MB,
                backupCount=settings.backup_count,
            )
        )

    for handler in handlers:
        handler.setFormatter(formatter)
        handler.addFilter(stamp)
        root.addHandler(handler)

    root.setLevel(settings.level)
