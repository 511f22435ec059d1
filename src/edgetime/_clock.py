"""Monotonic clock port and system adapter.

Provides ClockPort (Protocol) and SystemClock, the producers of
:class:`~edgetime.Instant` values.

**Why monotonic?** time.monotonic_ns() is immune to NTP adjustments and
manual system-clock changes, making it suitable for timestamping events
whose spacing matters.  The epoch is arbitrary, so only *differences*
between instants from the same process are meaningful (PEP 418).
"""

from __future__ import annotations

import time
from typing import Protocol, runtime_checkable

from edgetime._duration import Duration
from edgetime._instant import Instant


@runtime_checkable
class ClockPort(Protocol):
    """Source of monotonic instants.

    Implementations must return one consistent reading per call and
    never go backwards within a process.

    The default implementation wraps ``time.monotonic_ns()``.  Tests
    inject a deterministic fake clock for reproducible timing.
    """

    def now(self) -> Instant:
        """Return the current instant."""
        ...


class SystemClock:
    """Production clock wrapping ``time.monotonic_ns()``.

    Satisfies :class:`ClockPort` via structural subtyping (PEP 544).

    Usage::

        clock = SystemClock()
        start = clock.now()
        # ... some work ...
        elapsed = clock.elapsed(start)
    """

    def now(self) -> Instant:
        """Return the current monotonic instant."""
        return Instant(time.monotonic_ns())

    def elapsed(self, since: Instant) -> Duration:
        """Return the time elapsed from *since* until now."""
        return self.now().duration_since(since)
