"""Opaque monotonic timestamps for hardware events.

An :class:`Instant` marks one moment on a process-local monotonic
timeline, e.g. the moment an edge-triggered interrupt fired on a digital
input.  It is only useful together with :class:`~edgetime.Duration`:
subtract two instants to get the time between them, or shift an instant
by a duration.

The count behind an instant is nanoseconds since an unspecified epoch.
Instants from different processes, or from before and after a restart,
must never be compared.

**Checked arithmetic.**  Nothing wraps.  Asking for the time elapsed
since an instant that is actually later raises
:class:`~edgetime.InstantOrderError`; moving an instant outside
``0 ..= 2**128 - 1`` raises :class:`~edgetime.InstantRangeError`.  Use
the ``checked_*`` methods for ``None``-returning variants, or
:meth:`Instant.saturating_duration_since` to clamp at zero.

Usage::

    ts1 = clock.now()
    ...
    ts2 = clock.now()
    latency = ts2 - ts1             # Duration
    deadline = ts1 + Duration.from_millis(5)
    if ts2 > deadline:
        ...
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import overload

from edgetime._duration import MAX_DURATION_NANOS, Duration
from edgetime._errors import DurationRangeError, InstantOrderError, InstantRangeError

MAX_INSTANT_NANOS = 2**128 - 1


@dataclass(frozen=True, slots=True, order=True, repr=False)
class Instant:
    """One moment on the process-local monotonic timeline.

    Instants are immutable.  ``ts += d`` and ``ts -= d`` rebind ``ts``
    to a new instant and leave any other reference to the old one
    untouched.

    Instants are created by a :class:`~edgetime.ClockPort` producer.
    Constructing one directly from a raw count is meant for producers
    and tests.

    Raises:
        TypeError: The count is not an ``int``.
        InstantRangeError: The count is outside ``0 ..= 2**128 - 1``.
    """

    _nanos: int

    def __post_init__(self) -> None:
        if not isinstance(self._nanos, int) or isinstance(self._nanos, bool):
            raise TypeError(
                f"instant count must be an int, got {type(self._nanos).__name__}"
            )
        if not 0 <= self._nanos <= MAX_INSTANT_NANOS:
            raise InstantRangeError(
                f"instant count {self._nanos} is outside the unsigned 128-bit range"
            )

    def __repr__(self) -> str:
        return f"Instant({self._nanos})"

    def into_inner(self) -> int:
        """Return the raw nanosecond count.

        For logging and debugging only.  The scale and epoch of the
        returned value are not part of the contract; do not compute
        with it.
        """
        return self._nanos

    # -- elapsed time -------------------------------------------------------

    def duration_since(self, earlier: Instant) -> Duration:
        """Return the time elapsed from *earlier* to this instant.

        Raises:
            InstantOrderError: *earlier* is later than this instant.
            DurationRangeError: The gap exceeds the 64-bit nanosecond
                range (about 584 years).
        """
        diff = self._nanos - earlier._nanos
        if diff < 0:
            raise InstantOrderError(self._nanos, earlier._nanos)
        if diff > MAX_DURATION_NANOS:
            raise DurationRangeError(
                f"{diff}ns between instants exceeds the 64-bit nanosecond range"
            )
        return Duration.from_nanos(diff)

    def checked_duration_since(self, earlier: Instant) -> Duration | None:
        """Like :meth:`duration_since`, but ``None`` if *earlier* is later."""
        if earlier._nanos > self._nanos:
            return None
        return self.duration_since(earlier)

    def saturating_duration_since(self, earlier: Instant) -> Duration:
        """Like :meth:`duration_since`, but zero if *earlier* is later."""
        if earlier._nanos > self._nanos:
            return Duration.ZERO
        return self.duration_since(earlier)

    # -- shifting -----------------------------------------------------------

    def checked_add(self, duration: Duration) -> Instant | None:
        """Shift forward by *duration*, or ``None`` past the 128-bit range."""
        nanos = self._nanos + duration.as_nanos()
        if nanos > MAX_INSTANT_NANOS:
            return None
        return Instant(nanos)

    def checked_sub(self, duration: Duration) -> Instant | None:
        """Shift backward by *duration*, or ``None`` below zero."""
        nanos = self._nanos - duration.as_nanos()
        if nanos < 0:
            return None
        return Instant(nanos)

    def __add__(self, other: object) -> Instant:
        if not isinstance(other, Duration):
            return NotImplemented
        shifted = self.checked_add(other)
        if shifted is None:
            raise InstantRangeError(
                f"{self!r} + {other} overflows the unsigned 128-bit range"
            )
        return shifted

    __radd__ = __add__

    @overload
    def __sub__(self, other: Instant) -> Duration: ...

    @overload
    def __sub__(self, other: Duration) -> Instant: ...

    def __sub__(self, other: object) -> Instant | Duration:
        if isinstance(other, Instant):
            return self.duration_since(other)
        if not isinstance(other, Duration):
            return NotImplemented
        shifted = self.checked_sub(other)
        if shifted is None:
            raise InstantRangeError(f"{self!r} - {other} would precede the epoch")
        return shifted
