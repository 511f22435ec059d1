"""Nanosecond-precise elapsed-time value.

:class:`datetime.timedelta` resolves only to microseconds, which is too
coarse for interrupt timestamps, so edgetime carries its own duration
type.  A :class:`Duration` is always non-negative and never exceeds
``2**64 - 1`` nanoseconds (roughly 584 years).

Usage::

    d = Duration.from_nanos(200)
    assert d + Duration.from_micros(1) == Duration.from_nanos(1_200)
    assert str(Duration.from_millis(1_500)) == "1.5s"
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from datetime import timedelta
from typing import ClassVar

from edgetime._errors import DurationRangeError

NANOS_PER_MICRO = 1_000
NANOS_PER_MILLI = 1_000_000
NANOS_PER_SEC = 1_000_000_000

MAX_DURATION_NANOS = 2**64 - 1


def _check_int(name: str, value: object) -> None:
    # bool is an int subclass but never a meaningful count
    if not isinstance(value, int) or isinstance(value, bool):
        raise TypeError(f"{name} must be an int, got {type(value).__name__}")


def _strip_fraction(whole: int, frac: int, width: int, unit: str) -> str:
    if not frac:
        return f"{whole}{unit}"
    digits = f"{frac:0{width}d}".rstrip("0")
    return f"{whole}.{digits}{unit}"


@dataclass(frozen=True, slots=True, order=True)
class Duration:
    """Non-negative span of elapsed time.

    Stored as whole seconds plus sub-second nanoseconds, compared by
    total length.

    Args:
        secs: Whole seconds, ``>= 0``.
        nanos: Sub-second part, ``0 <= nanos < 1_000_000_000``.

    Raises:
        TypeError: A part is not an ``int``.
        ValueError: ``nanos`` is outside the sub-second range.
        DurationRangeError: The total is negative or above
            ``2**64 - 1`` nanoseconds.
    """

    secs: int = 0
    nanos: int = 0

    ZERO: ClassVar[Duration]
    MAX: ClassVar[Duration]

    def __post_init__(self) -> None:
        _check_int("secs", self.secs)
        _check_int("nanos", self.nanos)
        if not 0 <= self.nanos < NANOS_PER_SEC:
            raise ValueError(
                f"nanos must be in [0, {NANOS_PER_SEC}), got {self.nanos}"
            )
        if self.secs < 0:
            raise DurationRangeError(f"duration cannot be negative: {self.secs}s")
        if self.as_nanos() > MAX_DURATION_NANOS:
            raise DurationRangeError(
                f"duration of {self.as_nanos()}ns exceeds the 64-bit "
                f"nanosecond range"
            )

    # -- constructors -------------------------------------------------------

    @classmethod
    def from_nanos(cls, nanos: int) -> Duration:
        """Build a duration from a total nanosecond count."""
        _check_int("nanos", nanos)
        if nanos < 0:
            raise DurationRangeError(f"duration cannot be negative: {nanos}ns")
        secs, rem = divmod(nanos, NANOS_PER_SEC)
        return cls(secs, rem)

    @classmethod
    def from_micros(cls, micros: int) -> Duration:
        _check_int("micros", micros)
        return cls.from_nanos(micros * NANOS_PER_MICRO)

    @classmethod
    def from_millis(cls, millis: int) -> Duration:
        _check_int("millis", millis)
        return cls.from_nanos(millis * NANOS_PER_MILLI)

    @classmethod
    def from_secs(cls, secs: int) -> Duration:
        _check_int("secs", secs)
        return cls(secs, 0)

    @classmethod
    def from_secs_float(cls, secs: float) -> Duration:
        """Build a duration from fractional seconds, rounded to the nanosecond.

        Raises:
            ValueError: *secs* is NaN or infinite.
            DurationRangeError: *secs* is negative or too large.
        """
        if not math.isfinite(secs):
            raise ValueError(f"duration must be finite, got {secs!r}")
        nanos = secs * NANOS_PER_SEC
        # a finite secs can still overflow to inf here
        if not 0 <= nanos <= MAX_DURATION_NANOS:
            raise DurationRangeError(
                f"{secs!r}s is outside the 64-bit nanosecond range"
            )
        return cls.from_nanos(round(nanos))

    @classmethod
    def from_timedelta(cls, delta: timedelta) -> Duration:
        """Convert a non-negative :class:`~datetime.timedelta`."""
        micros = (delta.days * 86_400 + delta.seconds) * 1_000_000 + delta.microseconds
        return cls.from_nanos(micros * NANOS_PER_MICRO)

    # -- accessors ----------------------------------------------------------

    @property
    def subsec_nanos(self) -> int:
        return self.nanos

    def as_nanos(self) -> int:
        """Total length in nanoseconds."""
        return self.secs * NANOS_PER_SEC + self.nanos

    def as_micros(self) -> int:
        """Total length in whole microseconds (truncated)."""
        return self.as_nanos() // NANOS_PER_MICRO

    def as_millis(self) -> int:
        """Total length in whole milliseconds (truncated)."""
        return self.as_nanos() // NANOS_PER_MILLI

    def as_secs_float(self) -> float:
        return self.secs + self.nanos / NANOS_PER_SEC

    def to_timedelta(self) -> timedelta:
        """Convert to :class:`~datetime.timedelta`, truncating to microseconds."""
        return timedelta(seconds=self.secs, microseconds=self.nanos // NANOS_PER_MICRO)

    # -- arithmetic ---------------------------------------------------------

    def __add__(self, other: object) -> Duration:
        if not isinstance(other, Duration):
            return NotImplemented
        return Duration.from_nanos(self.as_nanos() + other.as_nanos())

    def __sub__(self, other: object) -> Duration:
        if not isinstance(other, Duration):
            return NotImplemented
        diff = self.as_nanos() - other.as_nanos()
        if diff < 0:
            raise DurationRangeError(
                f"cannot subtract {other} from shorter duration {self}"
            )
        return Duration.from_nanos(diff)

    def __mul__(self, factor: object) -> Duration:
        if not isinstance(factor, int) or isinstance(factor, bool):
            return NotImplemented
        return Duration.from_nanos(self.as_nanos() * factor)

    __rmul__ = __mul__

    def __bool__(self) -> bool:
        return bool(self.secs or self.nanos)

    def __str__(self) -> str:
        if self.secs:
            return _strip_fraction(self.secs, self.nanos, 9, "s")
        if self.nanos >= NANOS_PER_MILLI:
            whole, frac = divmod(self.nanos, NANOS_PER_MILLI)
            return _strip_fraction(whole, frac, 6, "ms")
        if self.nanos >= NANOS_PER_MICRO:
            whole, frac = divmod(self.nanos, NANOS_PER_MICRO)
            return _strip_fraction(whole, frac, 3, "µs")
        return f"{self.nanos}ns"


Duration.ZERO = Duration(0, 0)
Duration.MAX = Duration.from_nanos(MAX_DURATION_NANOS)
