"""Exceptions raised by instant and duration arithmetic.

Counter arithmetic is **checked**: an operation that would take an
:class:`~edgetime.Instant` outside ``0 ..= 2**128 - 1`` or a
:class:`~edgetime.Duration` outside ``0 ..= 2**64 - 1`` nanoseconds
raises instead of wrapping.

Hierarchy::

    ArithmeticError
    └── TimeArithmeticError
        ├── InstantOrderError       ← later.duration_since(earlier) misuse
        ├── InstantRangeError       ← also an OverflowError
        └── DurationRangeError      ← also an OverflowError

Callers that want to treat every failure the same way catch
:class:`TimeArithmeticError`.  :func:`error_details` turns any of them
into a flat dict suitable for structured logging.
"""

from __future__ import annotations


class TimeArithmeticError(ArithmeticError):
    """Base class for all instant/duration arithmetic failures."""

    error_type = "time_arithmetic"


class InstantOrderError(TimeArithmeticError):
    """Elapsed time was requested from an instant that is actually later.

    Attributes:
        later_ns: Raw count of the instant the method was called on.
        earlier_ns: Raw count of the instant passed as ``earlier``.
    """

    error_type = "instant_order"

    def __init__(self, later_ns: int, earlier_ns: int) -> None:
        super().__init__(
            f"instants out of order: 'earlier' ({earlier_ns}ns) is "
            f"{earlier_ns - later_ns}ns after 'self' ({later_ns}ns)"
        )
        self.later_ns = later_ns
        self.earlier_ns = earlier_ns


class InstantRangeError(TimeArithmeticError, OverflowError):
    """An instant count fell outside the unsigned 128-bit range."""

    error_type = "instant_range"


class DurationRangeError(TimeArithmeticError, OverflowError):
    """A duration fell outside the unsigned 64-bit nanosecond range."""

    error_type = "duration_range"


def error_details(error: TimeArithmeticError) -> dict[str, object]:
    """Describe *error* as a flat, JSON-serialisable dict.

    Always contains ``error_type`` and ``message``; order errors add the
    two raw counts involved.
    """
    details: dict[str, object] = {
        "error_type": error.error_type,
        "message": str(error),
    }
    if isinstance(error, InstantOrderError):
        details["later_ns"] = error.later_ns
        details["earlier_ns"] = error.earlier_ns
    return details
