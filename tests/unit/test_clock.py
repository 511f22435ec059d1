"""Unit tests for edgetime._clock — clock port and system adapter.

Test Techniques Used:
    - Specification-based Testing: Verifying ClockPort protocol
      contract
    - Protocol Conformance: isinstance checks for structural
      subtyping
    - Boundary Value Analysis: Monotonic ordering guarantees
"""

from __future__ import annotations

from edgetime._clock import ClockPort, SystemClock
from edgetime._duration import Duration
from edgetime._instant import Instant


class TestSystemClock:
    """Tests for SystemClock production implementation.

    Technique: Specification-based Testing — verifying public
    contract.
    """

    def test_satisfies_clock_port_protocol(self) -> None:
        """SystemClock is recognized as ClockPort."""
        clock = SystemClock()
        assert isinstance(clock, ClockPort)

    def test_now_returns_instant(self) -> None:
        """now() returns an Instant."""
        clock = SystemClock()
        assert isinstance(clock.now(), Instant)

    def test_now_is_monotonically_non_decreasing(self) -> None:
        """Successive calls return non-decreasing instants."""
        clock = SystemClock()
        t1 = clock.now()
        t2 = clock.now()
        assert t2 >= t1

    def test_elapsed_is_non_negative(self) -> None:
        """elapsed() measures forward from an earlier reading."""
        clock = SystemClock()
        start = clock.now()
        assert clock.elapsed(start) >= Duration.ZERO


class TestClockPortProtocol:
    """Tests for ClockPort protocol definition.

    Technique: Protocol Conformance — structural subtyping checks.
    """

    def test_custom_class_satisfies_protocol(self) -> None:
        """A class with now() satisfies ClockPort."""

        class InterruptClock:
            def now(self) -> Instant:
                return Instant(42)

        assert isinstance(InterruptClock(), ClockPort)

    def test_class_without_now_does_not_satisfy(self) -> None:
        """A class without now() does not satisfy ClockPort."""

        class NotAClock:
            pass

        assert not isinstance(NotAClock(), ClockPort)
