"""Clock probe: sample a producer and summarise its step sizes.

Takes a burst of readings from a :class:`~edgetime.ClockPort` and
reports the smallest, largest and mean step between consecutive
instants.  Useful for checking the effective resolution of the
monotonic clock on a target board before relying on it for interrupt
latency measurements.

A reading that goes backwards violates the producer contract and
surfaces as :class:`~edgetime.InstantOrderError`.
"""

from __future__ import annotations

import json
import logging
import time
from collections.abc import Callable
from dataclasses import dataclass

from edgetime._clock import ClockPort
from edgetime._duration import Duration
from edgetime._instant import Instant

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class ProbeReport:
    """Summary of one probe run.

    Attributes:
        samples: Number of readings taken.
        oldest: Earliest instant observed.
        newest: Latest instant observed.
        span: ``newest - oldest``.
        min_step: Shortest gap between consecutive readings.
        max_step: Longest gap between consecutive readings.
        mean_step: Mean gap, truncated to the nanosecond.
        stalls: Consecutive readings with identical instants.
    """

    samples: int
    oldest: Instant
    newest: Instant
    span: Duration
    min_step: Duration
    max_step: Duration
    mean_step: Duration
    stalls: int

    def to_dict(self) -> dict[str, int]:
        """Flatten to raw nanosecond counts for serialisation."""
        return {
            "samples": self.samples,
            "oldest_ns": self.oldest.into_inner(),
            "newest_ns": self.newest.into_inner(),
            "span_ns": self.span.as_nanos(),
            "min_step_ns": self.min_step.as_nanos(),
            "max_step_ns": self.max_step.as_nanos(),
            "mean_step_ns": self.mean_step.as_nanos(),
            "stalls": self.stalls,
        }

    def to_json(self) -> str:
        """Serialise to a JSON string."""
        return json.dumps(self.to_dict())


def probe_clock(
    clock: ClockPort,
    *,
    samples: int,
    interval: Duration = Duration.ZERO,
    sleep: Callable[[float], None] = time.sleep,
) -> ProbeReport:
    """Sample *clock* ``samples`` times and summarise the steps.

    Args:
        clock: Producer under test.
        samples: Number of readings, at least 2.
        interval: Pause between readings.  Zero means back-to-back.
        sleep: Blocking sleep taking seconds; injectable for tests.

    Returns:
        A :class:`ProbeReport` for the run.

    Raises:
        ValueError: *samples* is below 2.
        InstantOrderError: A reading went backwards.
    """
    if samples < 2:
        raise ValueError(f"samples must be at least 2, got {samples}")

    pause = interval.as_secs_float()
    readings = [clock.now()]
    for _ in range(samples - 1):
        if interval:
            sleep(pause)
        readings.append(clock.now())

    steps = [later - earlier for earlier, later in zip(readings, readings[1:])]
    oldest, newest = min(readings), max(readings)
    total = sum(step.as_nanos() for step in steps)

    report = ProbeReport(
        samples=samples,
        oldest=oldest,
        newest=newest,
        span=newest - oldest,
        min_step=min(steps),
        max_step=max(steps),
        mean_step=Duration.from_nanos(total // len(steps)),
        stalls=sum(1 for step in steps if not step),
    )
    logger.debug(
        "Probed %d samples: min step %s, max step %s, %d stalls",
        samples,
        report.min_step,
        report.max_step,
        report.stalls,
    )
    return report
