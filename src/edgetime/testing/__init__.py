"""Public test-support utilities for edgetime.

Provided symbols:

- :class:`FakeClock` — deterministic instant producer for timing tests.
- :func:`make_settings` — factory for ``Settings`` without ``.env`` files.
"""

from edgetime.testing._clock import FakeClock
from edgetime.testing._settings import make_settings

__all__ = [
    "FakeClock",
    "make_settings",
]
