"""Pytest plugin providing shared test fixtures for edgetime.

Auto-registers ``fake_clock`` and ``settings`` fixtures for any test
suite that depends on edgetime, via the ``pytest11`` entry point.

Imports are deferred into the fixture bodies so that edgetime modules
are first imported after ``pytest-cov`` starts tracing.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

if TYPE_CHECKING:
    from edgetime._settings import Settings
    from edgetime.testing._clock import FakeClock


@pytest.fixture
def fake_clock() -> FakeClock:
    """FakeClock starting at Instant(0)."""
    from edgetime.testing._clock import FakeClock

    return FakeClock()


@pytest.fixture
def settings() -> Settings:
    """Settings built from model defaults only."""
    from edgetime.testing._settings import make_settings

    return make_settings()
