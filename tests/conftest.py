"""Pytest configuration and shared fixtures."""

import pytest

# The edgetime testing plugin is registered via a ``pytest11`` entry
# point for external consumers.  Our own suite disables it
# (``-p no:edgetime``) and loads it here instead, so its imports are
# measured by coverage.
pytest_plugins = ["edgetime.testing._plugin"]


def pytest_configure(config: pytest.Config) -> None:
    """Configure pytest markers."""
    config.addinivalue_line(
        "markers", "unit: Unit tests (fast, no external dependencies)"
    )
