"""Smoke tests for the installed edgetime distribution.

Test Techniques Used:
- Specification-based: Version metadata and the entry points declared
  in pyproject.toml resolve to the shipped objects.
"""

from importlib.metadata import entry_points

import edgetime
from edgetime._cli import main
from edgetime.testing import _plugin


class TestDistribution:
    """The package exposes its version and registers its entry points."""

    def test_version_is_string(self) -> None:
        """Package exposes a non-empty version string."""
        assert isinstance(edgetime.__version__, str)
        assert edgetime.__version__

    def test_console_script_points_at_cli(self) -> None:
        """The ``edgetime`` console script loads the CLI entry function."""
        (script,) = entry_points(group="console_scripts", name="edgetime")
        assert script.load() is main

    def test_pytest_plugin_registered(self) -> None:
        """The ``pytest11`` entry point loads the fixture plugin module."""
        (plugin,) = entry_points(group="pytest11", name="edgetime")
        assert plugin.load() is _plugin
