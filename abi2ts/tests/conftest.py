"""Unit tests configuration file."""

import pytest

from abi2ts.generator.types import TransformOptions
from abi2ts.generator.util import identity, to_pascal_case


def pytest_configure(config):
    """Disable verbose output when running tests."""
    terminal = config.pluginmanager.getplugin("terminal")
    if terminal:
        terminal.TerminalReporter.showfspath = False


@pytest.fixture
def pascal_options():
    return TransformOptions(type_formatter=to_pascal_case)


@pytest.fixture
def identity_options():
    return TransformOptions(type_formatter=identity)
