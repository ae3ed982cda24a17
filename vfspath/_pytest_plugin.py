"""pytest fixture plugin.

Usage::

    # conftest.py
    pytest_plugins = ["vfspath._pytest_plugin"]

This makes the ``posix_paths`` and ``windows_paths`` fixtures available::

    def test_something(windows_paths):
        assert windows_paths.join("C:", "f") == "C:f"
"""

import pytest

from ._ostype import OSType
from ._utils import PathUtils


@pytest.fixture
def posix_paths() -> PathUtils:
    """A :class:`PathUtils` with Linux path semantics, whatever the host."""
    return PathUtils(OSType.LINUX)


@pytest.fixture
def windows_paths() -> PathUtils:
    """A :class:`PathUtils` with Windows path semantics, whatever the host."""
    return PathUtils(OSType.WINDOWS)
