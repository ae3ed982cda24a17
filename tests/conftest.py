import pytest
from vfspath import POSIX, WINDOWS
from vfspath._pytest_plugin import posix_paths, windows_paths  # noqa: F401


@pytest.fixture(params=[POSIX, WINDOWS], ids=["posix", "windows"])
def sem(request):
    """Runs a test once per path syntax."""
    return request.param
