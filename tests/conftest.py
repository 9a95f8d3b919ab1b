import pytest

from connect4.debug import debug, DebugLevel


@pytest.fixture(autouse=True)
def quiet_debug():
    """Keep the shared debug manager quiet and restore its level afterwards."""
    previous = debug.level
    debug.configure(level=DebugLevel.WARNING)
    yield
    debug.configure(level=previous)
