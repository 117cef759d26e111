"""Root-level pytest fixtures for the runtime_ensure test suite.

Checks are off by default, so every test runs with them switched on and
the previous switch state restored afterwards. Tests that need the
disabled behaviour use the ``checks_disabled`` fixture.
"""

import pytest

from runtime_ensure import config


# =============================================================================
# Switch Fixtures
# =============================================================================

@pytest.fixture(autouse=True)
def checks_enabled():
    """Enable checks for the duration of a test."""
    with config.enabled(True) as settings:
        yield settings


@pytest.fixture
def checks_disabled(checks_enabled):
    """Disable checks for the duration of a test.

    Examples
    --------
    >>> def test_noop(checks_disabled):
    ...     argument_not_none(None, "x")  # does not raise
    """
    with config.enabled(False) as settings:
        yield settings


@pytest.fixture
def type_name():
    """Fully qualified name of a type, as it appears in enum messages."""
    def _name(tp):
        return f"{tp.__module__}.{tp.__qualname__}"

    return _name
