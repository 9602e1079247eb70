"""Pytest configuration for conformance tests."""

import pytest
from tests.conformance.runners.backend_runner import all_runners


def get_available_runners():
    """Return list of available conformance runners."""
    return all_runners()


@pytest.fixture(params=get_available_runners(), ids=lambda r: r.name)
def runner(request):
    """Provide conformance runner for testing.

    This fixture is parametrized to run tests against all available runners:
    - plain: uncolored text backend
    - ansi: rich terminal backend without syntax coloring
    - ansi-highlighted: rich terminal backend with the default theme
    """
    return request.param
