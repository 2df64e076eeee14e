"""
Pytest configuration shared by unit and E2E tests
"""
import importlib.util

import pytest

MARKERS = {
    "smoke": "fast checks that a module's main page renders",
    "ui": "browser-driven tests",
    "api": "REST API tests",
    "auth": "tests that log in",
    "mobile": "tests in a phone-sized viewport",
    "a11y": "accessibility checks",
    "slow": "marks tests as slow",
}


def pytest_configure(config):
    """Register markers."""
    for name, description in MARKERS.items():
        config.addinivalue_line("markers", f"{name}: {description}")


def pytest_collection_modifyitems(config, items):
    """Skip browser and API tests if playwright is not installed."""
    if importlib.util.find_spec("playwright") is not None:
        return

    skip_e2e = pytest.mark.skip(reason="Playwright not installed")
    for item in items:
        if "e2e" in item.path.parts:
            item.add_marker(skip_e2e)
