"""
Application readiness probe.

The browser suite runs against an externally started application. Before
launching a browser the session waits for the base URL to answer.
"""

import logging
import time

import pytest
import requests

from .errors import AppUnavailableError

logger = logging.getLogger(__name__)


def wait_for_app(base_url: str, timeout: float = 30.0, interval: float = 0.5) -> bool:
    """
    Poll base_url until it answers with a non-5xx status.

    Args:
        base_url: Application root, e.g. http://localhost:5173
        timeout: Seconds to keep polling
        interval: Seconds between attempts

    Returns:
        True once the app answers, False if the timeout elapses first
    """
    deadline = time.monotonic() + timeout
    attempt = 0
    while True:
        attempt += 1
        try:
            resp = requests.get(base_url, timeout=min(5.0, max(interval, 1.0)))
            if resp.status_code < 500:
                logger.info("Application at %s is up (HTTP %s)", base_url, resp.status_code)
                return True
            logger.debug("Attempt %d: %s returned %s", attempt, base_url, resp.status_code)
        except requests.exceptions.RequestException as e:
            logger.debug("Attempt %d: %s not reachable: %s", attempt, base_url, e)

        if time.monotonic() >= deadline:
            logger.warning("Application at %s not reachable after %d attempts", base_url, attempt)
            return False
        time.sleep(interval)


def ensure_app_available(
    base_url: str, timeout: float = 30.0, interval: float = 0.5, require: bool = False
) -> str:
    """
    Wait for the application and decide what an outage means for the run.

    Returns base_url once the app answers. Otherwise the calling test is
    skipped, or AppUnavailableError is raised when require is set.
    """
    if wait_for_app(base_url, timeout=timeout, interval=interval):
        return base_url

    if require:
        raise AppUnavailableError(base_url, timeout)
    pytest.skip(f"Application not reachable at {base_url}")
