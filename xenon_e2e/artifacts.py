"""
Failure artifacts.

Screenshots are written to the configured artifacts directory as
``failure_<test name>_<timestamp>.png``.
"""

import logging
from contextlib import contextmanager
from datetime import datetime
from pathlib import Path
from typing import Iterator, Optional

from playwright.sync_api import Page

logger = logging.getLogger(__name__)


def node_failed(node) -> bool:
    """True when the setup or call phase of a test item failed."""
    for when in ("setup", "call"):
        report = getattr(node, f"rep_{when}", None)
        if report is not None and report.failed:
            return True
    return False


def failure_screenshot_path(
    artifacts_dir: Path, test_name: str, now: Optional[datetime] = None
) -> Path:
    timestamp = (now or datetime.now()).strftime("%Y%m%d_%H%M%S")
    safe_name = test_name.replace("/", "_").replace(":", "_")
    return Path(artifacts_dir) / f"failure_{safe_name}_{timestamp}.png"


def save_failure_screenshot(page: Page, artifacts_dir: Path, test_name: str) -> Optional[Path]:
    """Full-page screenshot of page; None when the page is already closed."""
    if page.is_closed():
        return None

    path = failure_screenshot_path(artifacts_dir, test_name)
    path.parent.mkdir(parents=True, exist_ok=True)
    page.screenshot(path=str(path), full_page=True)
    logger.info("Screenshot saved: %s", path)
    return path


@contextmanager
def screenshot_on_error(page: Page, artifacts_dir: Path, test_name: str) -> Iterator[Page]:
    """
    Screenshot page if the block raises, then re-raise.

    Used around fixture setup steps such as logging in, where the test
    report that normally triggers a screenshot does not exist yet.
    """
    try:
        yield page
    except Exception:
        save_failure_screenshot(page, artifacts_dir, test_name)
        raise
