"""
Report downloads.

Exported reports are named after their module, e.g. ``pharmacy-2026-10.csv``
or ``Radiology_TAT.xlsx``.
"""

import logging
import re
from typing import Callable, Optional, Pattern

from playwright.sync_api import Download, Page
from playwright.sync_api import TimeoutError as PlaywrightTimeoutError

logger = logging.getLogger(__name__)

REPORT_EXTENSIONS = ("csv", "xlsx", "pdf")


def report_filename_pattern(module: str) -> Pattern:
    """Case-insensitive ``<module>.*\\.(csv|xlsx|pdf)``."""
    extensions = "|".join(REPORT_EXTENSIONS)
    return re.compile(rf"{re.escape(module)}.*\.({extensions})", re.IGNORECASE)


def matches_report_filename(module: str, filename: str) -> bool:
    return report_filename_pattern(module).search(filename or "") is not None


def capture_optional_download(
    page: Page, trigger: Callable[[], None], timeout: int = 5000
) -> Optional[Download]:
    """
    Run trigger and return the download it starts, if any.

    Some exports open a preview instead of downloading, so a missing
    download within the timeout yields None rather than an error. Errors
    raised by trigger itself (a click that times out) propagate.
    """
    triggered = False
    try:
        with page.expect_download(timeout=timeout) as download_info:
            trigger()
            triggered = True
        download = download_info.value
    except PlaywrightTimeoutError:
        if not triggered:
            raise
        logger.info("No download started within %dms", timeout)
        return None

    logger.info("Download started: %s", download.suggested_filename)
    return download
