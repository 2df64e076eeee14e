"""
Conditional interaction helpers.

Scenarios often depend on UI that only some tenants or data sets render
(a "Dispense" button needs a pending prescription, an "Export" button needs
the reports feature). Two kinds of guard exist:

- ``require_visible`` protects the entry point of a scenario. When the
  element is missing the test is reported as *skipped* with a reason, so
  reduced coverage is visible in the run summary instead of passing silently.
- ``*_if_visible`` protect optional fields inside a form that is already
  open. Missing fields are logged and the scenario continues.
"""

import logging
import re
from typing import Optional, Pattern, Union

import pytest
from playwright.sync_api import Locator, Page, expect

logger = logging.getLogger(__name__)

TextPattern = Union[str, Pattern]


def rx(pattern: TextPattern) -> Pattern:
    """Case-insensitive regex, as used by every role/label/text lookup."""
    if isinstance(pattern, str):
        return re.compile(pattern, re.IGNORECASE)
    return pattern


def require_visible(locator: Locator, description: str) -> Locator:
    """Return locator if visible, otherwise skip the running test."""
    if not locator.is_visible():
        logger.info("Skipping: %s not rendered", description)
        pytest.skip(f"{description} not rendered")
    return locator


def require_all_visible(*pairs) -> None:
    """require_visible over (locator, description) pairs, in order."""
    for locator, description in pairs:
        require_visible(locator, description)


def click_if_visible(locator: Locator, description: str = "element") -> bool:
    if locator.is_visible():
        locator.click()
        return True
    logger.debug("Optional %s absent, not clicked", description)
    return False


def fill_if_visible(locator: Locator, value: str, description: str = "field") -> bool:
    if locator.is_visible():
        locator.fill(value)
        return True
    logger.debug("Optional %s absent, not filled", description)
    return False


def check_if_visible(locator: Locator, description: str = "checkbox") -> bool:
    if locator.is_visible():
        locator.check()
        return True
    logger.debug("Optional %s absent, not checked", description)
    return False


def choose_option(page: Page, trigger: Locator, option_name: Optional[TextPattern] = None) -> None:
    """Open a select/combobox and pick the first (matching) option."""
    trigger.click()
    if option_name is None:
        page.get_by_role("option").first.click()
    else:
        page.get_by_role("option", name=rx(option_name)).first.click()


def choose_option_if_visible(
    page: Page,
    trigger: Locator,
    option_name: Optional[TextPattern] = None,
    description: str = "select",
) -> bool:
    if trigger.is_visible():
        choose_option(page, trigger, option_name)
        return True
    logger.debug("Optional %s absent, nothing chosen", description)
    return False


def expect_first_if_any(locator: Locator) -> int:
    """When locator matches anything, its first match must be visible."""
    count = locator.count()
    if count > 0:
        expect(locator.first).to_be_visible()
    return count
