"""Form interaction helpers shared by login flows.

Candidate selectors are tried in priority order; the first visible element wins.
"""

from collections.abc import Sequence

from loguru import logger
from playwright.sync_api import ElementHandle, Page


def first_visible(page: Page, selectors: Sequence[str]) -> ElementHandle | None:
    """Return the first visible element matching the candidates, in priority order."""
    for selector in selectors:
        for element in page.query_selector_all(selector):
            if element.is_visible():
                logger.debug(f"Using visible element for {selector}")
                return element
    return None


def fill_first_visible(
    page: Page, selectors: Sequence[str], value: str, timeout_ms: int
) -> None:
    """Fill the first visible candidate field.

    If no candidate is visible yet, falls back to Playwright's auto-waiting
    fill on the combined selector; its timeout propagates.

    Raises:
        playwright.sync_api.TimeoutError: If no candidate becomes fillable in time
    """
    element = first_visible(page, selectors)
    if element is not None:
        element.fill(value)
        return

    page.fill(", ".join(selectors), value, timeout=timeout_ms)


def click_first_visible(page: Page, selectors: Sequence[str], timeout_ms: int) -> None:
    """Click the first visible candidate control, falling back to an auto-waiting click."""
    element = first_visible(page, selectors)
    if element is not None:
        element.click()
        return

    page.click(", ".join(selectors), timeout=timeout_ms)
