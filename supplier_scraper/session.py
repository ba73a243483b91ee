"""Per-request Playwright browser session.

Each scrape gets its own driver, browser and context, so cookies from one
account login never reach another request.
"""

from typing import Optional

from loguru import logger
from playwright.sync_api import (
    Browser,
    BrowserContext,
    Page,
    Playwright,
    sync_playwright,
)

from supplier_scraper.errors import ResourceError
from supplier_scraper.models import ScraperSettings


class BrowserSession:
    """Owns one isolated Chromium browser for the lifetime of a request."""

    def __init__(self, settings: ScraperSettings):
        """Initialize session with configuration.

        Args:
            settings: Launch options (headless, args, user agent)
        """
        self.settings = settings
        self._playwright: Optional[Playwright] = None
        self._browser: Optional[Browser] = None
        self._context: Optional[BrowserContext] = None
        self._page: Optional[Page] = None

    def open(self) -> Page:
        """Launch the browser and return a fresh page.

        Returns:
            Playwright Page instance
        """
        if self._page is not None:
            return self._page

        self._playwright = sync_playwright().start()
        self._browser = self._playwright.chromium.launch(
            headless=self.settings.headless,
            args=list(self.settings.launch_args),
        )
        self._context = self._browser.new_context(user_agent=self.settings.user_agent)
        self._page = self._context.new_page()

        logger.debug("Browser session opened")
        return self._page

    def close(self) -> None:
        """Close page, context, browser and driver.

        Every handle is released even if an earlier one fails to close;
        failures are logged and never raised.
        """
        steps = (
            ("page", self._page, "close"),
            ("context", self._context, "close"),
            ("browser", self._browser, "close"),
            ("playwright", self._playwright, "stop"),
        )
        for label, handle, method in steps:
            if handle is None:
                continue
            try:
                getattr(handle, method)()
            except Exception as e:
                error = ResourceError(f"Failed to release {label}: {e}")
                logger.warning(f"{error.kind.value}: {error}")

        self._page = None
        self._context = None
        self._browser = None
        self._playwright = None

        logger.debug("Browser session closed")

    def __enter__(self) -> Page:
        """Context manager entry - open browser."""
        return self.open()

    def __exit__(self, exc_type, exc_val, exc_tb):
        """Context manager exit - close browser."""
        self.close()
