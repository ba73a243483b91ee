"""Orchestrator for a single product scrape.

Runs login -> navigate -> settle -> classify -> extract -> capture, and turns
every fatal error into a ScrapeFailure. The browser session is always closed
before the outcome is returned.
"""

import time
from collections.abc import Iterator
from contextlib import contextmanager
from typing import Callable, Optional
from urllib.parse import urlparse

from loguru import logger
from playwright.sync_api import Page

from supplier_scraper.auth import attempt_login
from supplier_scraper.classifier import detect_supplier
from supplier_scraper.errors import (
    AuthenticationDegraded,
    ExtractionError,
    NavigationError,
    ScrapeError,
    SessionError,
    ValidationError,
)
from supplier_scraper.models import (
    Credentials,
    ProductRecord,
    ScrapeFailure,
    ScrapeOutcome,
    ScrapeRequest,
    ScrapeSuccess,
    ScraperSettings,
)
from supplier_scraper.scrapers.registry import get_extractor_class
from supplier_scraper.session import BrowserSession
from supplier_scraper.types import ErrorKind, ScrapeStage, SupplierVariant

SessionFactory = Callable[[ScraperSettings], BrowserSession]


def validate_request(request: ScrapeRequest) -> None:
    """Check the request before any browser work.

    Raises:
        ValidationError: If target_url is missing or not an absolute http(s) URL
    """
    url = (request.target_url or "").strip()
    if not url:
        raise ValidationError("URL is required")

    parsed = urlparse(url)
    if parsed.scheme not in ("http", "https") or not parsed.netloc:
        raise ValidationError(f"URL must be an absolute http(s) URL: {url}")


class ScrapeOrchestrator:
    """Coordinates one browser session per scrape request."""

    def __init__(
        self,
        settings: ScraperSettings | None = None,
        session_factory: Optional[SessionFactory] = None,
    ):
        """Initialize orchestrator.

        Args:
            settings: Timeouts and launch options (defaults if omitted)
            session_factory: Builds the per-request browser session
        """
        self.settings = settings or ScraperSettings()
        self._session_factory = session_factory or BrowserSession

    def scrape(self, request: ScrapeRequest) -> ScrapeOutcome:
        """Scrape one product page.

        Args:
            request: Target URL and optional account credentials

        Returns:
            ScrapeSuccess with product data, or ScrapeFailure describing the
            stage that failed. Never raises for scrape errors.
        """
        logger.info(f"Received scrape request: {request.log_summary()}")

        try:
            validate_request(request)
        except ValidationError as e:
            logger.error(f"Rejected scrape request: {e}")
            return ScrapeFailure(error_kind=e.kind, details=str(e), reason=e.reason)

        session = self._session_factory(self.settings)
        stage = ScrapeStage.START
        timings: dict[str, float] = {}
        try:
            try:
                page = session.open()
            except Exception as e:
                raise SessionError(f"Could not launch browser: {e}") from e

            if request.credentials is not None and request.credentials.can_login:
                stage = ScrapeStage.LOGGING_IN
                with _timed(timings, stage):
                    self._login(page, request.credentials)

            stage = ScrapeStage.NAVIGATING
            with _timed(timings, stage):
                self._navigate(page, request.target_url)

            stage = ScrapeStage.RENDERING
            with _timed(timings, stage):
                page.wait_for_timeout(self.settings.render_settle_ms)

            stage = ScrapeStage.CLASSIFYING
            variant = detect_supplier(request.target_url)
            logger.info(f"Detected supplier: {variant.value}")

            stage = ScrapeStage.EXTRACTING
            with _timed(timings, stage):
                record = self._extract(page, variant)

            stage = ScrapeStage.CAPTURING_DIAGNOSTIC
            with _timed(timings, stage):
                image = self._capture_diagnostic(page)

            stage = ScrapeStage.DONE
            logger.success(
                f"Scrape successful: name={record.name!r}, sku={record.sku!r}, "
                f"price={record.price!r}"
            )
            logger.debug(f"Stage timings (s): {timings}")
            return ScrapeSuccess(
                data=record, diagnostic_image=image, supplier_variant=variant
            )

        except ScrapeError as e:
            logger.error(f"Scraping error during {stage.value}: {e}")
            logger.debug(f"Stage timings (s): {timings}")
            return ScrapeFailure(error_kind=e.kind, details=str(e), reason=e.reason)

        except Exception as e:
            logger.exception(f"Unexpected error during {stage.value}: {e}")
            return ScrapeFailure(
                error_kind=ErrorKind.EXTRACTION,
                details=f"Unexpected error during {stage.value}: {e}",
            )

        finally:
            session.close()

    def _login(self, page: Page, credentials: Credentials) -> None:
        """Run the login flow; failures are logged and the scrape continues."""
        result = attempt_login(page, credentials, self.settings)
        if result.success:
            logger.info("Login complete, now navigating to product page...")
            return

        if result.attempted:
            degraded = AuthenticationDegraded(
                f"Login via {result.flow} failed: {result.error}"
            )
            logger.warning(
                f"{degraded.kind.value}: {degraded}. Continuing with public pricing"
            )

    def _navigate(self, page: Page, url: str) -> None:
        """Load the product page.

        Raises:
            NavigationError: If the page fails to load within the timeout
        """
        logger.info(f"Navigating to product: {url}")
        try:
            response = page.goto(
                url,
                wait_until="domcontentloaded",
                timeout=self.settings.navigation_timeout_ms,
            )
        except Exception as e:
            raise NavigationError(f"Failed to load {url}: {e}") from e

        if response is not None and response.status >= 400:
            logger.warning(f"HTTP {response.status} for {url}, extracting anyway")

    def _extract(self, page: Page, variant: SupplierVariant) -> ProductRecord:
        """Run the extractor bound to the supplier variant.

        Raises:
            ExtractionError: If the extractor faults
        """
        extractor = get_extractor_class(variant)()
        try:
            return extractor.extract(page)
        except Exception as e:
            raise ExtractionError(f"{variant.value} extraction failed: {e}") from e

    def _capture_diagnostic(self, page: Page) -> bytes | None:
        """Capture a JPEG of the current viewport.

        Raises:
            ExtractionError: If capture fails and require_diagnostic_image is set
        """
        try:
            return page.screenshot(
                full_page=False,
                type="jpeg",
                quality=self.settings.screenshot_quality,
            )
        except Exception as e:
            if self.settings.require_diagnostic_image:
                raise ExtractionError(f"Diagnostic screenshot failed: {e}") from e
            logger.warning(f"Diagnostic screenshot failed, continuing without it: {e}")
            return None


@contextmanager
def _timed(timings: dict[str, float], stage: ScrapeStage) -> Iterator[None]:
    """Record the wall time of a stage into timings."""
    start = time.monotonic()
    try:
        yield
    finally:
        timings[stage.value] = round(time.monotonic() - start, 3)


def scrape_product(
    url: str,
    credentials: Credentials | None = None,
    settings: ScraperSettings | None = None,
) -> ScrapeOutcome:
    """Convenience function for scraping a single product page.

    Args:
        url: Product page URL
        credentials: Optional account credentials for account pricing
        settings: Optional settings (defaults if omitted)

    Returns:
        ScrapeSuccess or ScrapeFailure
    """
    orchestrator = ScrapeOrchestrator(settings=settings)
    return orchestrator.scrape(ScrapeRequest(target_url=url, credentials=credentials))
