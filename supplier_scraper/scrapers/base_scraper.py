"""Abstract base class for supplier-specific extractors.

Shared selector lookups live here; subclasses only declare selector chains
and how fields are assembled.
"""

from abc import ABC, abstractmethod
from collections.abc import Sequence
from urllib.parse import urljoin

from loguru import logger
from playwright.sync_api import Page

from supplier_scraper.models import ProductRecord
from supplier_scraper.types import ImageUrl, ProductUrl, SupplierVariant

Selectors = Sequence[str]

OUTER_HTML_LIMIT = 500


def _clean_text(text: str | None) -> str | None:
    if text is None:
        return None
    text = text.strip()
    return text or None


def first_text(page: Page, selectors: Selectors) -> str | None:
    """Return trimmed text of the first selector that yields non-empty text.

    Selectors are tried in order; a missing element or blank text moves on
    to the next candidate.

    Args:
        page: Loaded Playwright page
        selectors: Candidate CSS selectors in priority order

    Returns:
        Trimmed text content, or None if no candidate resolved
    """
    for selector in selectors:
        element = page.query_selector(selector)
        if element is None:
            continue
        text = _clean_text(element.text_content())
        if text:
            return text
    return None


def first_image_url(page: Page, selectors: Selectors) -> ImageUrl | None:
    """Return the absolute src of the first matching image element."""
    for selector in selectors:
        element = page.query_selector(selector)
        if element is None:
            continue
        src = _clean_text(element.get_attribute("src"))
        if src:
            return ImageUrl(urljoin(page.url, src))
    return None


def first_outer_html(
    page: Page, selectors: Selectors, limit: int = OUTER_HTML_LIMIT
) -> str | None:
    """Return the truncated outerHTML of the first matching element."""
    for selector in selectors:
        element = page.query_selector(selector)
        if element is None:
            continue
        html = element.evaluate("el => el.outerHTML")
        if html:
            return html[:limit]
    return None


def joined_text(page: Page, selector: str, separator: str = " > ") -> str | None:
    """Join the trimmed text of every element matching selector.

    Used for breadcrumb trails. Blank entries are dropped.
    """
    parts = []
    for element in page.query_selector_all(selector):
        text = _clean_text(element.text_content())
        if text:
            parts.append(text)
    return separator.join(parts) if parts else None


class BaseExtractor(ABC):
    """Abstract base class for field extraction from a rendered product page.

    Subclasses must implement:
    - extract(page) - Build a ProductRecord from the loaded page

    Field lookups are independent: an unresolved field is None, never an
    error. Only faults from the page itself propagate.
    """

    variant: SupplierVariant

    @abstractmethod
    def extract(self, page: Page) -> ProductRecord:
        """Extract product fields from a loaded page.

        Args:
            page: Page already navigated to the product URL

        Returns:
            Product record with every resolvable field populated

        Raises:
            playwright.sync_api.Error: If the page handle is unusable
        """
        pass

    def _record(self, page: Page, **fields) -> ProductRecord:
        """Build a ProductRecord bound to the page's current URL."""
        record = ProductRecord(source_url=ProductUrl(page.url), **fields)
        logger.debug(
            f"{self.variant.value} fields: name={record.name!r}, "
            f"sku={record.sku!r}, price={record.price!r}"
        )
        return record
