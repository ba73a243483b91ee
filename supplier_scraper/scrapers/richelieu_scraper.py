"""Richelieu.com product extractor.

Account pricing markup (pms-* classes) only renders for a logged-in session,
so every price lookup tries those selectors before the public fallbacks.
"""

from loguru import logger
from playwright.sync_api import Page

from supplier_scraper.models import ProductRecord
from supplier_scraper.scrapers.base_scraper import (
    BaseExtractor,
    first_image_url,
    first_outer_html,
    first_text,
    joined_text,
)
from supplier_scraper.types import SKU, SupplierVariant


class RichelieuExtractor(BaseExtractor):
    """Extractor for Richelieu product pages."""

    variant = SupplierVariant.RICHELIEU

    NAME_SELECTORS = (
        "h1.product-name",
        'h1[itemprop="name"]',
        ".product-title h1",
        "h1",
    )
    SKU_SELECTORS = (
        ".pms-PartNumber",
        '[itemprop="sku"]',
        ".product-sku",
        ".product-code",
        ".sku-number",
    )
    ACCOUNT_PRICE_SELECTORS = (
        ".pms-Price",
        '[itemprop="price"]',
        ".product-price",
        ".pms-PriceBlock_Main .pms-PriceBlock_BreaksPrice",
    )
    PUBLIC_PRICE_SELECTORS = (
        ".your-price",
        ".price-now",
        ".price",
        '[class*="price"]',
    )
    PRICE_BLOCK_ITEMS = ".pms-PriceBlock li"
    MSRP_KEYWORDS = ("msrp", "list", "retail")
    MSRP_SELECTORS = (
        ".list-price",
        ".price-was",
        ".msrp-price",
        ".retail-price",
    )
    DESCRIPTION_SELECTORS = (
        ".product-description",
        ".product-details",
        '[itemprop="description"]',
    )
    BRAND_SELECTORS = (
        ".product-brand",
        ".brand-name",
        '[itemprop="brand"]',
    )
    IMAGE_SELECTORS = (
        ".product-image img",
        ".main-image img",
        'img[itemprop="image"]',
    )
    BREADCRUMB_LINKS = ".breadcrumb a, nav.breadcrumb a"

    # Containers dumped for operator diagnosis when price/sku are missing
    PRICE_DEBUG_SELECTORS = (
        ".pms-Price",
        '[itemprop="price"]',
        ".product-price",
        ".your-price",
        ".price-now",
    )
    SKU_DEBUG_SELECTORS = (
        ".pms-PartNumber",
        '[itemprop="sku"]',
        ".product-sku",
    )

    def extract(self, page: Page) -> ProductRecord:
        """Extract Richelieu product fields, attaching HTML snippets when price or SKU is missing."""
        logger.info("Scraping Richelieu product...")

        sku = first_text(page, self.SKU_SELECTORS)
        price = self._extract_price(page)

        debug = None
        if not price or not sku:
            debug = self._collect_debug_html(page)
            logger.debug("Missing price or SKU. HTML snippets:")
            logger.debug(f"Price HTML: {debug['priceHTML']}")
            logger.debug(f"SKU HTML: {debug['skuHTML']}")

        record = self._record(
            page,
            name=first_text(page, self.NAME_SELECTORS),
            sku=SKU(sku) if sku else None,
            price=price,
            msrp=self._extract_msrp(page),
            description=first_text(page, self.DESCRIPTION_SELECTORS),
            brand=first_text(page, self.BRAND_SELECTORS),
            image_url=first_image_url(page, self.IMAGE_SELECTORS),
            category_path=joined_text(page, self.BREADCRUMB_LINKS),
            debug=debug,
        )

        logger.info(
            f"Richelieu scrape complete: name={record.name!r}, "
            f"sku={record.sku!r}, price={record.price!r}"
        )
        return record

    def _extract_price(self, page: Page) -> str | None:
        """Account price first, then the public price."""
        price = first_text(page, self.ACCOUNT_PRICE_SELECTORS)
        if price:
            return price

        price = first_text(page, self.PUBLIC_PRICE_SELECTORS)
        if price:
            logger.debug("Account price not found, using public price")
        return price

    def _extract_msrp(self, page: Page) -> str | None:
        """Keyword scan of the price block, then fixed MSRP selectors."""
        for item in page.query_selector_all(self.PRICE_BLOCK_ITEMS):
            text = (item.text_content() or "").strip()
            if is_msrp_label(text, self.MSRP_KEYWORDS):
                return text

        return first_text(page, self.MSRP_SELECTORS)

    def _collect_debug_html(self, page: Page) -> dict[str, str]:
        price_html = first_outer_html(page, self.PRICE_DEBUG_SELECTORS)
        sku_html = first_outer_html(page, self.SKU_DEBUG_SELECTORS)
        return {
            "priceHTML": price_html or "No price element found",
            "skuHTML": sku_html or "No SKU element found",
        }


def is_msrp_label(text: str, keywords: tuple[str, ...]) -> bool:
    """Check whether a price-block line is an MSRP/list/retail price (pure function).

    Examples:
        >>> is_msrp_label("MSRP: $24.99", ("msrp", "list", "retail"))
        True
        >>> is_msrp_label("Your price: $12.00", ("msrp", "list", "retail"))
        False
    """
    lowered = text.lower()
    return any(keyword in lowered for keyword in keywords)
