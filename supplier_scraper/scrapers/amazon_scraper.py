"""Amazon product extractor.

Amazon listings expose an ASIN, not a supplier SKU, so sku is always None.
"""

from loguru import logger
from playwright.sync_api import Page

from supplier_scraper.models import ProductRecord
from supplier_scraper.scrapers.base_scraper import (
    BaseExtractor,
    first_image_url,
    first_text,
)
from supplier_scraper.types import SupplierVariant


class AmazonExtractor(BaseExtractor):
    """Extractor for amazon.com / amazon.ca product pages."""

    variant = SupplierVariant.AMAZON

    NAME_SELECTORS = ("#productTitle", "h1.a-size-large")
    PRICE_SELECTORS = (".a-price-whole", ".a-price.a-text-price.a-size-medium")
    BRAND_SELECTORS = ("#bylineInfo", ".po-brand .po-break-word")
    IMAGE_SELECTORS = ("#landingImage", "#imgTagWrapperId img")

    def extract(self, page: Page) -> ProductRecord:
        logger.info("Scraping Amazon product...")
        return self._record(
            page,
            name=first_text(page, self.NAME_SELECTORS),
            sku=None,
            price=first_text(page, self.PRICE_SELECTORS),
            brand=first_text(page, self.BRAND_SELECTORS),
            image_url=first_image_url(page, self.IMAGE_SELECTORS),
        )
