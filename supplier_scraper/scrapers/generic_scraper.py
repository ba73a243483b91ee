"""Fallback extractor for unrecognized suppliers.

Relies on microdata (itemprop) and common class names. Every lookup may
come back empty; the record is still returned.
"""

from loguru import logger
from playwright.sync_api import Page

from supplier_scraper.models import ProductRecord
from supplier_scraper.scrapers.base_scraper import (
    BaseExtractor,
    first_image_url,
    first_text,
)
from supplier_scraper.types import SKU, SupplierVariant


class GenericExtractor(BaseExtractor):
    """Extractor of last resort for any unclassified URL."""

    variant = SupplierVariant.GENERIC

    NAME_SELECTORS = ("h1", ".product-title", ".product-name", '[itemprop="name"]')
    SKU_SELECTORS = (".sku", ".product-code", ".item-number", '[itemprop="sku"]')
    PRICE_SELECTORS = (".price", ".product-price", ".sale-price", '[itemprop="price"]')
    DESCRIPTION_SELECTORS = (
        ".description",
        ".product-description",
        '[itemprop="description"]',
    )
    IMAGE_SELECTORS = ("img.product-image", "img.main-image", '[itemprop="image"]')

    def extract(self, page: Page) -> ProductRecord:
        logger.info("Using generic scraper...")
        sku = first_text(page, self.SKU_SELECTORS)
        return self._record(
            page,
            name=first_text(page, self.NAME_SELECTORS),
            sku=SKU(sku) if sku else None,
            price=first_text(page, self.PRICE_SELECTORS),
            description=first_text(page, self.DESCRIPTION_SELECTORS),
            image_url=first_image_url(page, self.IMAGE_SELECTORS),
        )
