"""Lowe's product extractor."""

from loguru import logger
from playwright.sync_api import Page

from supplier_scraper.models import ProductRecord
from supplier_scraper.scrapers.base_scraper import (
    BaseExtractor,
    first_image_url,
    first_text,
)
from supplier_scraper.types import SKU, SupplierVariant


class LowesExtractor(BaseExtractor):
    """Extractor for lowes.com / lowes.ca product pages."""

    variant = SupplierVariant.LOWES

    NAME_SELECTORS = ("h1.pdp-header", 'h1[itemprop="name"]')
    SKU_SELECTORS = (".product-code", '[itemprop="productID"]')
    PRICE_SELECTORS = (".item-price", ".price-format__main-price")
    BRAND_SELECTORS = (".pdp-brand", '[itemprop="brand"]')
    IMAGE_SELECTORS = (".main-image img", ".pdp-image img")

    def extract(self, page: Page) -> ProductRecord:
        logger.info("Scraping Lowe's product...")
        sku = first_text(page, self.SKU_SELECTORS)
        return self._record(
            page,
            name=first_text(page, self.NAME_SELECTORS),
            sku=SKU(sku) if sku else None,
            price=first_text(page, self.PRICE_SELECTORS),
            brand=first_text(page, self.BRAND_SELECTORS),
            image_url=first_image_url(page, self.IMAGE_SELECTORS),
        )
