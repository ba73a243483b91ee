"""Home Depot product extractor."""

from loguru import logger
from playwright.sync_api import Page

from supplier_scraper.models import ProductRecord
from supplier_scraper.scrapers.base_scraper import (
    BaseExtractor,
    first_image_url,
    first_text,
)
from supplier_scraper.types import SKU, SupplierVariant


class HomeDepotExtractor(BaseExtractor):
    """Extractor for homedepot.com / homedepot.ca product pages."""

    variant = SupplierVariant.HOME_DEPOT

    NAME_SELECTORS = ("h1.product-details__title", 'h1[data-testid="product-title"]')
    SKU_SELECTORS = (".product-info-bar__detail--sku", '[data-testid="product-sku"]')
    PRICE_SELECTORS = ('[data-testid="product-price"]', ".price__dollars")
    BRAND_SELECTORS = (".product-details__brand", '[data-testid="product-brand"]')
    IMAGE_SELECTORS = (
        ".mediagallery__mainimage img",
        '[data-testid="product-image"] img',
    )

    def extract(self, page: Page) -> ProductRecord:
        logger.info("Scraping Home Depot product...")
        sku = first_text(page, self.SKU_SELECTORS)
        return self._record(
            page,
            name=first_text(page, self.NAME_SELECTORS),
            sku=SKU(sku) if sku else None,
            price=first_text(page, self.PRICE_SELECTORS),
            brand=first_text(page, self.BRAND_SELECTORS),
            image_url=first_image_url(page, self.IMAGE_SELECTORS),
        )
