"""Supplier product page scraper with optional account login."""

from supplier_scraper.classifier import detect_supplier
from supplier_scraper.models import (
    Credentials,
    ProductRecord,
    ScrapeFailure,
    ScrapeOutcome,
    ScrapeRequest,
    ScrapeSuccess,
    ScraperSettings,
)
from supplier_scraper.orchestrator import ScrapeOrchestrator, scrape_product
from supplier_scraper.types import ErrorKind, SupplierVariant

__all__ = [
    "Credentials",
    "ErrorKind",
    "ProductRecord",
    "ScrapeFailure",
    "ScrapeOrchestrator",
    "ScrapeOutcome",
    "ScrapeRequest",
    "ScrapeSuccess",
    "ScraperSettings",
    "SupplierVariant",
    "detect_supplier",
    "scrape_product",
]
