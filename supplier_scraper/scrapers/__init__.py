"""Supplier-specific product extractors."""

from supplier_scraper.scrapers.base_scraper import BaseExtractor
from supplier_scraper.scrapers.registry import (
    EXTRACTOR_REGISTRY,
    get_available_suppliers,
    get_extractor_class,
)

__all__ = [
    "BaseExtractor",
    "EXTRACTOR_REGISTRY",
    "get_available_suppliers",
    "get_extractor_class",
]
