"""Supplier extractor registry.

Provides the dispatch table from supplier variant to extractor class.
Adding a supplier requires a SupplierVariant member and an entry here;
an unmapped variant fails at import time.
"""

from typing import Type

from supplier_scraper.scrapers.amazon_scraper import AmazonExtractor
from supplier_scraper.scrapers.base_scraper import BaseExtractor
from supplier_scraper.scrapers.generic_scraper import GenericExtractor
from supplier_scraper.scrapers.homedepot_scraper import HomeDepotExtractor
from supplier_scraper.scrapers.lowes_scraper import LowesExtractor
from supplier_scraper.scrapers.richelieu_scraper import RichelieuExtractor
from supplier_scraper.types import SupplierVariant

# Registry of available extractors
EXTRACTOR_REGISTRY: dict[SupplierVariant, Type[BaseExtractor]] = {
    SupplierVariant.RICHELIEU: RichelieuExtractor,
    SupplierVariant.HOME_DEPOT: HomeDepotExtractor,
    SupplierVariant.LOWES: LowesExtractor,
    SupplierVariant.AMAZON: AmazonExtractor,
    SupplierVariant.GENERIC: GenericExtractor,
}

_missing = set(SupplierVariant) - set(EXTRACTOR_REGISTRY)
if _missing:
    raise RuntimeError(
        f"No extractor registered for: {', '.join(sorted(v.value for v in _missing))}"
    )


def get_extractor_class(variant: SupplierVariant) -> Type[BaseExtractor]:
    """Get extractor class for a supplier variant.

    Args:
        variant: Supplier variant (e.g., SupplierVariant.RICHELIEU)

    Returns:
        Extractor class for the supplier

    Raises:
        ValueError: If variant is not a known supplier
    """
    if variant not in EXTRACTOR_REGISTRY:
        available = ", ".join(v.value for v in EXTRACTOR_REGISTRY)
        raise ValueError(f"Unknown supplier: {variant}. Available: {available}")

    return EXTRACTOR_REGISTRY[variant]


def get_available_suppliers() -> list[SupplierVariant]:
    """Get list of supported supplier variants.

    Returns:
        List of supplier variants, Generic included
    """
    return list(EXTRACTOR_REGISTRY.keys())
