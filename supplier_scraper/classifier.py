"""Supplier detection from product URLs.

Pure function: no browser, no network.
"""

from supplier_scraper.types import SupplierVariant

# Checked in order; first match wins
SUPPLIER_HOST_FRAGMENTS: tuple[tuple[SupplierVariant, tuple[str, ...]], ...] = (
    (SupplierVariant.RICHELIEU, ("richelieu.com",)),
    (SupplierVariant.HOME_DEPOT, ("homedepot.com", "homedepot.ca")),
    (SupplierVariant.LOWES, ("lowes.com", "lowes.ca")),
    (SupplierVariant.AMAZON, ("amazon.com", "amazon.ca")),
)


def detect_supplier(url: str) -> SupplierVariant:
    """Classify a product URL into a supplier variant.

    Args:
        url: Product page URL

    Returns:
        Matching supplier variant, or GENERIC when nothing matches

    Examples:
        >>> detect_supplier("https://www.richelieu.com/ca/en/product/12345")
        <SupplierVariant.RICHELIEU: 'Richelieu'>
        >>> detect_supplier("https://example.com/widget")
        <SupplierVariant.GENERIC: 'Generic'>
    """
    normalized = (url or "").lower()
    for variant, fragments in SUPPLIER_HOST_FRAGMENTS:
        if any(fragment in normalized for fragment in fragments):
            return variant
    return SupplierVariant.GENERIC
