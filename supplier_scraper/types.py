"""Type definitions for the supplier scraper.

Branded types (NewType) keep URLs and SKUs from being mixed with plain strings.
"""

from enum import Enum
from typing import NewType

# Branded types for type safety
SKU = NewType("SKU", str)
ImageUrl = NewType("ImageUrl", str)
ProductUrl = NewType("ProductUrl", str)


class SupplierVariant(str, Enum):
    """Closed set of suppliers with bespoke extraction logic.

    Values are the display labels reported back to callers.
    """

    RICHELIEU = "Richelieu"
    HOME_DEPOT = "Home Depot"
    LOWES = "Lowe's"
    AMAZON = "Amazon"
    GENERIC = "Generic"


class ErrorKind(str, Enum):
    """Failure categories reported in a failure envelope."""

    VALIDATION = "validation_error"
    AUTHENTICATION_DEGRADED = "authentication_degraded"
    NAVIGATION = "navigation_error"
    EXTRACTION = "extraction_error"
    SESSION = "session_error"
    RESOURCE = "resource_error"


class ScrapeStage(str, Enum):
    """Orchestration stages, in execution order."""

    START = "start"
    LOGGING_IN = "logging_in"
    NAVIGATING = "navigating"
    RENDERING = "rendering"
    CLASSIFYING = "classifying"
    EXTRACTING = "extracting"
    CAPTURING_DIAGNOSTIC = "capturing_diagnostic"
    DONE = "done"
