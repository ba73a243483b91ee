"""Exception hierarchy for the scraping pipeline.

Each error carries the ErrorKind reported to callers in a failure envelope.
"""

from supplier_scraper.types import ErrorKind


class ScrapeError(Exception):
    """Base class for all scrape pipeline errors."""

    kind: ErrorKind = ErrorKind.EXTRACTION
    reason: str = "Failed to scrape product"


class ValidationError(ScrapeError):
    """Request is missing a required field or has a malformed URL."""

    kind = ErrorKind.VALIDATION
    reason = "URL is required"


class AuthenticationDegraded(ScrapeError):
    """Login flow faulted. Never surfaced; the request continues anonymously."""

    kind = ErrorKind.AUTHENTICATION_DEGRADED


class NavigationError(ScrapeError):
    """Target page failed to load within the navigation timeout."""

    kind = ErrorKind.NAVIGATION


class ExtractionError(ScrapeError):
    """Extraction or diagnostic capture faulted inside the browser host."""

    kind = ErrorKind.EXTRACTION


class SessionError(ScrapeError):
    """Browser session could not be launched."""

    kind = ErrorKind.SESSION


class ResourceError(ScrapeError):
    """Browser session could not be released cleanly. Logged only."""

    kind = ErrorKind.RESOURCE
