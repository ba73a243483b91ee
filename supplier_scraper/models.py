"""Data models for scrape requests, product records and outcomes.

ProductRecord fields are optional because extraction is best-effort against
a live page. Prices stay as displayed text.
"""

import base64
import os
from dataclasses import dataclass, field
from typing import Any, Union

from supplier_scraper.types import SKU, ErrorKind, ImageUrl, ProductUrl, SupplierVariant


@dataclass(frozen=True)
class Credentials:
    """Account credentials used only to drive a login flow."""

    username: str
    password: str = field(repr=False)
    supplier_hint: str | None = None  # e.g. "Richelieu"
    login_url: str | None = None

    @property
    def can_login(self) -> bool:
        """Login is attempted only when both username and password are present."""
        return bool(self.username) and bool(self.password)

    def log_summary(self) -> dict[str, Any]:
        """Loggable view of the credentials. The password is reduced to presence/length."""
        return {
            "supplier_hint": self.supplier_hint,
            "username": self.username,
            "has_password": bool(self.password),
            "password_length": len(self.password or ""),
            "login_url": self.login_url,
        }


@dataclass(frozen=True)
class ScrapeRequest:
    """A single scrape invocation."""

    target_url: str
    credentials: Credentials | None = None

    def log_summary(self) -> dict[str, Any]:
        summary: dict[str, Any] = {
            "url": self.target_url,
            "has_credentials": self.credentials is not None,
        }
        if self.credentials is not None:
            summary.update(self.credentials.log_summary())
        return summary


@dataclass
class ProductRecord:
    """Normalized product data extracted from a supplier page."""

    source_url: ProductUrl
    name: str | None = None
    sku: SKU | None = None
    price: str | None = None  # displayed text, e.g. "$12.34 / ea"
    msrp: str | None = None
    description: str | None = None
    brand: str | None = None
    image_url: ImageUrl | None = None
    category_path: str | None = None  # breadcrumb labels joined with " > "
    debug: dict[str, str] | None = None  # raw HTML snippets for unresolved fields

    def to_dict(self) -> dict[str, Any]:
        """Serialize using the wire field names."""
        data: dict[str, Any] = {
            "name": self.name,
            "sku": self.sku,
            "price": self.price,
            "msrp": self.msrp,
            "description": self.description,
            "brand": self.brand,
            "imageUrl": self.image_url,
            "categoryPath": self.category_path,
            "url": self.source_url,
        }
        if self.debug:
            data["debug"] = dict(self.debug)
        return data


@dataclass(frozen=True)
class ScrapeSuccess:
    """Successful scrape with product data and a diagnostic screenshot."""

    data: ProductRecord
    diagnostic_image: bytes | None
    supplier_variant: SupplierVariant

    @property
    def success(self) -> bool:
        return True

    def to_dict(self) -> dict[str, Any]:
        image = (
            base64.b64encode(self.diagnostic_image).decode("ascii")
            if self.diagnostic_image
            else None
        )
        return {
            "success": True,
            "data": self.data.to_dict(),
            "diagnosticImage": image,
            "supplierVariant": self.supplier_variant.value,
        }


@dataclass(frozen=True)
class ScrapeFailure:
    """Failed scrape with a coarse reason and underlying details."""

    error_kind: ErrorKind
    details: str
    reason: str = "Failed to scrape product"

    @property
    def success(self) -> bool:
        return False

    def to_dict(self) -> dict[str, Any]:
        return {
            "success": False,
            "errorKind": self.error_kind.value,
            "error": self.reason,
            "details": self.details,
        }


ScrapeOutcome = Union[ScrapeSuccess, ScrapeFailure]


DEFAULT_USER_AGENT = (
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/120.0.0.0 Safari/537.36"
)

# Chromium flags for running inside containers
CONTAINER_LAUNCH_ARGS = (
    "--no-sandbox",
    "--disable-setuid-sandbox",
    "--disable-dev-shm-usage",
    "--disable-gpu",
    "--no-zygote",
    "--single-process",
)


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw)
    except ValueError as e:
        raise ValueError(f"{name} must be an integer, got {raw!r}") from e


@dataclass(frozen=True)
class ScraperSettings:
    """Process-wide scraper configuration. Timeouts are in milliseconds."""

    headless: bool = True
    user_agent: str = DEFAULT_USER_AGENT
    launch_args: tuple[str, ...] = CONTAINER_LAUNCH_ARGS
    navigation_timeout_ms: int = 30000
    render_settle_ms: int = 3000
    login_page_settle_ms: int = 2000
    login_reveal_settle_ms: int = 1000
    login_submit_settle_ms: int = 3000
    field_visible_timeout_ms: int = 5000
    screenshot_quality: int = 80
    require_diagnostic_image: bool = True  # False makes capture failures non-fatal
    richelieu_login_url: str = "https://www.richelieu.com/ca/en/user/login"

    @classmethod
    def from_env(cls) -> "ScraperSettings":
        """Build settings from environment variables, falling back to defaults.

        Raises:
            ValueError: If a numeric variable is not an integer
        """
        defaults = cls()
        return cls(
            headless=os.getenv("HEADLESS", "true").lower() != "false",
            navigation_timeout_ms=_env_int(
                "SCRAPER_NAVIGATION_TIMEOUT_MS", defaults.navigation_timeout_ms
            ),
            render_settle_ms=_env_int(
                "SCRAPER_RENDER_SETTLE_MS", defaults.render_settle_ms
            ),
            require_diagnostic_image=os.getenv(
                "SCRAPER_REQUIRE_DIAGNOSTIC_IMAGE", "true"
            ).lower()
            != "false",
        )
