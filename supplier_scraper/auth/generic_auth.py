"""Generic form-fill login for suppliers without a dedicated flow."""

from loguru import logger
from playwright.sync_api import Page

from supplier_scraper.auth.form_helpers import click_first_visible, fill_first_visible
from supplier_scraper.models import Credentials, ScraperSettings

EMAIL_SELECTORS = ('input[type="email"]', 'input[name="email"]', 'input[name="username"]')
PASSWORD_SELECTORS = ('input[type="password"]', 'input[name="password"]')
SUBMIT_SELECTORS = (
    'button[type="submit"]',
    'button:has-text("Sign In")',
    'button:has-text("Log In")',
)


def generic_login(
    page: Page, credentials: Credentials, settings: ScraperSettings
) -> None:
    """Fill and submit a login form at credentials.login_url.

    Waits for network idle since nothing is known about the page's markup.

    Raises:
        ValueError: If credentials carry no login URL
        playwright.sync_api.Error: If navigation, fill or submit fails
    """
    if not credentials.login_url:
        raise ValueError("Generic login requires a login URL")

    logger.info(f"Navigating to login page: {credentials.login_url}")
    page.goto(
        credentials.login_url,
        wait_until="networkidle",
        timeout=settings.navigation_timeout_ms,
    )

    fill_first_visible(
        page, EMAIL_SELECTORS, credentials.username, settings.field_visible_timeout_ms
    )
    fill_first_visible(
        page, PASSWORD_SELECTORS, credentials.password, settings.field_visible_timeout_ms
    )
    click_first_visible(page, SUBMIT_SELECTORS, settings.field_visible_timeout_ms)
    page.wait_for_timeout(settings.login_submit_settle_ms)
    logger.info("Generic login completed")
