"""Richelieu account login.

Logs in through the Richelieu web login page so account-tier pricing is
rendered on subsequent product pages in the same browser context.
"""

from loguru import logger
from playwright.sync_api import Error as PlaywrightError
from playwright.sync_api import Page, TimeoutError as PlaywrightTimeout

from supplier_scraper.auth.form_helpers import click_first_visible, fill_first_visible
from supplier_scraper.models import Credentials, ScraperSettings

SIGN_IN_REVEAL_SELECTOR = (
    'button:has-text("Sign In"), a:has-text("Sign In"), button:has-text("Log In")'
)
EMAIL_SELECTORS = ('input[type="email"]', 'input[name="email"]', "input#email")
PASSWORD_SELECTORS = (
    'input[type="password"]',
    'input[name="password"]',
    "input#password",
)
SUBMIT_SELECTORS = (
    'button[type="submit"]',
    'button:has-text("Sign In")',
    'button:has-text("Log In")',
    'input[type="submit"]',
)


def login_to_richelieu(
    page: Page, credentials: Credentials, settings: ScraperSettings
) -> None:
    """Drive the Richelieu login form.

    A missing sign-in button and a slow-to-appear email field are tolerated;
    a fill or submit that cannot complete raises.

    Args:
        page: Page of the request's browser session
        credentials: Account credentials
        settings: Timeouts and default login URL

    Raises:
        playwright.sync_api.Error: If navigation, fill or submit fails
    """
    login_url = credentials.login_url or settings.richelieu_login_url
    logger.info(f"Navigating to Richelieu login page: {login_url}")
    page.goto(
        login_url,
        wait_until="domcontentloaded",
        timeout=settings.navigation_timeout_ms,
    )
    page.wait_for_timeout(settings.login_page_settle_ms)

    _reveal_login_form(page, settings)

    try:
        page.wait_for_selector(
            ", ".join(EMAIL_SELECTORS),
            state="visible",
            timeout=settings.field_visible_timeout_ms,
        )
    except PlaywrightTimeout:
        logger.info("Email field not visible, trying alternative selectors...")

    fill_first_visible(
        page, EMAIL_SELECTORS, credentials.username, settings.field_visible_timeout_ms
    )
    fill_first_visible(
        page, PASSWORD_SELECTORS, credentials.password, settings.field_visible_timeout_ms
    )

    click_first_visible(page, SUBMIT_SELECTORS, settings.field_visible_timeout_ms)
    page.wait_for_timeout(settings.login_submit_settle_ms)
    logger.info("Richelieu login completed")


def _reveal_login_form(page: Page, settings: ScraperSettings) -> None:
    """Click the sign-in control if the form sits behind one (best effort)."""
    try:
        button = page.query_selector(SIGN_IN_REVEAL_SELECTOR)
        if button is None:
            logger.debug("No sign in button found, proceeding to fill form...")
            return
        logger.info("Clicking sign in button to open login form...")
        button.click()
        page.wait_for_timeout(settings.login_reveal_settle_ms)
    except PlaywrightError as e:
        logger.info(f"Sign in button not usable ({e}), proceeding to fill form...")
