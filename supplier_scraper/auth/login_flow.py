"""Login flow selection and fault containment.

attempt_login never raises for a failing flow: account pricing is an
enhancement, and a failed login falls back to public pricing.
"""

from dataclasses import dataclass
from typing import Callable, Optional

from loguru import logger
from playwright.sync_api import Page

from supplier_scraper.auth.generic_auth import generic_login
from supplier_scraper.auth.richelieu_auth import login_to_richelieu
from supplier_scraper.models import Credentials, ScraperSettings

LoginFlow = Callable[[Page, Credentials, ScraperSettings], None]


@dataclass(frozen=True)
class LoginResult:
    """Outcome of a login attempt."""

    success: bool
    flow: str | None = None
    error: str | None = None

    @property
    def attempted(self) -> bool:
        return self.flow is not None


def select_login_flow(credentials: Credentials) -> Optional[LoginFlow]:
    """Pick a login flow from what the credentials provide.

    Returns:
        Richelieu flow when the supplier hint names Richelieu, the generic flow
        when a login URL is given, otherwise None
    """
    hint = (credentials.supplier_hint or "").lower()
    if "richelieu" in hint:
        return login_to_richelieu
    if credentials.login_url:
        return generic_login
    return None


def attempt_login(
    page: Page, credentials: Credentials, settings: ScraperSettings
) -> LoginResult:
    """Run the matching login flow, converting any fault into a failed result.

    Args:
        page: Page of the request's browser session
        credentials: Account credentials with username and password
        settings: Timeouts and default login URL

    Returns:
        LoginResult describing whether the session is now authenticated
    """
    if not credentials.can_login:
        return LoginResult(success=False)

    flow = select_login_flow(credentials)
    if flow is None:
        logger.warning(
            f"No login flow for supplier {credentials.supplier_hint!r} "
            "without a login URL, continuing without login"
        )
        return LoginResult(success=False)

    flow_name = getattr(flow, "__name__", repr(flow))
    logger.info(f"Logging into {credentials.supplier_hint or credentials.login_url}...")
    try:
        flow(page, credentials, settings)
    except Exception as e:
        return LoginResult(success=False, flow=flow_name, error=str(e))

    return LoginResult(success=True, flow=flow_name)
