"""Account login flows run before the product page is loaded."""

from supplier_scraper.auth.generic_auth import generic_login
from supplier_scraper.auth.login_flow import LoginResult, attempt_login, select_login_flow
from supplier_scraper.auth.richelieu_auth import login_to_richelieu

__all__ = [
    "LoginResult",
    "attempt_login",
    "generic_login",
    "login_to_richelieu",
    "select_login_flow",
]
