"""Command-line interface for the supplier scraper.

Usage:
    python -m supplier_scraper.cli --url https://www.richelieu.com/ca/en/product/12345
    SUPPLIER_PASSWORD=... python -m supplier_scraper.cli --url URL --supplier richelieu --username me@example.com
"""

import argparse
import json
import os
import sys
from pathlib import Path

from loguru import logger

from supplier_scraper.models import Credentials, ScraperSettings
from supplier_scraper.orchestrator import scrape_product

PASSWORD_ENV_VAR = "SUPPLIER_PASSWORD"


def setup_logging(verbose: bool = False) -> None:
    """Configure loguru logging.

    Args:
        verbose: Whether to enable debug logging
    """
    logger.remove()  # Remove default handler

    log_level = "DEBUG" if verbose else "INFO"
    log_format = (
        "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | "
        "<level>{level: <8}</level> | "
        "<cyan>{name}</cyan>:<cyan>{function}</cyan> - "
        "<level>{message}</level>"
    )

    logger.add(sys.stderr, format=log_format, level=log_level, colorize=True)
    logger.add(
        "logs/scraper_{time:YYYY-MM-DD}.log",
        format=log_format,
        level="DEBUG",
        rotation="1 day",
        retention="30 days",
    )


def build_credentials(args: argparse.Namespace) -> Credentials | None:
    """Build credentials from CLI args and the password environment variable.

    Returns:
        Credentials when a username is given, otherwise None
    """
    if not args.username:
        return None

    password = os.getenv(PASSWORD_ENV_VAR, "")
    if not password:
        logger.warning(f"{PASSWORD_ENV_VAR} not set, login will be skipped")

    return Credentials(
        username=args.username,
        password=password,
        supplier_hint=args.supplier,
        login_url=args.login_url,
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Scrape a product page from a supplier website",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=f"""
Examples:
  # Public pricing
  python -m supplier_scraper.cli --url https://www.homedepot.ca/product/123

  # Richelieu account pricing (password read from {PASSWORD_ENV_VAR})
  python -m supplier_scraper.cli --url https://www.richelieu.com/ca/en/product/12345 \\
      --supplier richelieu --username buyer@example.com

  # Save JSON result and screenshot
  python -m supplier_scraper.cli --url URL --output result.json --screenshot page.jpg
        """,
    )

    parser.add_argument("--url", "-u", required=True, help="Product page URL")
    parser.add_argument(
        "--supplier",
        "-s",
        help="Supplier name hint for login (e.g. richelieu)",
    )
    parser.add_argument("--login-url", help="Login page URL for generic login")
    parser.add_argument(
        "--username",
        help=f"Account username (password read from {PASSWORD_ENV_VAR})",
    )
    parser.add_argument(
        "--output",
        "-o",
        help="Write JSON result to this file (default: stdout)",
    )
    parser.add_argument(
        "--screenshot",
        help="Write the diagnostic JPEG to this file",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Enable verbose debug logging",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    """Main CLI entry point.

    Returns:
        Exit code (0 for success, 1 for error)
    """
    args = build_parser().parse_args(argv)

    setup_logging(args.verbose)

    try:
        settings = ScraperSettings.from_env()
    except ValueError as e:
        logger.error(f"Invalid configuration: {e}")
        return 1

    outcome = scrape_product(
        args.url,
        credentials=build_credentials(args),
        settings=settings,
    )

    payload = json.dumps(outcome.to_dict(), indent=2, ensure_ascii=False)
    if args.output:
        Path(args.output).write_text(payload, encoding="utf-8")
        logger.info(f"Result written to {args.output}")
    else:
        print(payload)

    if not outcome.success:
        logger.error(f"{outcome.reason}: {outcome.details}")
        return 1

    if args.screenshot and outcome.diagnostic_image:
        Path(args.screenshot).write_bytes(outcome.diagnostic_image)
        logger.info(f"Screenshot written to {args.screenshot}")

    return 0


if __name__ == "__main__":
    sys.exit(main())
