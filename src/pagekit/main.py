"""
pagekit command line entry point.
"""

import argparse
import asyncio
import sys
from datetime import datetime
from pathlib import Path
from typing import Optional
from urllib.parse import urlparse

from rich.console import Console
from rich.table import Table

from pagekit import __version__
from pagekit.browser.base_page import BasePage
from pagekit.browser.driver import PlaywrightDriver
from pagekit.config.settings import Settings, get_settings
from pagekit.core.device import format_hardware_address, get_mac_id
from pagekit.error_handling.exceptions import PageKitError
from pagekit.monitoring.logger import get_logger, setup_logging

console = Console()
logger = get_logger("pagekit.main")

# Marks a bare --screenshot flag
DEFAULT_SCREENSHOT = ""


def create_parser() -> argparse.ArgumentParser:
    """Create command line argument parser."""
    parser = argparse.ArgumentParser(
        prog="pagekit",
        description=f"pagekit - page-object helpers for Playwright v{__version__}",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Print this device's MAC id
  pagekit mac-id

  # Open a page, click through a certificate warning and set identity cookies
  pagekit open https://intranet.example.com --verify-certificate --device-cookies
        """,
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"pagekit {__version__}",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug logging",
    )

    subparsers = parser.add_subparsers(dest="command")

    mac_parser = subparsers.add_parser("mac-id", help="Print this device's MAC id")
    mac_parser.add_argument(
        "--separator",
        default="",
        help="Separator between octets (default: none)",
    )
    mac_parser.add_argument(
        "--upper",
        action="store_true",
        help="Print upper-case hex digits",
    )

    open_parser = subparsers.add_parser("open", help="Open a URL through a page object")
    open_parser.add_argument("url", help="URL to open")
    open_parser.add_argument(
        "--mac-id",
        help="Identifier for the MacId/NetID cookies (implies --device-cookies)",
    )
    open_parser.add_argument(
        "--device-cookies",
        action="store_true",
        help="Set MacId/NetID cookies from this device's MAC id",
    )
    open_parser.add_argument(
        "--verify-certificate",
        action="store_true",
        help="Click through the certificate error page if shown",
    )
    open_parser.add_argument(
        "--screenshot",
        nargs="?",
        type=Path,
        const=DEFAULT_SCREENSHOT,
        help="Save a screenshot to this path (default: a file under SCREENSHOTS_DIR)",
    )
    open_parser.add_argument(
        "--headed",
        action="store_true",
        help="Show the browser window",
    )

    return parser


def default_screenshot_path(settings: Settings, url: str) -> Path:
    """Screenshot file under the configured screenshots directory."""
    settings.create_directories()
    host = urlparse(url).hostname or "page"
    stamp = datetime.now().strftime("%Y%m%d_%H%M%S")
    return settings.screenshots_dir / f"{host}_{stamp}.png"


def print_mac_id(separator: str = "", upper: bool = False) -> int:
    """Print the device MAC id."""
    mac_id = get_mac_id()
    if separator or upper:
        mac_id = format_hardware_address(int(mac_id, 16), separator, upper)
    console.print(mac_id)
    return 0


async def open_page(
    url: str,
    mac_id: Optional[str] = None,
    device_cookies: bool = False,
    verify_certificate: bool = False,
    screenshot: Optional[Path] = None,
    headless: bool = True,
) -> int:
    """
    Open a URL with a BasePage and report what was done.

    Returns:
        Exit code
    """
    async with PlaywrightDriver(headless=headless) as driver:
        page = BasePage(driver.page)
        await page.navigate_to(url)

        certificate_clicked = False
        if verify_certificate:
            certificate_clicked = await page.verify_certificate()

        cookie_value = None
        if mac_id or device_cookies:
            cookie_value = await page.set_mac_id_cookie(mac_id)

        if screenshot:
            await driver.save_screenshot(screenshot)

        table = Table(title="Page summary")
        table.add_column("Field", style="cyan")
        table.add_column("Value")
        table.add_row("Environment", page.test_env)
        table.add_row("URL", await driver.get_page_url())
        table.add_row("Title", await driver.get_page_title())
        table.add_row("Certificate override", "clicked" if certificate_clicked else "-")
        table.add_row("Identity cookies", cookie_value or "-")
        if screenshot:
            table.add_row("Screenshot", str(screenshot))
        console.print(table)

    return 0


async def async_main(args: Optional[list[str]] = None) -> int:
    """Async main function."""
    parser = create_parser()
    parsed_args = parser.parse_args(args)

    setup_logging(log_level="DEBUG" if parsed_args.debug else None)

    if parsed_args.command == "mac-id":
        return print_mac_id(parsed_args.separator, parsed_args.upper)

    if parsed_args.command == "open":
        settings = get_settings()
        screenshot = parsed_args.screenshot
        if screenshot == DEFAULT_SCREENSHOT:
            screenshot = default_screenshot_path(settings, parsed_args.url)
        return await open_page(
            url=parsed_args.url,
            mac_id=parsed_args.mac_id,
            device_cookies=parsed_args.device_cookies,
            verify_certificate=parsed_args.verify_certificate,
            screenshot=screenshot,
            headless=settings.browser_headless and not parsed_args.headed,
        )

    parser.print_help()
    return 1


def main(args: Optional[list[str]] = None) -> int:
    """
    Main entry point for pagekit.

    Args:
        args: Command line arguments

    Returns:
        Exit code (0 for success, non-zero for failure)
    """
    try:
        return asyncio.run(async_main(args))
    except PageKitError as e:
        logger.debug("Command failed", exc_info=True)
        console.print(f"[red]Error: {e.message}[/red]")
        return 1


if __name__ == "__main__":
    sys.exit(main())
