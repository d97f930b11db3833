"""
Headless Chromium page loader.

Result pages are rendered client-side, so they are loaded in a real
browser. One browser per lookup: acquired by headless_browser() and
closed on every exit path.
"""

import logging
import shutil
from contextlib import asynccontextmanager
from typing import AsyncIterator, Optional

from playwright.async_api import (
    Browser,
    Error as PlaywrightError,
    TimeoutError as PlaywrightTimeoutError,
    async_playwright,
)

from .errors import RunnerNotFoundError, UpstreamError, UpstreamTimeoutError

logger = logging.getLogger(__name__)

USER_AGENT = (
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/120.0.0.0 Safari/537.36"
)
CHROMIUM_ARGS = ["--no-sandbox", "--disable-setuid-sandbox", "--disable-dev-shm-usage"]
SETTLE_MS = 1000


def find_chromium(configured: Optional[str] = None) -> Optional[str]:
    """Configured Chromium, else `chromium` on PATH, else Playwright's own."""
    return configured or shutil.which("chromium")


@asynccontextmanager
async def headless_browser(executable_path: Optional[str] = None) -> AsyncIterator[Browser]:
    """Launch Chromium for the duration of the block."""
    async with async_playwright() as pw:
        browser = await pw.chromium.launch(
            headless=True,
            args=CHROMIUM_ARGS,
            executable_path=executable_path,
        )
        try:
            yield browser
        finally:
            try:
                await browser.close()
            except PlaywrightError as e:
                logger.error(f"Error closing browser: {e}")


async def load_rendered_page(
    url: str,
    executable_path: Optional[str] = None,
    page_load_timeout_s: float = 30.0,
    table_wait_timeout_s: float = 10.0,
) -> str:
    """
    Load a page and return its HTML after client-side rendering.

    Waits for network idle, then for a results table (a missing table is
    tolerated, the parser reports it), then a short settle delay.

    Raises:
        RunnerNotFoundError: No response or HTTP 404
        UpstreamTimeoutError: Navigation timed out
        UpstreamError: Browser failed to launch or navigate
    """
    try:
        async with headless_browser(find_chromium(executable_path)) as browser:
            page = await browser.new_page(user_agent=USER_AGENT)
            response = await page.goto(
                url,
                wait_until="networkidle",
                timeout=page_load_timeout_s * 1000,
            )
            if response is None or response.status == 404:
                raise RunnerNotFoundError()

            try:
                await page.wait_for_selector("table", timeout=table_wait_timeout_s * 1000)
                await page.wait_for_timeout(SETTLE_MS)
            except PlaywrightTimeoutError:
                logger.warning(f"No table rendered on {url}")

            html = await page.content()
            logger.info(f"Fetched {url} via Playwright ({len(html)} bytes)")
            return html

    except PlaywrightTimeoutError as e:
        logger.warning(f"Timeout loading {url}: {e}")
        raise UpstreamTimeoutError() from e
    except PlaywrightError as e:
        logger.error(f"Playwright error on {url}: {e}")
        raise UpstreamError() from e
