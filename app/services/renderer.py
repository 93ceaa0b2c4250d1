"""Headless browser screenshots via Playwright."""

import logging

from playwright.async_api import Browser, async_playwright
from playwright.async_api import Error as PlaywrightError

from app.core.config import (
    RENDER_TIMEOUT_MS,
    SCRAPER_USER_AGENT,
    SCREENSHOT_FULL_PAGE,
)
from app.services.errors import RenderError

logger = logging.getLogger(__name__)

# Default viewport for captures
VIEWPORT_DESKTOP = {"width": 1920, "height": 1080}


class PlaywrightRenderer:
    """Captures a PNG screenshot of a page in a throwaway Chromium instance.

    Every call to :meth:`capture` launches its own browser and closes it
    before returning, whether the capture succeeded, failed or the calling
    task was cancelled.
    """

    def __init__(
        self,
        timeout_ms: int = RENDER_TIMEOUT_MS,
        full_page: bool = SCREENSHOT_FULL_PAGE,
        user_agent: str = SCRAPER_USER_AGENT,
        viewport: dict[str, int] | None = None,
    ) -> None:
        self.timeout_ms = timeout_ms
        self.full_page = full_page
        self.user_agent = user_agent
        self.viewport = viewport or VIEWPORT_DESKTOP

    async def capture(self, url: str) -> bytes:
        """
        Navigate to a URL and capture a screenshot.

        Args:
            url: Page to render

        Returns:
            PNG image bytes

        Raises:
            RenderError: If the browser fails to launch, navigate or capture
        """
        browser: Browser | None = None
        try:
            async with async_playwright() as p:
                try:
                    browser = await p.chromium.launch(headless=True, timeout=self.timeout_ms)
                    page = await browser.new_page(
                        user_agent=self.user_agent,
                        viewport=self.viewport,
                    )
                    page.set_default_timeout(self.timeout_ms)
                    await page.goto(url, wait_until="networkidle", timeout=self.timeout_ms)
                    screenshot = await page.screenshot(
                        type="png",
                        full_page=self.full_page,
                        timeout=self.timeout_ms,
                    )
                finally:
                    if browser is not None:
                        await self._close(browser)
        except PlaywrightError as e:
            raise RenderError(f"Could not render {url}: {e}") from e
        except OSError as e:
            # Driver or browser executable could not be started
            raise RenderError(f"Could not start browser for {url}: {e}") from e

        logger.info(
            f"Captured {'full-page' if self.full_page else 'viewport'} screenshot "
            f"for {url} ({len(screenshot)} bytes)"
        )
        return screenshot

    async def _close(self, browser: Browser) -> None:
        try:
            await browser.close()
        except PlaywrightError as e:
            # Already disconnected; nothing left to release
            logger.warning(f"Error closing browser: {e}")
