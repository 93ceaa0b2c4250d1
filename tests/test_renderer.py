"""Tests for the Playwright renderer."""

import asyncio

import pytest
from playwright.async_api import Error as PlaywrightError
from playwright.async_api import TimeoutError as PlaywrightTimeoutError

from app.services.errors import RenderError
from app.services.renderer import VIEWPORT_DESKTOP, PlaywrightRenderer

URL = "https://acme.example"
PNG_BYTES = b"\x89PNG\r\n\x1a\nrendered"


class TestPlaywrightRendererInit:
    """Test renderer configuration."""

    def test_defaults(self):
        """Test default timeout, capture mode and viewport."""
        renderer = PlaywrightRenderer()
        assert renderer.timeout_ms == 30000
        assert renderer.full_page is False
        assert renderer.viewport == VIEWPORT_DESKTOP

    def test_custom_values(self):
        """Test overriding configuration."""
        renderer = PlaywrightRenderer(timeout_ms=1000, full_page=True, viewport={"width": 375, "height": 812})
        assert renderer.timeout_ms == 1000
        assert renderer.full_page is True
        assert renderer.viewport == {"width": 375, "height": 812}


class TestCapture:
    """Test PlaywrightRenderer.capture."""

    @pytest.mark.asyncio
    async def test_returns_screenshot_and_closes_browser(self, fake_playwright):
        """Test a successful capture returns PNG bytes and closes once."""
        fake = fake_playwright
        renderer = PlaywrightRenderer(timeout_ms=1234)

        with fake.patch():
            result = await renderer.capture(URL)

        assert result == PNG_BYTES
        fake.playwright.chromium.launch.assert_awaited_once_with(headless=True, timeout=1234)
        fake.page.set_default_timeout.assert_called_once_with(1234)
        fake.page.goto.assert_awaited_once_with(URL, wait_until="networkidle", timeout=1234)
        fake.page.screenshot.assert_awaited_once_with(type="png", full_page=False, timeout=1234)
        fake.browser.close.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_capture_error_closes_browser(self, fake_playwright):
        """Test the browser is closed exactly once when capture throws."""
        fake = fake_playwright
        fake.page.screenshot.side_effect = PlaywrightError("Target closed")

        with fake.patch():
            with pytest.raises(RenderError, match="Target closed"):
                await PlaywrightRenderer().capture(URL)

        fake.browser.close.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_navigation_timeout_closes_browser(self, fake_playwright):
        """Test a navigation timeout becomes RenderError and closes the browser."""
        fake = fake_playwright
        fake.page.goto.side_effect = PlaywrightTimeoutError("Timeout 30000ms exceeded")

        with fake.patch():
            with pytest.raises(RenderError) as exc_info:
                await PlaywrightRenderer().capture(URL)

        assert isinstance(exc_info.value.__cause__, PlaywrightTimeoutError)
        fake.page.screenshot.assert_not_awaited()
        fake.browser.close.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_launch_failure(self, fake_playwright):
        """Test a launch failure is a RenderError with nothing to close."""
        fake = fake_playwright
        fake.playwright.chromium.launch.side_effect = PlaywrightError("Executable doesn't exist")

        with fake.patch():
            with pytest.raises(RenderError, match="Executable"):
                await PlaywrightRenderer().capture(URL)

        fake.browser.close.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_cancellation_closes_browser(self, fake_playwright):
        """Test cancelling the capture still tears the browser down."""
        fake = fake_playwright
        fake.page.goto.side_effect = asyncio.CancelledError()

        with fake.patch():
            with pytest.raises(asyncio.CancelledError):
                await PlaywrightRenderer().capture(URL)

        fake.browser.close.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_close_error_does_not_mask_result(self, fake_playwright):
        """Test a failing close is logged and the screenshot still returned."""
        fake = fake_playwright
        fake.browser.close.side_effect = PlaywrightError("Browser has been closed")

        with fake.patch():
            result = await PlaywrightRenderer().capture(URL)

        assert result == PNG_BYTES
        fake.browser.close.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_full_page_and_user_agent(self, fake_playwright):
        """Test full-page mode and user agent are passed to Playwright."""
        fake = fake_playwright
        renderer = PlaywrightRenderer(full_page=True, user_agent="TestAgent/1.0")

        with fake.patch():
            await renderer.capture(URL)

        fake.browser.new_page.assert_awaited_once_with(
            user_agent="TestAgent/1.0",
            viewport=VIEWPORT_DESKTOP,
        )
        assert fake.page.screenshot.call_args.kwargs["full_page"] is True

    @pytest.mark.asyncio
    async def test_driver_start_failure(self, fake_playwright):
        """Test a Playwright driver that cannot start becomes RenderError."""
        fake = fake_playwright
        fake.context_manager.__aenter__.side_effect = FileNotFoundError("playwright driver not found")

        with fake.patch():
            with pytest.raises(RenderError, match="Could not start browser"):
                await PlaywrightRenderer().capture(URL)

        fake.playwright.chromium.launch.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_driver_connection_error(self, fake_playwright):
        """Test a Playwright error raised while entering the driver is wrapped."""
        fake = fake_playwright
        fake.context_manager.__aenter__.side_effect = PlaywrightError("Connection closed")

        with fake.patch():
            with pytest.raises(RenderError, match="Connection closed"):
                await PlaywrightRenderer().capture(URL)
