"""Full-page website screenshots using Playwright."""

import random

from playwright.async_api import Browser, Playwright, async_playwright

from toolbelt.core.configs import app_config
from toolbelt.core.deps import logger

USER_AGENT = (
    'Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 '
    '(KHTML, like Gecko) Chrome/124.0.0.0 Safari/537.36'
)
DESKTOP_VIEWPORT = {'width': 1920, 'height': 1080}


class BrowserService:
    """Headless Chromium used to capture screenshots."""

    def __init__(self, headless: bool | None = None, settle: bool = True, timeout: float = 60.0):
        """Initialize browser service.

        Args:
            headless: Run without a window (defaults to BROWSER_HEADLESS)
            settle: Wait and move the mouse after load so lazy content renders
            timeout: Seconds to wait for the page to finish loading
        """
        self.headless = app_config.BROWSER_HEADLESS if headless is None else headless
        self.settle = settle
        self.timeout = timeout
        self._playwright: Playwright | None = None
        self.browser: Browser | None = None

    async def __aenter__(self):
        """Context manager entry - launch browser."""
        await self.launch()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        """Context manager exit - close browser."""
        await self.close()

    async def launch(self):
        """Launch browser instance."""
        self._playwright = await async_playwright().start()
        self.browser = await self._playwright.chromium.launch(
            headless=self.headless,
            args=['--no-sandbox', '--disable-setuid-sandbox', '--disable-blink-features=AutomationControlled'],
        )
        logger.debug('Browser launched')

    async def close(self):
        """Close browser instance."""
        if self.browser:
            await self.browser.close()
            self.browser = None
            logger.debug('Browser closed')
        if self._playwright:
            await self._playwright.stop()
            self._playwright = None

    async def screenshot(self, url: str, width: int | None = None, height: int | None = None) -> bytes:
        """Capture a full-page PNG of `url`.

        Args:
            url: Page to capture
            width: Viewport width, used only together with height
            height: Viewport height, used only together with width

        Returns:
            PNG bytes

        Raises:
            RuntimeError: If the browser has not been launched
        """
        if not self.browser:
            raise RuntimeError("Browser not launched. Use 'async with' or call launch()")

        viewport = {'width': width, 'height': height} if width and height else DESKTOP_VIEWPORT
        context = await self.browser.new_context(user_agent=USER_AGENT, viewport=viewport)
        page = await context.new_page()
        try:
            logger.info('Capturing screenshot', url=url, viewport=viewport)
            await page.goto(url, wait_until='networkidle', timeout=self.timeout * 1000)

            if self.settle:
                await page.wait_for_timeout(random.randint(3000, 7000))
                x = random.random() * viewport['width']
                y = random.random() * viewport['height']
                await page.mouse.move(x, y)
                await page.mouse.click(x, y)
                await page.wait_for_timeout(5000)

            return await page.screenshot(full_page=True, type='png')
        finally:
            await context.close()
