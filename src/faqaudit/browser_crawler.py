"""
Browser-based page fetcher using Playwright for JavaScript-rendered content.

Some pages build their FAQ sections client side, so the markup returned by a
plain HTTP request does not contain them. BrowserFetcher renders the page in
a headless browser and returns the resulting DOM serialized as HTML.
"""
import logging
import time
from typing import Optional

from .config import BrowserConfig, settings
from .models import FetchResult

logger = logging.getLogger(__name__)


class BrowserFetcher:
    """
    Playwright-based fetcher for JavaScript-rendered pages.

    This class is designed to be used as an async context manager, managing
    its own browser lifecycle:

        async with BrowserFetcher(config) as fetcher:
            result = await fetcher.fetch("https://example.com")
    """

    def __init__(self, config: Optional[BrowserConfig] = None, user_agent: Optional[str] = None):
        """
        Initialize the browser fetcher.

        Args:
            config: BrowserConfig instance (defaults to BrowserConfig())
            user_agent: User agent for every page (defaults to settings.USER_AGENT)
        """
        self._config = config or BrowserConfig()
        self._user_agent = user_agent or settings.USER_AGENT
        self._playwright = None
        self._browser = None

        logger.debug(f"BrowserFetcher initialized with config: {self._config}")

    async def __aenter__(self) -> "BrowserFetcher":
        """Enter async context manager, launching browser."""
        try:
            from playwright.async_api import async_playwright
        except ImportError:
            raise ImportError(
                "Playwright is required for browser-based fetching. "
                "Install with: pip install 'faqaudit[browser]'"
            )

        logger.info(f"Launching {self._config.browser_type} browser (headless={self._config.headless})")

        self._playwright = await async_playwright().start()
        browser_launcher = getattr(self._playwright, self._config.browser_type)

        launch_options = {"headless": self._config.headless}
        if self._config.launch_args:
            launch_options["args"] = self._config.launch_args

        self._browser = await browser_launcher.launch(**launch_options)

        logger.info("Browser launched successfully")
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        """Exit async context manager, closing browser."""
        if self._browser:
            logger.info("Closing browser")
            await self._browser.close()
            self._browser = None

        if self._playwright:
            await self._playwright.stop()
            self._playwright = None

    async def fetch(self, url: str) -> FetchResult:
        """
        Fetch a single URL with full JavaScript rendering.

        Args:
            url: URL to fetch

        Returns:
            FetchResult with rendered HTML, or success=False and an error message

        Raises:
            RuntimeError: If browser is not running (not in context manager)
        """
        if not self._browser:
            raise RuntimeError(
                "Browser is not running. Use BrowserFetcher as an async context manager: "
                "async with BrowserFetcher(config) as fetcher:"
            )

        start_time = time.time()
        page = await self._browser.new_page(user_agent=self._user_agent)

        try:
            response = await page.goto(
                url,
                wait_until=self._config.wait_until,
                timeout=self._config.timeout
            )
            html = await page.content()
            load_time = time.time() - start_time
            status_code = response.status if response else 0

            logger.info(f"Fetch complete: {url} (status={status_code}, time={load_time:.2f}s)")

            return FetchResult(
                url=url,
                html=html,
                status_code=status_code,
                success=True,
                load_time=load_time,
            )

        except Exception as e:
            logger.error(f"Fetch failed for {url}: {e}")
            return FetchResult(
                url=url,
                success=False,
                error=str(e),
                load_time=time.time() - start_time,
            )

        finally:
            await page.close()
