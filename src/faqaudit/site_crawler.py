"""Batch crawler: fetch a list of pages and audit their QA blocks."""

import asyncio
import logging
import time
from typing import Iterable, List, Optional

from faqaudit.analyzer import QAStructureAnalyzer
from faqaudit.browser_crawler import BrowserFetcher
from faqaudit.config import BrowserConfig, Config, DetectionSettings
from faqaudit.crawler import WebCrawler
from faqaudit.models import DocumentResult, FetchResult

logger = logging.getLogger(__name__)


class QACrawler:
    """Fetches pages one by one and runs the QA structure analysis on each.

    Requests are sequential with a fixed pause between them so the audited
    site is not overloaded. A page that cannot be fetched still yields a
    DocumentResult, with zero questions and its error message.
    """

    def __init__(
        self,
        config: Optional[Config] = None,
        detection: Optional[DetectionSettings] = None,
        browser_config: Optional[BrowserConfig] = None,
    ):
        """Initialize the batch crawler.

        Args:
            config: Crawler configuration (defaults to Config())
            detection: Detection settings passed to the analyzer
            browser_config: Playwright settings, used when rendering pages
        """
        self.config = config or Config()
        self.analyzer = QAStructureAnalyzer(detection)
        self.browser_config = browser_config or BrowserConfig()
        self.crawler = WebCrawler(user_agent=self.config.user_agent)

    def crawl_url(self, url: str) -> DocumentResult:
        """Fetch and analyze a single static page."""
        fetch_result = self.crawler.fetch(
            url, timeout=self.config.timeout, max_retries=self.config.max_retries
        )
        return self._analyze_fetch(fetch_result)

    def crawl_multiple_urls(
        self, urls: Iterable[str], use_browser: Optional[bool] = None
    ) -> List[DocumentResult]:
        """Fetch and analyze every URL, in order.

        Args:
            urls: Pages to audit
            use_browser: Render pages with Playwright (defaults to config.use_browser)

        Returns:
            One DocumentResult per URL, in input order
        """
        urls = list(urls)
        if use_browser is None:
            use_browser = self.config.use_browser

        if use_browser:
            return asyncio.run(self._crawl_with_browser(urls))

        results = []
        for position, url in enumerate(urls):
            logger.info(f"Crawling ({position + 1}/{len(urls)}): {url}")
            results.append(self.crawl_url(url))

            # Rate limiting
            if position < len(urls) - 1:
                time.sleep(self.config.rate_limit)

        return results

    async def _crawl_with_browser(self, urls: List[str]) -> List[DocumentResult]:
        """Render and analyze every URL with one shared browser."""
        results = []
        async with BrowserFetcher(self.browser_config, user_agent=self.config.user_agent) as fetcher:
            for position, url in enumerate(urls):
                logger.info(f"Rendering ({position + 1}/{len(urls)}): {url}")
                fetch_result = await fetcher.fetch(url)
                results.append(self._analyze_fetch(fetch_result))

                if position < len(urls) - 1:
                    await asyncio.sleep(self.config.rate_limit)

        return results

    def find_ko_urls(self, urls: Iterable[str], use_browser: Optional[bool] = None) -> List[str]:
        """Crawl the URLs and return those that failed or hold an invalid QA block."""
        results = self.crawl_multiple_urls(urls, use_browser=use_browser)
        return [result.url for result in results if result.has_issues]

    def _analyze_fetch(self, fetch_result: FetchResult) -> DocumentResult:
        if not fetch_result.success:
            logger.error(f"Error while crawling {fetch_result.url}: {fetch_result.error}")
            return DocumentResult(url=fetch_result.url, error=fetch_result.error or "Fetch failed")

        result = self.analyzer.analyze_html(fetch_result.html, fetch_result.url)
        logger.info(
            f"  {result.total_questions} questions "
            f"({result.detection_methods['schema']} schema, "
            f"{result.detection_methods['semantic']} semantic), "
            f"{result.valid_questions} valid"
        )
        return result
