"""Tests for the batch QA crawler."""

from unittest.mock import AsyncMock, MagicMock, Mock, patch

import pytest
import requests

from faqaudit.config import Config
from faqaudit.models import FetchResult
from faqaudit.report_generator import generate_report
from faqaudit.site_crawler import QACrawler


PAGE = """
<div itemscope itemprop="mainEntity" itemtype="https://schema.org/Question">
    <h3 itemprop="name">Comment financer un bateau ?</h3>
    <div itemscope itemprop="acceptedAnswer" itemtype="https://schema.org/Answer">
        <p itemprop="text">Avec un prêt personnel adapté.</p>
    </div>
</div>
"""

BROKEN_PAGE = """
<div itemscope itemtype="https://schema.org/Question">
    <h3 itemprop="name">Quelle assurance choisir ?</h3>
</div>
"""


def fetched(url, html=PAGE):
    return FetchResult(url=url, html=html, status_code=200, success=True)


class TestQACrawler:
    """Test cases for QACrawler."""

    @pytest.fixture
    def crawler(self):
        crawler = QACrawler(config=Config(rate_limit=0.5))
        crawler.crawler = Mock()
        return crawler

    @patch("faqaudit.site_crawler.time.sleep")
    def test_crawl_multiple_urls(self, mock_sleep, crawler):
        """Test each URL is fetched, analyzed and paced."""
        crawler.crawler.fetch.side_effect = lambda url, **kwargs: fetched(url)
        urls = ["https://example.com/a", "https://example.com/b", "https://example.com/c"]

        results = crawler.crawl_multiple_urls(urls)

        assert [r.url for r in results] == urls
        assert all(r.total_questions == 1 and r.valid_questions == 1 for r in results)
        # No pause after the last request
        assert mock_sleep.call_count == 2
        mock_sleep.assert_called_with(0.5)

    @patch("faqaudit.site_crawler.time.sleep")
    def test_fetch_failure_recorded(self, mock_sleep, crawler):
        """Test a failed fetch yields an empty result carrying the error."""
        crawler.crawler.fetch.return_value = FetchResult(
            url="https://example.com/down", success=False, error="Connection error: refused"
        )

        results = crawler.crawl_multiple_urls(["https://example.com/down"])

        assert results[0].error == "Connection error: refused"
        assert results[0].total_questions == 0
        assert results[0].to_dict()["error"] == "Connection error: refused"
        mock_sleep.assert_not_called()

    def test_zero_retries_counted_as_error(self):
        """Test MAX_RETRIES=0 still fetches the page and a failure lands in urlsWithErrors."""
        crawler = QACrawler(config=Config(max_retries=0, rate_limit=0))
        with patch.object(crawler.crawler.session, "get",
                          side_effect=requests.exceptions.Timeout()) as get:
            result = crawler.crawl_url("https://example.com/down")

        assert get.call_count == 1
        assert result.error == "Request timeout after 10s"
        assert generate_report([result]).summary.urls_with_errors == 1

    def test_error_marker_when_fetch_gives_none(self, crawler):
        """Test a failed fetch without a message still carries an error."""
        crawler.crawler.fetch.return_value = FetchResult(url="https://example.com", success=False)

        result = crawler.crawl_url("https://example.com")

        assert result.error == "Fetch failed"

    def test_fetch_uses_config(self, crawler):
        """Test timeout and retries come from the configuration."""
        crawler.config.timeout = 7
        crawler.config.max_retries = 2
        crawler.crawler.fetch.return_value = fetched("https://example.com")

        crawler.crawl_url("https://example.com")

        crawler.crawler.fetch.assert_called_once_with("https://example.com", timeout=7, max_retries=2)

    @patch("faqaudit.site_crawler.time.sleep")
    def test_find_ko_urls(self, mock_sleep, crawler):
        """Test KO URLs are the failed pages and the pages with invalid blocks."""
        pages = {
            "https://example.com/ok": fetched("https://example.com/ok"),
            "https://example.com/broken": fetched("https://example.com/broken", BROKEN_PAGE),
            "https://example.com/down": FetchResult(
                url="https://example.com/down", success=False, error="timeout"
            ),
        }
        crawler.crawler.fetch.side_effect = lambda url, **kwargs: pages[url]

        ko_urls = crawler.find_ko_urls(list(pages))

        assert ko_urls == ["https://example.com/broken", "https://example.com/down"]

    @patch("faqaudit.site_crawler.BrowserFetcher")
    def test_crawl_with_browser(self, mock_fetcher_class, crawler):
        """Test browser mode renders every page with one shared browser."""
        fetcher = MagicMock()
        fetcher.fetch = AsyncMock(side_effect=lambda url: fetched(url))
        context = MagicMock()
        context.__aenter__ = AsyncMock(return_value=fetcher)
        context.__aexit__ = AsyncMock(return_value=None)
        mock_fetcher_class.return_value = context
        crawler.config.rate_limit = 0

        results = crawler.crawl_multiple_urls(
            ["https://example.com/a", "https://example.com/b"], use_browser=True
        )

        assert mock_fetcher_class.call_count == 1
        assert fetcher.fetch.await_count == 2
        assert [r.total_questions for r in results] == [1, 1]
        crawler.crawler.fetch.assert_not_called()
