"""Tests for the HTTP page fetcher."""

from unittest.mock import Mock, patch

import pytest
import requests

from faqaudit.config import settings
from faqaudit.crawler import WebCrawler


def make_response(text="<html></html>", status_code=200):
    response = Mock()
    response.text = text
    response.status_code = status_code
    response.raise_for_status.return_value = None
    return response


class TestWebCrawler:
    """Test cases for WebCrawler."""

    def test_crawler_initialization(self):
        """Test crawler defaults to the configured user agent."""
        crawler = WebCrawler()
        assert crawler.user_agent == settings.USER_AGENT
        assert crawler.session.headers["User-Agent"] == settings.USER_AGENT

    def test_crawler_custom_user_agent(self):
        """Test crawler with custom user agent."""
        crawler = WebCrawler(user_agent="CustomBot/1.0")
        assert crawler.session.headers["User-Agent"] == "CustomBot/1.0"

    def test_fetch_success(self):
        """Test a successful fetch returns the page markup."""
        crawler = WebCrawler()
        with patch.object(crawler.session, "get", return_value=make_response("<p>ok</p>")) as get:
            result = crawler.fetch("https://example.com", timeout=5)

        get.assert_called_once_with("https://example.com", timeout=5, allow_redirects=True)
        assert result.success is True
        assert result.html == "<p>ok</p>"
        assert result.status_code == 200

    def test_fetch_http_error(self):
        """Test an HTTP error status gives a failed result."""
        crawler = WebCrawler()
        response = make_response(status_code=404)
        response.raise_for_status.side_effect = requests.exceptions.HTTPError("404 Client Error")

        with patch.object(crawler.session, "get", return_value=response):
            result = crawler.fetch("https://example.com/missing")

        assert result.success is False
        assert "404" in result.error
        assert result.html == ""

    def test_fetch_timeout(self):
        """Test a timeout gives a failed result naming the timeout."""
        crawler = WebCrawler()
        with patch.object(crawler.session, "get", side_effect=requests.exceptions.Timeout()):
            result = crawler.fetch("https://example.com", timeout=3)

        assert result.success is False
        assert result.error == "Request timeout after 3s"

    def test_fetch_connection_error(self):
        """Test a connection error gives a failed result."""
        crawler = WebCrawler()
        with patch.object(crawler.session, "get",
                          side_effect=requests.exceptions.ConnectionError("refused")):
            result = crawler.fetch("https://example.com")

        assert result.success is False
        assert result.error.startswith("Connection error")

    def test_single_attempt_by_default(self):
        """Test no retry happens unless asked for."""
        crawler = WebCrawler()
        with patch.object(crawler.session, "get",
                          side_effect=requests.exceptions.Timeout()) as get:
            crawler.fetch("https://example.com")

        assert get.call_count == 1

    @pytest.mark.parametrize("max_retries", [0, -1])
    def test_non_positive_retries_still_fetch_once(self, max_retries):
        """Test a retry count below 1 still makes one attempt and reports its error."""
        crawler = WebCrawler()
        with patch.object(crawler.session, "get",
                          side_effect=requests.exceptions.ConnectionError("refused")) as get:
            result = crawler.fetch("https://example.com", max_retries=max_retries)

        assert get.call_count == 1
        assert result.success is False
        assert result.error == "Connection error: refused"

    @patch("faqaudit.crawler.time.sleep")
    def test_retries_when_configured(self, mock_sleep):
        """Test a failed attempt is retried up to max_retries."""
        crawler = WebCrawler()
        with patch.object(crawler.session, "get",
                          side_effect=[requests.exceptions.Timeout(), make_response("<p>2</p>")]) as get:
            result = crawler.fetch("https://example.com", max_retries=2)

        assert get.call_count == 2
        assert mock_sleep.call_count == 1
        assert result.success is True
        assert result.html == "<p>2</p>"

    @pytest.mark.integration
    def test_fetch_valid_url(self):
        """Test fetching a live URL."""
        result = WebCrawler().fetch("https://example.com")

        assert result.success is True
        assert result.html != ""
