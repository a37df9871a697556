"""Tests for the command line interface."""

import json
from unittest.mock import patch

import pytest

from faqaudit import cli
from faqaudit.models import DocumentResult


@pytest.fixture(autouse=True)
def no_logging_setup():
    with patch("faqaudit.cli.setup_logging"):
        yield


class TestCli:
    """Test cases for the faqaudit command."""

    def test_no_urls(self, capsys):
        """Test running without URLs exits with an error."""
        assert cli.main([]) == 1
        assert "no URL to audit" in capsys.readouterr().err

    @patch("faqaudit.cli.QACrawler")
    def test_runs_audit_and_saves_report(self, mock_crawler_class, tmp_path, capsys):
        """Test URLs are crawled, summarized and saved."""
        mock_crawler_class.return_value.crawl_multiple_urls.return_value = [
            DocumentResult(url="https://example.com/a"),
        ]
        output = tmp_path / "report.json"

        code = cli.main(["https://example.com/a", "--output", str(output), "--rate-limit", "0"])

        assert code == 0
        mock_crawler_class.return_value.crawl_multiple_urls.assert_called_once_with(
            ["https://example.com/a"]
        )
        config = mock_crawler_class.call_args.kwargs["config"]
        assert config.rate_limit == 0
        assert json.loads(output.read_text(encoding="utf-8"))["summary"]["totalUrls"] == 1
        assert "URLs analyzed: 1" in capsys.readouterr().out

    @patch("faqaudit.cli.QACrawler")
    def test_urls_file_and_detection_flags(self, mock_crawler_class, tmp_path):
        """Test URL files are merged and detection flags applied."""
        mock_crawler_class.return_value.crawl_multiple_urls.return_value = []
        urls_file = tmp_path / "urls.txt"
        urls_file.write_text("https://example.com/b\n", encoding="utf-8")

        cli.main([
            "https://example.com/a",
            "--urls-file", str(urls_file),
            "--container", ".faq",
            "--strict-exclusion",
            "--browser",
            "--output", str(tmp_path / "report.json"),
        ])

        mock_crawler_class.return_value.crawl_multiple_urls.assert_called_once_with(
            ["https://example.com/a", "https://example.com/b"]
        )
        kwargs = mock_crawler_class.call_args.kwargs
        assert kwargs["detection"].container_selector == ".faq"
        assert kwargs["detection"].exclude_structured_headings is True
        assert kwargs["config"].use_browser is True
