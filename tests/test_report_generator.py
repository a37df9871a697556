"""Tests for report aggregation."""

from faqaudit.models import (
    BlockKind,
    BlockResult,
    CrawlReport,
    DocumentResult,
    ReportSummary,
)
from faqaudit.report_generator import format_report_summary, generate_report


def block(index, kind=BlockKind.SCHEMA, valid=True):
    issues = () if valid else ("Attribut itemscope manquant sur Question",)
    return BlockResult(index=index, kind=kind, is_valid=valid, issues=issues)


def sample_results():
    return [
        DocumentResult(url="https://example.com/a", questions=(block(1), block(2))),
        DocumentResult(
            url="https://example.com/b",
            questions=(block(1, valid=False), block(1, BlockKind.SEMANTIC, valid=False)),
        ),
        DocumentResult(url="https://example.com/c", error="Request timeout after 10s"),
    ]


class TestGenerateReport:
    """Test cases for generate_report."""

    def test_summary_counts(self):
        """Test summary counts are summed over every page."""
        report = generate_report(sample_results())
        summary = report.summary

        assert summary.total_urls == 3
        assert summary.urls_with_errors == 1
        assert summary.total_questions == 4
        assert summary.total_valid_questions == 2
        assert summary.total_invalid_questions == 2
        assert summary.validity_rate == 50.0
        assert len(report.details) == 3

    def test_empty_batch(self):
        """Test an empty batch gives zero counts and no division error."""
        report = generate_report([])

        assert report.summary.total_urls == 0
        assert report.summary.validity_rate == 0.0

    def test_to_dict(self):
        """Test the report dictionary shape."""
        data = generate_report(sample_results()).to_dict()

        assert data["summary"] == {
            "totalUrls": 3,
            "urlsWithErrors": 1,
            "totalQuestions": 4,
            "totalValidQuestions": 2,
            "totalInvalidQuestions": 2,
            "validityRate": 50.0,
        }
        assert [d["url"] for d in data["details"]] == [
            "https://example.com/a", "https://example.com/b", "https://example.com/c",
        ]
        assert data["details"][1]["detectionMethods"] == {"schema": 1, "semantic": 1}


class TestFormatReportSummary:
    """Test cases for the console summary."""

    def test_lists_pages_to_fix(self):
        """Test pages with errors or invalid blocks are listed."""
        text = format_report_summary(generate_report(sample_results()))

        assert "URLs analyzed: 3" in text
        assert "Validity rate: 50.00%" in text
        assert "https://example.com/b (2/2 questions to fix)" in text
        assert "https://example.com/c (error: Request timeout after 10s)" in text
        assert "https://example.com/a" not in text
        assert "- 1/3 URLs with errors" in text
        assert "- 2/4 questions to fix" in text

    def test_clean_report(self):
        """Test no page list is printed when everything is valid."""
        report = CrawlReport(summary=ReportSummary(total_urls=1, total_questions=1,
                                                   total_valid_questions=1))
        text = format_report_summary(report)

        assert "Pages to fix" not in text
        assert "Validity rate: 100.00%" in text
