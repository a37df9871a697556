"""Aggregate per-page results into a crawl report."""

import logging
from typing import Iterable

from faqaudit.models import CrawlReport, DocumentResult, ReportSummary

logger = logging.getLogger(__name__)


def generate_report(results: Iterable[DocumentResult]) -> CrawlReport:
    """Build a CrawlReport from per-page results.

    Args:
        results: DocumentResults, one per crawled URL

    Returns:
        CrawlReport with summary counts and the results as details
    """
    details = list(results)
    summary = ReportSummary(
        total_urls=len(details),
        urls_with_errors=sum(1 for r in details if r.error is not None),
        total_questions=sum(r.total_questions for r in details),
        total_valid_questions=sum(r.valid_questions for r in details),
    )

    logger.info(
        f"Report generated: {summary.total_urls} URLs, "
        f"{summary.total_questions} questions, {summary.validity_rate:.2f}% valid"
    )
    return CrawlReport(summary=summary, details=details)


def format_report_summary(report: CrawlReport) -> str:
    """Render the console summary of a report.

    Args:
        report: CrawlReport to describe

    Returns:
        Multi-line human readable summary
    """
    summary = report.summary
    lines = [
        "",
        "=" * 60,
        "QA STRUCTURE CRAWL REPORT",
        "=" * 60,
        f"URLs analyzed: {summary.total_urls}",
        f"URLs with errors: {summary.urls_with_errors}",
        f"Total questions found: {summary.total_questions}",
        f"Valid questions: {summary.total_valid_questions}",
        f"Validity rate: {summary.validity_rate:.2f}%",
    ]

    flagged = [d for d in report.details if d.has_issues]
    if flagged:
        lines.append("")
        lines.append("Pages to fix:")
        for document in flagged:
            if document.error is not None:
                lines.append(f"  • {document.url} (error: {document.error})")
            else:
                lines.append(
                    f"  • {document.url} "
                    f"({document.not_valid_questions}/{document.total_questions} questions to fix)"
                )

    lines.append("")
    lines.append(f"Final summary:")
    lines.append(f"- {summary.urls_with_errors}/{summary.total_urls} URLs with errors")
    lines.append(
        f"- {summary.total_invalid_questions}/{summary.total_questions} questions to fix"
    )
    lines.append("=" * 60)
    return "\n".join(lines)
