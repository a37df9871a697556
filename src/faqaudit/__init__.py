"""Schema.org Question/Answer markup auditor."""

__version__ = "0.1.0"

from faqaudit.analyzer import QAStructureAnalyzer, InvalidDocumentError, analyze
from faqaudit.structured_data import StructuredBlockLocator, StructuredBlockValidator
from faqaudit.semantic import SemanticBlockLocator, SemanticBlockValidator
from faqaudit.dom import Node, SoupNode
from faqaudit.crawler import WebCrawler
from faqaudit.browser_crawler import BrowserFetcher
from faqaudit.site_crawler import QACrawler
from faqaudit.report_generator import generate_report, format_report_summary
from faqaudit.models import (
    BlockKind,
    QuestionStructure,
    BlockResult,
    DocumentResult,
    FetchResult,
    ReportSummary,
    CrawlReport,
)
from faqaudit.config import Config, DetectionSettings, BrowserConfig, settings

__all__ = [
    # Core
    "QAStructureAnalyzer",
    "InvalidDocumentError",
    "analyze",
    "StructuredBlockLocator",
    "StructuredBlockValidator",
    "SemanticBlockLocator",
    "SemanticBlockValidator",
    "Node",
    "SoupNode",
    # Crawling
    "WebCrawler",
    "BrowserFetcher",
    "QACrawler",
    "generate_report",
    "format_report_summary",
    # Models
    "BlockKind",
    "QuestionStructure",
    "BlockResult",
    "DocumentResult",
    "FetchResult",
    "ReportSummary",
    "CrawlReport",
    # Config
    "Config",
    "DetectionSettings",
    "BrowserConfig",
    "settings",
]
