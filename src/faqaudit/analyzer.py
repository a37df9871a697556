"""QA structure analyzer: runs both detection strategies over one document."""

import logging
from datetime import datetime, timezone
from typing import Optional

from faqaudit.config import DetectionSettings, default_detection
from faqaudit.dom import SoupNode, as_node
from faqaudit.models import DocumentResult
from faqaudit.semantic import SemanticBlockLocator, SemanticBlockValidator
from faqaudit.structured_data import StructuredBlockLocator, StructuredBlockValidator

logger = logging.getLogger(__name__)


class InvalidDocumentError(ValueError):
    """Raised when analyze() is given something that is not a parsed document."""


class QAStructureAnalyzer:
    """Locate and validate the QA blocks of parsed HTML documents.

    Schema.org microdata blocks are reported first, then heading-based
    blocks, each group in document order. The analyzer keeps no state
    between calls and never modifies the document.
    """

    def __init__(self, detection: Optional[DetectionSettings] = None):
        """Initialize the analyzer.

        Args:
            detection: Detection settings (defaults to DetectionSettings())
        """
        self.detection = detection or default_detection
        self.locators = [
            StructuredBlockLocator(StructuredBlockValidator(self.detection)),
            SemanticBlockLocator(SemanticBlockValidator(self.detection), self.detection),
        ]

    def analyze(self, document, url: str) -> DocumentResult:
        """
        Analyze the QA blocks of a document.

        Args:
            document: faqaudit.dom.Node or BeautifulSoup parsed HTML
            url: Page URL the document came from

        Returns:
            DocumentResult with every detected block

        Raises:
            InvalidDocumentError: If document is not a parsed tree
        """
        node = as_node(document)
        if node is None:
            raise InvalidDocumentError(
                f"Expected a parsed document for {url}, got {type(document).__name__}"
            )

        questions = []
        for locator in self.locators:
            questions.extend(locator.detect(node))

        result = DocumentResult(
            url=url,
            questions=tuple(questions),
            timestamp=datetime.now(timezone.utc),
        )

        logger.debug(
            f"{url}: {result.total_questions} questions "
            f"({result.detection_methods['schema']} schema, "
            f"{result.detection_methods['semantic']} semantic), "
            f"{result.valid_questions} valid"
        )
        return result

    def analyze_html(self, html: str, url: str) -> DocumentResult:
        """Parse raw markup with BeautifulSoup, then analyze it.

        Raises:
            InvalidDocumentError: If html is not a string
        """
        if not isinstance(html, str):
            raise InvalidDocumentError(
                f"Expected HTML markup for {url}, got {type(html).__name__}"
            )
        return self.analyze(SoupNode.from_html(html, self.detection.parser), url)


def analyze(document, url: str, detection: Optional[DetectionSettings] = None) -> DocumentResult:
    """Analyze one parsed document with a fresh QAStructureAnalyzer."""
    return QAStructureAnalyzer(detection).analyze(document, url)
