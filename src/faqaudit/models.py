"""Data models for QA structure analysis."""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Optional


class BlockKind(str, Enum):
    """Detection strategy that produced a block."""

    SCHEMA = "schema"  # schema.org Question microdata
    SEMANTIC = "semantic"  # heading followed by body text


@dataclass(frozen=True)
class QuestionStructure:
    """Facts extracted from one QA block."""

    question_title: Optional[str] = None
    question_element: Optional[str] = None
    answer_text: Optional[str] = None  # capped for report compactness
    answer_element: Optional[str] = None  # tag name or "mixed-content"
    answer_length: Optional[int] = None  # length before capping

    def to_dict(self) -> dict:
        data = {}
        if self.question_title is not None:
            data["questionTitle"] = self.question_title
        if self.question_element is not None:
            data["questionElement"] = self.question_element
        if self.answer_text is not None:
            data["answerText"] = self.answer_text
        if self.answer_element is not None:
            data["answerElement"] = self.answer_element
        if self.answer_length is not None:
            data["answerLength"] = self.answer_length
        return data


@dataclass(frozen=True)
class BlockResult:
    """Validated output for one QA block."""

    index: int  # 1-based, numbered per detection strategy
    kind: BlockKind
    is_valid: bool
    issues: tuple[str, ...] = ()
    structure: QuestionStructure = field(default_factory=QuestionStructure)

    def to_dict(self) -> dict:
        return {
            "index": self.index,
            "type": self.kind.value,
            "isValid": self.is_valid,
            "issues": list(self.issues),
            "structure": self.structure.to_dict(),
        }


@dataclass(frozen=True)
class DocumentResult:
    """All QA blocks found on one page.

    Counts are derived from questions so they can never disagree with it.
    """

    url: str
    questions: tuple[BlockResult, ...] = ()
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    error: Optional[str] = None  # set by the crawler when the page could not be fetched

    @property
    def total_questions(self) -> int:
        return len(self.questions)

    @property
    def valid_questions(self) -> int:
        return sum(1 for q in self.questions if q.is_valid)

    @property
    def not_valid_questions(self) -> int:
        return self.total_questions - self.valid_questions

    @property
    def detection_methods(self) -> dict[str, int]:
        counts = {kind.value: 0 for kind in BlockKind}
        for question in self.questions:
            counts[question.kind.value] += 1
        return counts

    @property
    def has_issues(self) -> bool:
        """True when the page failed to load or holds an invalid block."""
        return self.error is not None or self.not_valid_questions > 0

    def to_dict(self) -> dict:
        data = {
            "url": self.url,
            "totalQuestions": self.total_questions,
            "validQuestions": self.valid_questions,
            "notValidQuestions": self.not_valid_questions,
            "detectionMethods": self.detection_methods,
            "timestamp": self.timestamp.isoformat(),
            "questions": [q.to_dict() for q in self.questions],
        }
        if self.error is not None:
            data["error"] = self.error
        return data


@dataclass
class FetchResult:
    """Result of fetching one page."""

    url: str
    html: str = ""
    status_code: int = 0
    success: bool = True
    error: Optional[str] = None
    load_time: float = 0.0


@dataclass
class ReportSummary:
    """Counts aggregated over every analyzed page."""

    total_urls: int = 0
    urls_with_errors: int = 0
    total_questions: int = 0
    total_valid_questions: int = 0

    @property
    def total_invalid_questions(self) -> int:
        return self.total_questions - self.total_valid_questions

    @property
    def validity_rate(self) -> float:
        """Percentage of valid questions, 0.0 when nothing was found."""
        if not self.total_questions:
            return 0.0
        return round(self.total_valid_questions / self.total_questions * 100, 2)

    def to_dict(self) -> dict:
        return {
            "totalUrls": self.total_urls,
            "urlsWithErrors": self.urls_with_errors,
            "totalQuestions": self.total_questions,
            "totalValidQuestions": self.total_valid_questions,
            "totalInvalidQuestions": self.total_invalid_questions,
            "validityRate": self.validity_rate,
        }


@dataclass
class CrawlReport:
    """Summary plus per-page details for a batch of URLs."""

    summary: ReportSummary
    details: list[DocumentResult] = field(default_factory=list)
    generated_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    def to_dict(self) -> dict:
        return {
            "summary": self.summary.to_dict(),
            "generatedAt": self.generated_at.isoformat(),
            "details": [d.to_dict() for d in self.details],
        }
