"""
Semantic QA Detection

Finds questions written as plain headings followed by body text inside the
page's content container. Such blocks carry no schema.org microdata, so they
are always reported as invalid, together with content checks on the heading
and on the answer text that follows it.
"""

import logging
from typing import List, Optional

from faqaudit.constants import (
    BLOCK_LEVEL_TAGS,
    ISSUE_ANSWER_ITEMSCOPE,
    ISSUE_ANSWER_MISSING,
    ISSUE_ANSWER_TEXT,
    ISSUE_EMPTY_TITLE,
    ISSUE_NO_ANSWER_CONTENT,
    ISSUE_QUESTION_ITEMSCOPE,
    ISSUE_QUESTION_NAME,
    ISSUE_SEMANTIC_ANSWER_ITEMPROP,
    ISSUE_SEMANTIC_ITEMPROP,
    ISSUE_SEMANTIC_ITEMTYPE,
    ISSUE_SHORT_ANSWER,
    ISSUE_SHORT_TITLE,
    MIXED_CONTENT,
)
from faqaudit.config import DetectionSettings
from faqaudit.dom import Node
from faqaudit.models import BlockKind, BlockResult, QuestionStructure
from faqaudit.structured_data import is_question_item
from faqaudit.utils.text import heading_level, is_boundary_heading, join_texts, truncate_text
from faqaudit.validation import BlockLocator, BlockValidator, collect_issues

logger = logging.getLogger(__name__)

# A heading never carries Question microdata, whatever its content
MISSING_QUESTION_MARKUP = (
    ISSUE_QUESTION_ITEMSCOPE,
    ISSUE_SEMANTIC_ITEMPROP,
    ISSUE_SEMANTIC_ITEMTYPE,
    ISSUE_QUESTION_NAME,
)

# Nor does the text that follows it carry Answer microdata
MISSING_ANSWER_MARKUP = (
    ISSUE_ANSWER_MISSING,
    ISSUE_ANSWER_ITEMSCOPE,
    ISSUE_SEMANTIC_ANSWER_ITEMPROP,
    ISSUE_ANSWER_TEXT,
)

# Reported instead when nothing follows the heading
NO_ANSWER_CONTENT = (
    ISSUE_NO_ANSWER_CONTENT,
    ISSUE_ANSWER_MISSING,
)


def find_answer_siblings(heading: Node) -> List[Node]:
    """Collect the elements following a heading up to the next heading of equal or higher rank.

    The boundary heading itself is excluded. Lower-ranked headings (an h3
    under an h2) are part of the answer.
    """
    level = heading_level(heading.tag_name) or 6
    siblings = []
    sibling = heading.next_sibling()
    while sibling is not None and not is_boundary_heading(sibling.tag_name, level):
        siblings.append(sibling)
        sibling = sibling.next_sibling()
    return siblings


def is_block_level(node: Node) -> bool:
    return node.tag_name in BLOCK_LEVEL_TAGS


def check_title(title: str, min_length: int) -> Optional[str]:
    """Report an empty question title, or one shorter than min_length."""
    if not title:
        return ISSUE_EMPTY_TITLE
    if len(title) < min_length:
        return ISSUE_SHORT_TITLE.format(length=len(title))
    return None


def check_answer_length(answer_text: str, min_length: int) -> Optional[str]:
    """Report answer text shorter than min_length."""
    if len(answer_text) < min_length:
        return ISSUE_SHORT_ANSWER.format(length=len(answer_text))
    return None


class SemanticBlockValidator(BlockValidator):
    """Validate heading-based QA blocks."""

    kind = BlockKind.SEMANTIC

    def validate(self, node: Node, index: int) -> BlockResult:
        title = node.text()
        fields = {
            "question_title": title,
            "question_element": node.tag_name,
        }

        issues = list(MISSING_QUESTION_MARKUP) + collect_issues([
            lambda: check_title(title, self.detection.min_title_length),
        ])

        if title:
            issues.extend(self._validate_answer(node, fields))

        return BlockResult(
            index=index,
            kind=self.kind,
            is_valid=False,
            issues=tuple(issues),
            structure=QuestionStructure(**fields),
        )

    def _validate_answer(self, heading: Node, fields: dict) -> List[str]:
        """Check the text following the heading and record it into fields."""
        siblings = find_answer_siblings(heading)
        if not siblings:
            return list(NO_ANSWER_CONTENT)

        answer_text = join_texts(s.text() for s in siblings)
        fields["answer_text"] = truncate_text(
            answer_text, self.detection.max_answer_text_length
        )
        fields["answer_element"] = MIXED_CONTENT
        fields["answer_length"] = len(answer_text)

        return list(MISSING_ANSWER_MARKUP) + collect_issues([
            lambda: check_answer_length(answer_text, self.detection.min_answer_length),
        ])


class SemanticBlockLocator(BlockLocator):
    """Find question headings that are direct children of the content container."""

    def __init__(
        self,
        validator: Optional[SemanticBlockValidator] = None,
        detection: Optional[DetectionSettings] = None,
    ):
        validator = validator or SemanticBlockValidator(detection)
        super().__init__(validator)
        self.detection = detection or validator.detection

    def locate(self, document: Node) -> List[Node]:
        heading_tag = self.detection.heading_tag.lower()
        candidates = []

        for container in document.select(self.detection.container_selector):
            for child in container.children():
                if child.tag_name != heading_tag:
                    continue
                if self._is_covered_by_schema(child):
                    logger.debug(f"Skipping heading already inside a Question item: {child.text()[:50]}")
                    continue
                candidates.append(child)

        logger.debug(f"Found {len(candidates)} semantic question headings")
        return candidates

    def _is_covered_by_schema(self, heading: Node) -> bool:
        """Check whether the heading's enclosing block is a schema.org Question."""
        if not self.detection.exclude_structured_headings:
            return False
        block = heading.closest(is_block_level)
        return block is not None and is_question_item(block)
