"""
Structured Data QA Detection

Finds schema.org Question blocks declared with microdata and checks the
attributes rich results rely on:
- itemscope / itemprop="mainEntity" / itemtype on the Question
- a name element holding the question title
- an acceptedAnswer Answer item holding the answer text
"""

import logging
from typing import List, Optional

from faqaudit.constants import (
    ACCEPTED_ANSWER,
    ANSWER_TYPE,
    ISSUE_ANSWER_ITEMPROP,
    ISSUE_ANSWER_ITEMSCOPE,
    ISSUE_ANSWER_ITEMTYPE,
    ISSUE_ANSWER_MISSING,
    ISSUE_ANSWER_TEXT,
    ISSUE_QUESTION_ITEMPROP,
    ISSUE_QUESTION_ITEMSCOPE,
    ISSUE_QUESTION_ITEMTYPE,
    ISSUE_QUESTION_NAME,
    ITEMPROP,
    ITEMSCOPE,
    ITEMTYPE,
    MAIN_ENTITY,
    MIXED_CONTENT,
    NAME_PROP,
    QUESTION_TYPE,
    TEXT_PROP,
)
from faqaudit.dom import Node
from faqaudit.models import BlockKind, BlockResult, QuestionStructure
from faqaudit.utils.text import describe_value, join_texts, truncate_text
from faqaudit.validation import BlockLocator, BlockValidator, collect_issues

logger = logging.getLogger(__name__)


def check_itemscope(node: Node, message: str) -> Optional[str]:
    """Report a missing itemscope attribute."""
    if not node.has_attr(ITEMSCOPE):
        return message
    return None


def check_itemprop(node: Node, expected: str, message: str) -> Optional[str]:
    """Report an itemprop that differs from expected, naming the actual value."""
    actual = node.get(ITEMPROP)
    if actual != expected:
        return message.format(actual=describe_value(actual))
    return None


def check_itemtype(node: Node, expected: str, message: str) -> Optional[str]:
    """Report an itemtype that differs from expected, naming the actual value."""
    actual = node.get(ITEMTYPE)
    if actual != expected:
        return message.format(actual=describe_value(actual))
    return None


def check_present(nodes: List[Node], message: str) -> Optional[str]:
    """Report an empty lookup result."""
    if not nodes:
        return message
    return None


def is_question_item(node: Node) -> bool:
    """Check whether a node is a fully scoped schema.org Question item."""
    return node.has_attr(ITEMSCOPE) and node.get(ITEMTYPE) == QUESTION_TYPE


class StructuredBlockValidator(BlockValidator):
    """Validate microdata Question blocks."""

    kind = BlockKind.SCHEMA

    def validate(self, node: Node, index: int) -> BlockResult:
        titles = node.find_by_attr(ITEMPROP, NAME_PROP)
        answers = node.find_by_attr(ITEMTYPE, ANSWER_TYPE)

        issues = collect_issues([
            lambda: check_itemscope(node, ISSUE_QUESTION_ITEMSCOPE),
            lambda: check_itemprop(node, MAIN_ENTITY, ISSUE_QUESTION_ITEMPROP),
            lambda: check_itemtype(node, QUESTION_TYPE, ISSUE_QUESTION_ITEMTYPE),
            lambda: check_present(titles, ISSUE_QUESTION_NAME),
            lambda: check_present(answers, ISSUE_ANSWER_MISSING),
        ])

        question_title = None
        question_element = None
        if titles:
            question_title = join_texts(t.text() for t in titles)
            question_element = titles[0].tag_name

        answer_fields = {}
        if answers:
            issues.extend(self._validate_answer(answers[0], answer_fields))

        structure = QuestionStructure(
            question_title=question_title,
            question_element=question_element,
            **answer_fields,
        )

        return BlockResult(
            index=index,
            kind=self.kind,
            is_valid=not issues,
            issues=tuple(issues),
            structure=structure,
        )

    def _validate_answer(self, answer: Node, answer_fields: dict) -> List[str]:
        """Check the acceptedAnswer item and record its text into answer_fields."""
        texts = answer.find_by_attr(ITEMPROP, TEXT_PROP)

        issues = collect_issues([
            lambda: check_itemscope(answer, ISSUE_ANSWER_ITEMSCOPE),
            lambda: check_itemprop(answer, ACCEPTED_ANSWER, ISSUE_ANSWER_ITEMPROP),
            lambda: check_itemtype(answer, ANSWER_TYPE, ISSUE_ANSWER_ITEMTYPE),
            lambda: check_present(texts, ISSUE_ANSWER_TEXT),
        ])

        if texts:
            answer_text = join_texts(t.text() for t in texts)
            answer_fields["answer_text"] = truncate_text(
                answer_text, self.detection.max_answer_text_length
            )
            answer_fields["answer_length"] = len(answer_text)
            answer_fields["answer_element"] = (
                texts[0].tag_name if len(texts) == 1 else MIXED_CONTENT
            )

        return issues


class StructuredBlockLocator(BlockLocator):
    """Find every element typed as a schema.org Question."""

    def __init__(self, validator: Optional[StructuredBlockValidator] = None):
        super().__init__(validator or StructuredBlockValidator())

    def locate(self, document: Node) -> List[Node]:
        questions = document.find_by_attr(ITEMTYPE, QUESTION_TYPE)
        logger.debug(f"Found {len(questions)} schema.org Question elements")
        return questions
