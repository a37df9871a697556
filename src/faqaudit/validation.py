"""
Block validation abstraction.

Both detection strategies validate their blocks through a BlockValidator.
Each check is a plain function returning an issue message or None; the
issues are collected in rule order so reports stay deterministic.
"""

from abc import ABC, abstractmethod
from typing import Callable, Iterable, List, Optional

from faqaudit.config import DetectionSettings, default_detection
from faqaudit.dom import Node
from faqaudit.models import BlockKind, BlockResult

Rule = Callable[[], Optional[str]]


def collect_issues(rules: Iterable[Rule]) -> List[str]:
    """Run every rule in order and keep the issues they report."""
    issues = []
    for rule in rules:
        issue = rule()
        if issue is not None:
            issues.append(issue)
    return issues


class BlockValidator(ABC):
    """Validate one located QA block and describe its defects."""

    kind: BlockKind

    def __init__(self, detection: Optional[DetectionSettings] = None):
        self.detection = detection or default_detection

    @abstractmethod
    def validate(self, node: Node, index: int) -> BlockResult:
        """Validate the block rooted at node.

        Args:
            node: Element the locator matched
            index: 1-based position among this locator's blocks

        Returns:
            BlockResult for the block
        """


class BlockLocator(ABC):
    """Find candidate QA blocks in a document and validate them."""

    def __init__(self, validator: BlockValidator):
        self.validator = validator

    @abstractmethod
    def locate(self, document: Node) -> List[Node]:
        """Return candidate blocks in document order."""

    def detect(self, document: Node) -> List[BlockResult]:
        """Locate blocks and validate each of them, numbering from 1."""
        return [
            self.validator.validate(node, index)
            for index, node in enumerate(self.locate(document), start=1)
        ]
