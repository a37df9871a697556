"""
Document node interface.

The detection engine never talks to a parsing library directly. It queries
documents through the small read-only Node interface below, so any HTML
parser able to answer these questions can back it. SoupNode is the
BeautifulSoup implementation used by the crawler.
"""

from abc import ABC, abstractmethod
from typing import Callable, List, Optional

from bs4 import BeautifulSoup
from bs4.element import Tag


class Node(ABC):
    """Read-only view over one element (or the root) of a parsed document."""

    @property
    @abstractmethod
    def tag_name(self) -> str:
        """Lower-cased tag name ("[document]" for the root)."""

    @abstractmethod
    def get(self, attribute: str) -> Optional[str]:
        """Return an attribute value, None when the attribute is absent."""

    @abstractmethod
    def has_attr(self, attribute: str) -> bool:
        """Check attribute presence, regardless of its value."""

    @abstractmethod
    def text(self) -> str:
        """Return the element's text content, trimmed."""

    @abstractmethod
    def find_by_attr(self, attribute: str, value: str) -> List["Node"]:
        """Descendants whose attribute equals value exactly, in document order."""

    @abstractmethod
    def select(self, selector: str) -> List["Node"]:
        """Descendants matching a CSS selector, in document order."""

    @abstractmethod
    def next_sibling(self) -> Optional["Node"]:
        """Next element sibling, skipping text and comments."""

    @abstractmethod
    def closest(self, predicate: Callable[["Node"], bool]) -> Optional["Node"]:
        """Nearest ancestor (excluding self) for which predicate holds."""

    @abstractmethod
    def children(self) -> List["Node"]:
        """Direct child elements."""


class SoupNode(Node):
    """Node backed by a BeautifulSoup Tag or document."""

    def __init__(self, tag: Tag):
        self._tag = tag

    @classmethod
    def from_html(cls, html: str, parser: str = "html.parser") -> "SoupNode":
        """Parse raw markup and wrap the resulting document."""
        return cls(BeautifulSoup(html, parser))

    @property
    def tag(self) -> Tag:
        return self._tag

    @property
    def tag_name(self) -> str:
        return (self._tag.name or "").lower()

    def get(self, attribute: str) -> Optional[str]:
        value = self._tag.get(attribute)
        if isinstance(value, list):
            # Multi-valued attributes (class, rel) come back as lists
            return " ".join(value)
        return value

    def has_attr(self, attribute: str) -> bool:
        return self._tag.has_attr(attribute)

    def text(self) -> str:
        return self._tag.get_text().strip()

    def find_by_attr(self, attribute: str, value: str) -> List[Node]:
        return [SoupNode(t) for t in self._tag.find_all(attrs={attribute: value})]

    def select(self, selector: str) -> List[Node]:
        return [SoupNode(t) for t in self._tag.select(selector)]

    def next_sibling(self) -> Optional[Node]:
        for sibling in self._tag.next_siblings:
            if isinstance(sibling, Tag):
                return SoupNode(sibling)
        return None

    def closest(self, predicate: Callable[[Node], bool]) -> Optional[Node]:
        for parent in self._tag.parents:
            candidate = SoupNode(parent)
            if predicate(candidate):
                return candidate
        return None

    def children(self) -> List[Node]:
        return [SoupNode(c) for c in self._tag.children if isinstance(c, Tag)]

    def __eq__(self, other) -> bool:
        return isinstance(other, SoupNode) and other._tag is self._tag

    def __hash__(self) -> int:
        return id(self._tag)

    def __repr__(self) -> str:
        return f"SoupNode(<{self.tag_name}>)"


def as_node(document) -> Optional[Node]:
    """Wrap a BeautifulSoup document or Tag; pass Node instances through.

    Returns None for anything that is not a parsed tree.
    """
    if isinstance(document, Node):
        return document
    if isinstance(document, Tag):
        return SoupNode(document)
    return None
