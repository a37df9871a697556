"""Text and tag helpers shared by the block validators."""

import re
from typing import Optional

from faqaudit.constants import ABSENT_VALUE, ELLIPSIS

_HEADING_RE = re.compile(r"^h([1-6])$")


def truncate_text(text: str, max_length: int = 200) -> str:
    """Cap text at max_length characters, marking the cut with an ellipsis.

    Args:
        text: Text to cap
        max_length: Maximum characters kept before the ellipsis

    Returns:
        The text unchanged when short enough, otherwise its first
        max_length characters followed by "..."
    """
    if len(text) <= max_length:
        return text
    return text[:max_length] + ELLIPSIS


def heading_level(tag_name: Optional[str]) -> Optional[int]:
    """Return 1-6 for h1-h6 tag names, None for anything else."""
    if not tag_name:
        return None
    match = _HEADING_RE.match(tag_name.lower())
    return int(match.group(1)) if match else None


def is_boundary_heading(tag_name: Optional[str], start_level: int) -> bool:
    """Check whether a tag ends an answer started under a heading of start_level.

    Headings of equal or higher rank (h2 or h1 for a walk started at h2)
    close the answer; lower-ranked headings (h3 under h2) belong to it.
    """
    level = heading_level(tag_name)
    return level is not None and level <= start_level


def join_texts(texts) -> str:
    """Join trimmed text fragments with single spaces, dropping empty ones."""
    return " ".join(t for t in (fragment.strip() for fragment in texts) if t)


def describe_value(value: Optional[str]) -> str:
    """Render an attribute value for an issue message."""
    if value is None:
        return ABSENT_VALUE
    return f'"{value}"'
