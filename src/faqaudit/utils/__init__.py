"""Utility helpers for faqaudit."""

from faqaudit.utils.text import (
    truncate_text,
    heading_level,
    is_boundary_heading,
    join_texts,
    describe_value,
)

__all__ = [
    "truncate_text",
    "heading_level",
    "is_boundary_heading",
    "join_texts",
    "describe_value",
]
