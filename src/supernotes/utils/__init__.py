"""Utility modules."""

from supernotes.utils.text import read_content, render_markdown

__all__ = [
    "read_content",
    "render_markdown",
]
