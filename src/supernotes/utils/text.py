"""Markdown content helpers."""

import logging
import sys
from pathlib import Path

from markdown_it import MarkdownIt

from supernotes.errors import ContentReadError

logger = logging.getLogger(__name__)

# CommonMark rendering with the parser's defaults (no HTML sanitizing, no extensions)
_markdown = MarkdownIt("commonmark")


def render_markdown(markup: str) -> str:
    """
    Render Markdown to an HTML fragment.

    Args:
        markup: Markdown source.

    Returns:
        HTML string, terminated by a newline for non-empty input.

    Examples:
        >>> render_markdown("* item")
        '<ul>\\n<li>item</li>\\n</ul>\\n'
    """
    return _markdown.render(markup)


def read_content(path: Path | None = None) -> str:
    """
    Read the full Markdown content of a card.

    Args:
        path: File to read. If None, standard input is read until EOF.

    Returns:
        The complete text.

    Raises:
        ContentReadError: If the file or stdin cannot be read.
    """
    if path is not None:
        logger.info(f"Reading content from {path}")
        try:
            return Path(path).read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            raise ContentReadError(f"could not read {path}") from e

    logger.info("Reading content from stdin")
    try:
        return sys.stdin.read()
    except (OSError, UnicodeDecodeError) as e:
        raise ContentReadError("could not read stdin") from e
