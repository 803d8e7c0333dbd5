"""Text utilities for CMS content processing."""

import math
import re

from bs4 import BeautifulSoup


WORDS_PER_MINUTE = 200

_BLANK_LINES_RE = re.compile(r"\n(?:[ \t]*\n)+")


def strip_html(text: str) -> str:
    """Reduce rendered HTML to its text, with entities decoded."""
    if not text:
        return ""
    return BeautifulSoup(text, "html.parser").get_text()


def clean_html_content(html: str) -> str:
    """
    Normalize line endings and blank lines in rendered HTML.

    The markup itself is preserved verbatim; only ``\\r\\n``/``\\r`` become ``\\n``
    and any run of blank lines collapses to a single one.

    Args:
        html: Rendered HTML from the CMS

    Returns:
        Cleaned HTML, trimmed
    """
    text = (html or "").replace("\r\n", "\n").replace("\r", "\n")
    text = _BLANK_LINES_RE.sub("\n\n", text)
    return text.strip()


def count_words(text: str) -> int:
    """Count whitespace-separated words in HTML or plain text."""
    return len(strip_html(text).split())


def estimate_read_time(html: str, words_per_minute: int = WORDS_PER_MINUTE) -> int:
    """Estimated reading time in whole minutes, never below one."""
    return max(1, math.ceil(count_words(html) / words_per_minute))


def format_read_time(minutes: int) -> str:
    return f"{minutes} min read"


def truncate_text(text: str, max_length: int, suffix: str = "...") -> str:
    """
    Truncate text to max length, preserving words.

    Args:
        text: Text to truncate
        max_length: Maximum length including suffix
        suffix: Suffix to add when truncated

    Returns:
        Truncated text
    """
    if len(text) <= max_length:
        return text

    truncate_at = max_length - len(suffix)

    # Find last space before truncate point
    last_space = text.rfind(' ', 0, truncate_at)
    if last_space > 0:
        return text[:last_space] + suffix

    return text[:truncate_at] + suffix
