"""Text helpers shared by the parsers and page generators."""

import datetime
import re
from typing import Optional

import inflection
import markdown

EXCERPT_LENGTH = 150

MARKUP_CHARS = re.compile(r'[#*_`\[\]!]')
PARENTHETICAL = re.compile(r'\(.*?\)')


def render_markdown(body: str) -> str:
    """Render a Markdown body to an HTML fragment."""
    return markdown.markdown(body, extensions=['fenced_code', 'tables'])


def format_date(date: Optional[datetime.date]) -> str:
    """Format a date as ``January 5, 2024``."""
    if date is None:
        return 'Unknown date'
    return f"{date:%B} {date.day}, {date.year}"


def excerpt(description: Optional[str], body: str, max_length: int = EXCERPT_LENGTH) -> str:
    """Short summary of a post for listings.

    An explicit description is used verbatim. Otherwise the first paragraph
    of the body is used with Markdown characters and link targets removed,
    cut to max_length with a trailing ellipsis.
    """
    if description:
        return description

    text = PARENTHETICAL.sub('', MARKUP_CHARS.sub('', body)).strip()
    first_paragraph = text.split('\n\n')[0]
    if len(first_paragraph) <= max_length:
        return first_paragraph
    return first_paragraph[:max_length].strip() + '...'


def count_label(count: int, noun: str) -> str:
    """``1 post``, ``3 posts``."""
    return f"{count} {noun if count == 1 else inflection.pluralize(noun)}"
