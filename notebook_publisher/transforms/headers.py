"""Header field tables for the bold-label header convention.

A note header is a run of lines such as ``**Date**: 1-15-2024`` ended by a
``---`` line. Each table maps an exact label prefix to a setter that parses
the remaining text and stores it in a dict of fields. Parsers look a line
up with :func:`match_field` instead of chaining conditionals.
"""

import datetime
from typing import Any, Callable, Dict, List, Optional, Tuple

HeaderSetter = Callable[[str, Dict[str, Any]], None]

SEPARATOR = '---'


def parse_date(value: str) -> Optional[datetime.date]:
    """Parse a ``M-D-YYYY`` date, falling back to ISO ``YYYY-MM-DD``.

    Three numeric parts are month-day-year unless the first has four
    digits. Two-digit years are read as 19xx. Returns None for anything
    that does not name a real calendar day.
    """
    parts = [p.strip() for p in value.split('-')]
    try:
        if len(parts) == 3 and all(p.isdigit() for p in parts) and len(parts[0]) != 4:
            month, day, year = (int(p) for p in parts)
            if year < 100:
                year += 1900
            return datetime.date(year, month, day)
        return datetime.date.fromisoformat(value.strip())
    except ValueError:
        return None


def parse_bool(value: str) -> bool:
    return value.lower() == 'true'


def split_list(lowercase: bool = False) -> Callable[[str], List[str]]:
    """Create a parser for comma separated values.

    Args:
        lowercase: Whether to lowercase each item

    Returns:
        A function str -> list of trimmed, non-empty items
    """
    def parse(value: str) -> List[str]:
        items = [item.strip() for item in value.split(',')]
        if lowercase:
            items = [item.lower() for item in items]
        return [item for item in items if item]
    return parse


def assign(key: str, parse: Optional[Callable[[str], Any]] = None) -> HeaderSetter:
    """Create a setter that stores the (optionally parsed) value under key."""
    def setter(value: str, fields: Dict[str, Any]) -> None:
        fields[key] = parse(value) if parse else value
    return setter


POST_FIELDS: Dict[str, HeaderSetter] = {
    '**Date**:': assign('date', parse_date),
    '**Title**:': assign('title'),
    '**Description**:': assign('description'),
    '**Tags**:': assign('tags', split_list(lowercase=True)),
    '**Image**:': assign('image'),
    '**Draft**:': assign('draft', parse_bool),
}

# **Image**: is handled by the project parser since it may need resolving
PROJECT_FIELDS: Dict[str, HeaderSetter] = {
    '**Title**:': assign('title'),
    '**Description**:': assign('description'),
    '**URL**:': assign('url'),
    '**Role**:': assign('role'),
    '**Tech**:': assign('tech', split_list()),
}


def match_field(line: str, table: Dict[str, HeaderSetter]) -> Optional[Tuple[HeaderSetter, str]]:
    """Find the table entry whose label starts a trimmed header line.

    Args:
        line: Header line, already stripped
        table: Label -> setter table

    Returns:
        Tuple of (setter, trimmed value) or None if no label matches
    """
    for label, setter in table.items():
        if line.startswith(label):
            return setter, line[len(label):].strip()
    return None
