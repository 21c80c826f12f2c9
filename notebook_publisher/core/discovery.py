"""Collection discovery for finding publishable notes."""

import datetime
from pathlib import Path
from typing import List

from notebook_publisher.core.models import NoteReadError, Post, Project
from notebook_publisher.core.parser import NUMBER_PREFIX, NoteParser

STYLE_GUIDE_PREFIX = 'STYLE_GUIDE'


def read_note(path: Path) -> str:
    """Read a note as UTF-8, naming the file when it cannot be decoded."""
    try:
        return path.read_text(encoding='utf-8')
    except UnicodeDecodeError as e:
        raise NoteReadError(f"{path} is not valid UTF-8: {e.reason} at byte {e.start}") from e


class CollectionReader:
    """Reads the notes of one source folder into records."""

    def __init__(self, parser: NoteParser):
        """Initialize CollectionReader.

        Args:
            parser: Parser used for every note file
        """
        self.parser = parser

    def list_notes(self, folder: Path, require_number: bool = False) -> List[Path]:
        """List the Markdown notes directly inside folder.

        Style guide notes are always skipped. Order is whatever the
        filesystem returns; callers sort the parsed records.

        Args:
            folder: Source folder (missing folders yield no notes)
            require_number: Only keep files named ``<digits>.<rest>.md``

        Returns:
            List of note paths
        """
        folder = Path(folder)
        if not folder.is_dir():
            return []

        notes = []
        for path in folder.iterdir():
            name = path.name
            if not name.endswith('.md') or not path.is_file():
                continue
            if name.upper().startswith(STYLE_GUIDE_PREFIX):
                continue
            if require_number and not NUMBER_PREFIX.match(name):
                continue
            notes.append(path)
        return notes

    def read_posts(self, folder: Path, require_number: bool = False) -> List[Post]:
        """Parse every post in folder, leaving out drafts."""
        posts = []
        for path in self.list_notes(folder, require_number):
            post = self.parser.parse_post(read_note(path), path.name)
            if not post.draft:
                posts.append(post)
        return posts

    def read_projects(self, folder: Path) -> List[Project]:
        """Parse every project in folder."""
        return [
            self.parser.parse_project(read_note(path), path.name)
            for path in self.list_notes(folder)
        ]


def sort_series(posts: List[Post]) -> List[Post]:
    """Series posts in ascending number order."""
    return sorted(posts, key=lambda p: p.post_number if p.post_number is not None else 0)


def sort_articles(posts: List[Post]) -> List[Post]:
    """Articles newest first; undated articles count as the oldest."""
    return sorted(posts, key=lambda p: p.date or datetime.date.min, reverse=True)


def sort_projects(projects: List[Project]) -> List[Project]:
    """Projects in ascending order; unnumbered ones keep their relative order at the end."""
    return sorted(projects, key=lambda p: p.order)
