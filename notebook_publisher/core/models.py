"""Data models for Notebook Publisher."""

import datetime
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional, Set

# Projects without a numeric filename prefix sort after every numbered one
UNORDERED = 999


class ConfigError(Exception):
    """Raised when the site configuration is missing or invalid."""


class NoteReadError(Exception):
    """Raised when a note file cannot be decoded as UTF-8."""


@dataclass(frozen=True)
class ImageCopy:
    """An image to materialize in the output images directory.

    Hashable so that repeated references to the same file collapse
    into a single entry when collected into a set.
    """
    source: Path
    filename: str


@dataclass
class Post:
    """A parsed post from the series or articles collection."""
    title: str
    slug: str
    date: Optional[datetime.date]
    description: Optional[str]
    tags: List[str]
    image: Optional[str]
    draft: bool
    body: str
    post_number: Optional[int]
    html: str
    images: Set[ImageCopy] = field(default_factory=set)
    missing_images: List[str] = field(default_factory=list)


@dataclass
class Project:
    """A parsed project card shown on the homepage."""
    title: str
    description: Optional[str]
    url: Optional[str]
    role: Optional[str]
    tech: List[str]
    image: Optional[str]
    order: int = UNORDERED
    images: Set[ImageCopy] = field(default_factory=set)
    missing_images: List[str] = field(default_factory=list)


@dataclass
class BuildResult:
    """Result of a site build."""
    series_posts: List[Post] = field(default_factory=list)
    articles: List[Post] = field(default_factory=list)
    projects: List[Project] = field(default_factory=list)
    written_paths: List[Path] = field(default_factory=list)
    copied_images: List[Path] = field(default_factory=list)
    missing_images: List[str] = field(default_factory=list)
