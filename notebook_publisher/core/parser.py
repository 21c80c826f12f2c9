"""Parsing of post and project notes into records."""

import re
from typing import Any, Dict, List, Optional, Set

import titlecase as tc

from notebook_publisher.core.models import UNORDERED, ImageCopy, Post, Project
from notebook_publisher.transforms.headers import (
    POST_FIELDS,
    PROJECT_FIELDS,
    SEPARATOR,
    match_field,
)
from notebook_publisher.transforms.images import IMAGE_REF_PATTERN, WikiImageNormalizer
from notebook_publisher.transforms.text import render_markdown

MARKDOWN_SUFFIX = re.compile(r'\.md$')
NUMBER_PREFIX = re.compile(r'^(\d+)\.')
TITLE_NUMBER_PREFIX = re.compile(r'^\d+\.\s*')
NON_ALPHANUMERIC = re.compile(r'[^a-z0-9]+')

IMAGE_LABEL = '**Image**:'
FENCE = '```'


def slugify(filename: str) -> str:
    """Derive a URL-safe slug from a note filename.

    ``12. My Post.md`` becomes ``12-my-post``.
    """
    stem = MARKDOWN_SUFFIX.sub('', filename).lower()
    return NON_ALPHANUMERIC.sub('-', stem).strip('-')


def number_prefix(filename: str) -> Optional[int]:
    """Return the leading ``<digits>.`` number of a filename, if any."""
    match = NUMBER_PREFIX.match(filename)
    return int(match.group(1)) if match else None


def title_from_filename(filename: str) -> str:
    """Fallback title: the filename without extension or number prefix."""
    return TITLE_NUMBER_PREFIX.sub('', MARKDOWN_SUFFIX.sub('', filename)).strip()


class NoteParser:
    """Parses notes written with the bold-label header convention.

    Posts have a header ended by ``---`` followed by a Markdown body.
    Projects only have a header, optionally with a fenced multi-line
    description and a wiki-embedded image.
    """

    def __init__(self, normalizer: WikiImageNormalizer, titlecase_titles: bool = False):
        """Initialize NoteParser.

        Args:
            normalizer: Converts image embeds and resolves image files
            titlecase_titles: Title-case titles derived from filenames
        """
        self.normalizer = normalizer
        self.titlecase_titles = titlecase_titles

    def _fallback_title(self, filename: str) -> str:
        title = title_from_filename(filename)
        return tc.titlecase(title) if self.titlecase_titles else title

    def parse_post(self, content: str, filename: str) -> Post:
        """Parse a post note.

        A header without a closing ``---`` line consumes the whole file,
        leaving an empty body.

        Args:
            content: Raw note text
            filename: Bare filename, used for slug, number and fallback title

        Returns:
            Post with rendered HTML and the images its body references
        """
        lines = content.split('\n')
        fields: Dict[str, Any] = {}
        body_start: Optional[int] = None

        for i, raw_line in enumerate(lines):
            line = raw_line.strip()

            matched = match_field(line, POST_FIELDS)
            if matched:
                setter, value = matched
                setter(value, fields)
                continue

            if line == SEPARATOR:
                body_start = i + 1
                break

        body = ''
        if body_start is not None:
            body = '\n'.join(lines[body_start:]).strip()

        # Embeds must be converted before rendering
        body, images, missing = self.normalizer.normalize(body)

        return Post(
            title=fields.get('title') or self._fallback_title(filename),
            slug=slugify(filename),
            date=fields.get('date'),
            description=fields.get('description'),
            tags=fields.get('tags', []),
            image=fields.get('image'),
            draft=fields.get('draft', False),
            body=body,
            post_number=number_prefix(filename),
            html=render_markdown(body),
            images=images,
            missing_images=missing,
        )

    def parse_project(self, content: str, filename: str) -> Project:
        """Parse a project note.

        Args:
            content: Raw note text
            filename: Bare filename, used for order and fallback title

        Returns:
            Project with its image resolved to a bare filename
        """
        lines = content.split('\n')
        fields: Dict[str, Any] = {}
        description_lines: List[str] = []
        in_fence = False
        image: Optional[str] = None
        images: Set[ImageCopy] = set()
        missing: List[str] = []

        def resolve(image_name: str) -> Optional[str]:
            entry = self.normalizer.register(image_name)
            if entry is None:
                missing.append(image_name)
                return None
            images.add(entry)
            return image_name

        for raw_line in lines:
            line = raw_line.strip()

            if line.startswith(FENCE):
                in_fence = not in_fence
                continue
            if in_fence:
                if line:
                    description_lines.append(raw_line.rstrip())
                continue

            matched = match_field(line, PROJECT_FIELDS)
            if matched:
                setter, value = matched
                setter(value, fields)
                continue

            if line.startswith(IMAGE_LABEL):
                value = line[len(IMAGE_LABEL):].strip()
                if value:
                    ref = IMAGE_REF_PATTERN.search(value)
                    if ref:
                        image = resolve(ref.group(1).strip()) or image
                    else:
                        image = value
                continue

            ref = IMAGE_REF_PATTERN.search(line)
            if ref and image is None:
                image = resolve(ref.group(1).strip())
                continue

            if line == SEPARATOR:
                break

        description = fields.get('description')
        if description_lines:
            description = '\n'.join(description_lines)

        order = number_prefix(filename)

        return Project(
            title=fields.get('title') or self._fallback_title(filename),
            description=description,
            url=fields.get('url'),
            role=fields.get('role'),
            tech=fields.get('tech', []),
            image=image,
            order=UNORDERED if order is None else order,
            images=images,
            missing_images=missing,
        )
