"""
Notebook Publisher - Publish a notebook of Markdown notes as a static website

Reads posts and projects written with a bold-label header convention
and generates a small site with support for:
- Wiki-style image embeds resolved against the vault
- A numbered post series with sequential navigation
- A writing listing with excerpts
- A homepage of project cards
"""

from notebook_publisher.core.models import BuildResult, ConfigError, ImageCopy, NoteReadError, Post, Project
from notebook_publisher.core.config import SiteConfig, load_config
from notebook_publisher.core.discovery import CollectionReader
from notebook_publisher.core.images import ImageResolver
from notebook_publisher.core.parser import NoteParser
from notebook_publisher.core.builder import SiteBuilder
from notebook_publisher.transforms.images import WikiImageNormalizer

__version__ = "0.1.0"

__all__ = [
    "BuildResult",
    "ConfigError",
    "NoteReadError",
    "ImageCopy",
    "Post",
    "Project",
    "SiteConfig",
    "load_config",
    "CollectionReader",
    "ImageResolver",
    "NoteParser",
    "SiteBuilder",
    "WikiImageNormalizer",
]
