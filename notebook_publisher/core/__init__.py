"""Core components for Notebook Publisher."""

from notebook_publisher.core.models import BuildResult, ConfigError, ImageCopy, NoteReadError, Post, Project
from notebook_publisher.core.config import SiteConfig, load_config
from notebook_publisher.core.discovery import CollectionReader, sort_articles, sort_projects, sort_series
from notebook_publisher.core.images import ImageResolver, copy_images
from notebook_publisher.core.parser import NoteParser, number_prefix, slugify, title_from_filename
from notebook_publisher.core.builder import SiteBuilder

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
    "sort_articles",
    "sort_projects",
    "sort_series",
    "ImageResolver",
    "copy_images",
    "NoteParser",
    "number_prefix",
    "slugify",
    "title_from_filename",
    "SiteBuilder",
]
