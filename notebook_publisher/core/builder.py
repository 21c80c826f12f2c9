"""Site builder orchestrating discovery, page generation and image copying."""

from pathlib import Path
from typing import Optional, Set

from notebook_publisher.core.config import SiteConfig
from notebook_publisher.core.discovery import (
    CollectionReader,
    sort_articles,
    sort_projects,
    sort_series,
)
from notebook_publisher.core.images import ImageResolver, copy_images
from notebook_publisher.core.models import BuildResult, ImageCopy
from notebook_publisher.core.parser import NoteParser
from notebook_publisher.pages import (
    render_index_page,
    render_post_page,
    render_series_page,
    render_writing_page,
)
from notebook_publisher.transforms.images import WikiImageNormalizer
from notebook_publisher.transforms.text import count_label


class SiteBuilder:
    """Builds the whole site from the configured source folders.

    Every run rewrites every output file; nothing is incremental.
    """

    def __init__(self, config: SiteConfig, quiet: bool = False, year: Optional[int] = None):
        """Initialize SiteBuilder.

        Args:
            config: Site configuration
            quiet: Suppress progress output and warnings
            year: Footer year override for generated pages
        """
        self.config = config
        self.quiet = quiet
        self.year = year
        resolver = ImageResolver(config.vault_root, config.blog_root)
        normalizer = WikiImageNormalizer(resolver, quiet=quiet)
        self.reader = CollectionReader(NoteParser(normalizer, titlecase_titles=config.titlecase_titles))

    def _log(self, message: str = '') -> None:
        if not self.quiet:
            print(message)

    def _write(self, path: Path, html: str, result: BuildResult, label: str) -> None:
        path.write_text(html, encoding='utf-8')
        result.written_paths.append(path)
        relative = path.relative_to(self.config.output_dir).as_posix()
        self._log(f"  Generated: {relative}{label}")

    def build(self) -> BuildResult:
        """Run the build.

        Returns:
            BuildResult describing what was read and written

        Raises:
            OSError: If any source cannot be read or output cannot be written
        """
        config = self.config
        result = BuildResult()

        self._log("Building blog...\n")
        self._log(f"Blog root: {config.blog_root}")
        self._log(f"Vault root: {config.vault_root}\n")

        config.posts_output.mkdir(parents=True, exist_ok=True)
        config.series_output.mkdir(parents=True, exist_ok=True)

        result.series_posts = sort_series(self.reader.read_posts(config.series_source, require_number=True))
        result.articles = sort_articles(self.reader.read_posts(config.articles_source))
        result.projects = sort_projects(self.reader.read_projects(config.projects_source))

        self._log(f"Found {count_label(len(result.series_posts), config.series_name + ' post')}")
        self._log(f"Found {count_label(len(result.articles), 'article')}")
        self._log(f"Found {count_label(len(result.projects), 'project')}\n")

        images: Set[ImageCopy] = set()
        for record in [*result.series_posts, *result.articles, *result.projects]:
            images.update(record.images)
            result.missing_images.extend(record.missing_images)

        for post in result.series_posts:
            html = render_post_page(post, config, series=result.series_posts, year=self.year)
            self._write(config.posts_output / f"{post.slug}.html", html, result, f" ({config.series_name})")

        for post in result.articles:
            html = render_post_page(post, config, year=self.year)
            self._write(config.posts_output / f"{post.slug}.html", html, result, " (article)")

        self._write(config.index_path, render_index_page(result.projects, config, year=self.year), result, '')
        self._write(
            config.writing_path,
            render_writing_page(result.articles, result.series_posts, config, year=self.year),
            result,
            '',
        )

        if result.series_posts:
            self._write(
                config.series_output / f"{config.series_slug}.html",
                render_series_page(result.series_posts, config, year=self.year),
                result,
                '',
            )

        if images:
            self._log()
            result.copied_images = copy_images(images, config.images_output, quiet=self.quiet)

        self._log("\nBuild complete!")
        self._log(f"   {count_label(len(result.series_posts), config.series_name + ' post')}")
        self._log(f"   {count_label(len(result.articles), 'article')}")
        self._log(f"   {count_label(len(result.projects), 'project')}")
        self._log(f"   {count_label(len(result.copied_images), 'image')} copied")

        return result
