"""End-to-end tests for SiteBuilder."""

import pytest

from notebook_publisher.core.builder import SiteBuilder
from notebook_publisher.core.config import SiteConfig


@pytest.fixture
def vault(tmp_path):
    """A vault with all three collections and some attachments."""
    vault = tmp_path / "Vault"
    blog = vault / "Blog"

    series = blog / "Fractal"
    series.mkdir(parents=True)
    (series / "0. Day Zero.md").write_text(
        "**Date**: 1-1-2024\n---\nStarting out.\n\n![[pic.png]]\n"
    )
    (series / "1. Day One.md").write_text(
        "**Date**: 1-2-2024\n**Title**: First Day\n---\nLearning.\n"
    )
    (series / "2. Hidden.md").write_text("**Draft**: true\n---\nSecret.\n")
    (series / "STYLE_GUIDE.md").write_text("---\nRules.\n")

    main = blog / "Main"
    main.mkdir()
    (main / "Essay.md").write_text(
        "**Date**: 5-1-2024\n**Description**: An essay\n---\n![[My Pic.png|A caption]]\n"
    )
    (main / "Unpublished.md").write_text("**Draft**: true\n---\nNope.\n")

    projects = blog / "Projects"
    projects.mkdir()
    (projects / "1. Widget.md").write_text(
        "**Title**: Widget\n**URL**: https://example.com\n**Image**: ![[pic.png]]\n"
        "```\nBuilds widgets.\n→ Fast\n```\n---\n"
    )
    (projects / "Later.md").write_text("**Title**: Later\n")

    (vault / "attachments").mkdir()
    (vault / "attachments" / "pic.png").write_bytes(b"png-bytes")
    return vault


@pytest.fixture
def config(vault, tmp_path):
    return SiteConfig(blog_root=vault / "Blog", output_dir=tmp_path / "site", site_title="Test Site")


class TestSiteBuilder:
    """Tests for SiteBuilder.build."""

    def test_writes_pages(self, config):
        result = SiteBuilder(config, quiet=True, year=2024).build()

        site = config.output_dir
        assert (site / "posts" / "0-day-zero.html").exists()
        assert (site / "posts" / "1-day-one.html").exists()
        assert (site / "posts" / "essay.html").exists()
        assert (site / "index.html").exists()
        assert (site / "writing.html").exists()
        assert (site / "series" / "fractal.html").exists()
        assert len(result.written_paths) == 6

    def test_drafts_not_published(self, config):
        result = SiteBuilder(config, quiet=True).build()

        site = config.output_dir
        assert not (site / "posts" / "2-hidden.html").exists()
        assert not (site / "posts" / "unpublished.html").exists()
        assert not (site / "posts" / "style-guide.html").exists()
        for page in ("writing.html", "series/fractal.html", "posts/1-day-one.html"):
            text = (site / page).read_text()
            assert "Hidden" not in text
            assert "Unpublished" not in text
        assert [p.slug for p in result.series_posts] == ["0-day-zero", "1-day-one"]

    def test_images_copied_once(self, config, vault):
        result = SiteBuilder(config, quiet=True).build()

        images = config.output_dir / "images"
        assert (images / "pic.png").read_bytes() == b"png-bytes"
        assert result.copied_images == [images / "pic.png"]
        assert result.missing_images == ["My Pic.png"]

    def test_missing_image_kept_in_output(self, config):
        SiteBuilder(config, quiet=True).build()

        essay = (config.output_dir / "posts" / "essay.html").read_text()
        assert 'src="/images/My%20Pic.png"' in essay
        assert 'alt="A caption"' in essay

    def test_series_navigation(self, config):
        SiteBuilder(config, quiet=True).build()

        first = (config.output_dir / "posts" / "0-day-zero.html").read_text()
        assert "Part 0 of 2" in first
        assert '<a href="/posts/1-day-one.html" class="next-post">First Day →</a>' in first

    def test_project_order_and_image(self, config):
        result = SiteBuilder(config, quiet=True).build()

        assert [p.title for p in result.projects] == ["Widget", "Later"]
        index = (config.output_dir / "index.html").read_text()
        assert index.index("Widget") < index.index("Later")
        assert '<img src="/images/pic.png" alt="Widget">' in index
        assert '<p class="project-detail">→ Fast</p>' in index

    def test_no_series_page_when_empty(self, tmp_path):
        blog = tmp_path / "Blog"
        (blog / "Main").mkdir(parents=True)
        (blog / "Main" / "Only.md").write_text("---\nHello.\n")
        config = SiteConfig(blog_root=blog, output_dir=tmp_path / "site")

        result = SiteBuilder(config, quiet=True).build()

        assert not (tmp_path / "site" / "series" / "fractal.html").exists()
        assert not (tmp_path / "site" / "images").exists()
        assert result.copied_images == []

    def test_idempotent(self, config):
        SiteBuilder(config, quiet=True, year=2024).build()
        first = {p: p.read_bytes() for p in config.output_dir.rglob("*") if p.is_file()}

        SiteBuilder(config, quiet=True, year=2024).build()
        second = {p: p.read_bytes() for p in config.output_dir.rglob("*") if p.is_file()}

        assert first == second

    def test_progress_and_summary(self, config, capsys):
        SiteBuilder(config).build()
        out = capsys.readouterr().out

        assert "Found 2 Fractal posts" in out
        assert "Found 1 article" in out
        assert "Warning: Image not found: My Pic.png" in out
        assert "Generated: posts/essay.html (article)" in out
        assert "Copied: images/pic.png" in out
        assert "Build complete!" in out
        assert "1 image copied" in out

    def test_quiet(self, config, capsys):
        SiteBuilder(config, quiet=True).build()
        assert capsys.readouterr().out == ""
