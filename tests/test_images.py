"""Tests for image resolution, embed normalization and copying."""

import pytest

from notebook_publisher.core.images import ImageResolver, copy_images
from notebook_publisher.core.models import ImageCopy
from notebook_publisher.transforms.images import WikiImageNormalizer, image_url


@pytest.fixture
def vault(tmp_path):
    blog = tmp_path / "Blog"
    (blog / "images").mkdir(parents=True)
    return tmp_path


def _touch(path, data=b"img"):
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_bytes(data)
    return path


class TestImageResolver:
    """Tests for ImageResolver."""

    def test_not_found(self, vault):
        resolver = ImageResolver(vault, vault / "Blog")
        assert resolver.resolve("missing.png") is None

    def test_finds_in_blog_images(self, vault):
        expected = _touch(vault / "Blog" / "images" / "a.png")
        resolver = ImageResolver(vault, vault / "Blog")
        assert resolver.resolve("a.png") == expected

    def test_vault_root_takes_precedence(self, vault):
        first = _touch(vault / "a.png")
        _touch(vault / "Blog" / "images" / "a.png")
        resolver = ImageResolver(vault, vault / "Blog")
        assert resolver.resolve("a.png") == first

    def test_attachments_before_images(self, vault):
        first = _touch(vault / "attachments" / "a.png")
        _touch(vault / "images" / "a.png")
        resolver = ImageResolver(vault, vault / "Blog")
        assert resolver.resolve("a.png") == first

    def test_search_order(self, vault):
        resolver = ImageResolver(vault, vault / "Blog")
        assert resolver.search_dirs == [
            vault,
            vault / "attachments",
            vault / "Attachments",
            vault / "images",
            vault / "Images",
            vault / "Blog",
            vault / "Blog" / "images",
        ]

    def test_directory_is_not_an_image(self, vault):
        (vault / "folder.png").mkdir()
        resolver = ImageResolver(vault, vault / "Blog")
        assert resolver.resolve("folder.png") is None


class TestWikiImageNormalizer:
    """Tests for WikiImageNormalizer."""

    @pytest.fixture
    def normalizer(self, vault):
        return WikiImageNormalizer(ImageResolver(vault, vault / "Blog"))

    def test_resolved_image(self, normalizer, vault):
        source = _touch(vault / "pic.png")

        text, images, missing = normalizer.normalize("![[pic.png]]")

        assert text == "![pic](/images/pic.png)"
        assert images == {ImageCopy(source, "pic.png")}
        assert missing == []

    def test_unresolved_image_with_caption(self, normalizer, capsys):
        text, images, missing = normalizer.normalize("See ![[My Pic.png|A caption]] here")

        assert text == "See ![A caption](/images/My%20Pic.png) here"
        assert images == set()
        assert missing == ["My Pic.png"]
        assert "Image not found: My Pic.png" in capsys.readouterr().out

    def test_alt_splits_on_first_pipe(self, normalizer):
        text, _, _ = normalizer.normalize("![[a.png|one|two]]")
        assert text == "![one|two](/images/a.png)"

    def test_empty_alt_uses_stem(self, normalizer):
        text, _, _ = normalizer.normalize("![[photo.final.jpg| ]]")
        assert text == "![photo.final](/images/photo.final.jpg)"

    def test_duplicate_references_deduplicated(self, normalizer, vault):
        _touch(vault / "pic.png")
        text, images, _ = normalizer.normalize("![[pic.png]]\n\n![[pic.png|again]]")

        assert text.count("/images/pic.png") == 2
        assert len(images) == 1

    def test_multiple_images(self, normalizer, vault):
        _touch(vault / "a.png")
        _touch(vault / "Blog" / "images" / "b.gif")

        _, images, missing = normalizer.normalize("![[a.png]] and ![[b.gif]] and ![[c.svg]]")

        assert {i.filename for i in images} == {"a.png", "b.gif"}
        assert missing == ["c.svg"]

    def test_plain_markdown_untouched(self, normalizer):
        content = "![x](/images/x.png) and [[Note]]"
        text, images, missing = normalizer.normalize(content)
        assert text == content
        assert images == set()
        assert missing == []

    def test_quiet_suppresses_warning(self, vault, capsys):
        normalizer = WikiImageNormalizer(ImageResolver(vault, vault / "Blog"), quiet=True)
        normalizer.normalize("![[gone.png]]")
        assert capsys.readouterr().out == ""

    def test_image_url_encoding(self):
        assert image_url("a b&c.png") == "/images/a%20b%26c.png"


class TestCopyImages:
    """Tests for copy_images."""

    def test_copies_into_created_dir(self, tmp_path):
        source = _touch(tmp_path / "src" / "pic.png", b"data")
        out = tmp_path / "out" / "images"

        copied = copy_images({ImageCopy(source, "pic.png")}, out, quiet=True)

        assert copied == [out / "pic.png"]
        assert (out / "pic.png").read_bytes() == b"data"

    def test_overwrites_existing(self, tmp_path):
        source = _touch(tmp_path / "src" / "pic.png", b"new")
        out = tmp_path / "images"
        _touch(out / "pic.png", b"old")

        copy_images([ImageCopy(source, "pic.png")], out, quiet=True)

        assert (out / "pic.png").read_bytes() == b"new"

    def test_missing_source_raises(self, tmp_path):
        with pytest.raises(OSError):
            copy_images([ImageCopy(tmp_path / "gone.png", "gone.png")], tmp_path / "images", quiet=True)
