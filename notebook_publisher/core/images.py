"""Image lookup in the vault and copying into the output tree."""

import shutil
from pathlib import Path
from typing import Iterable, List, Optional

from notebook_publisher.core.models import ImageCopy


class ImageResolver:
    """Finds referenced images by bare filename.

    Candidate directories are searched in a fixed order and the first
    existing file wins, so an image in the vault root shadows one with the
    same name in the blog's images folder.
    """

    def __init__(self, vault_root: Path, blog_root: Path):
        """Initialize ImageResolver.

        Args:
            vault_root: Root of the notebook vault
            blog_root: Root of the blog source folders
        """
        self.vault_root = Path(vault_root)
        self.blog_root = Path(blog_root)
        self.search_dirs: List[Path] = [
            self.vault_root,
            self.vault_root / 'attachments',
            self.vault_root / 'Attachments',
            self.vault_root / 'images',
            self.vault_root / 'Images',
            self.blog_root,
            self.blog_root / 'images',
        ]

    def resolve(self, filename: str) -> Optional[Path]:
        """Return the first candidate path holding filename, or None."""
        for directory in self.search_dirs:
            candidate = directory / filename
            if candidate.is_file():
                return candidate
        return None


def copy_images(images: Iterable[ImageCopy], images_dir: Path, quiet: bool = False) -> List[Path]:
    """Copy every registered image into the output images directory.

    Copy failures are not caught.

    Args:
        images: Image copy entries to materialize
        images_dir: Output images directory (created if missing)
        quiet: Suppress progress output

    Returns:
        Destination paths written, sorted
    """
    copied = []
    for image in sorted(images, key=lambda i: (i.filename, str(i.source))):
        dest = images_dir / image.filename
        dest.parent.mkdir(parents=True, exist_ok=True)
        shutil.copyfile(image.source, dest)
        copied.append(dest)
        if not quiet:
            print(f"  Copied: images/{image.filename}")
    return copied
