"""Conversion of wiki-style image embeds into standard Markdown images."""

import re
from typing import List, Optional, Set, Tuple
from urllib.parse import quote

from notebook_publisher.core.images import ImageResolver
from notebook_publisher.core.models import ImageCopy

# ![[filename]] or ![[filename|alt text]]
IMAGE_EMBED_PATTERN = re.compile(r'!\[\[([^\]]+)\]\]')

# Filename only, for project headers: ![[filename]] or ![[filename|anything]]
IMAGE_REF_PATTERN = re.compile(r'!\[\[([^\]|]+)(?:\|[^\]]*)?\]\]')

EXTENSION_PATTERN = re.compile(r'\.[^.]+$')


def image_url(filename: str, prefix: str = '/images') -> str:
    """Output URL for an image, percent-encoding the filename."""
    return f"{prefix}/{quote(filename, safe='')}"


class WikiImageNormalizer:
    """Rewrites ``![[name|alt]]`` embeds so a Markdown renderer can handle them.

    Each embed becomes ``![alt](/images/name)``. Resolved images are
    returned alongside the text so the caller can copy them later;
    unresolved ones keep their link and are reported as missing.
    """

    def __init__(self, resolver: ImageResolver, image_path_prefix: str = '/images', quiet: bool = False):
        """Initialize WikiImageNormalizer.

        Args:
            resolver: Looks up image files by bare filename
            image_path_prefix: URL prefix of the output images directory
            quiet: Suppress warnings for unresolved images
        """
        self.resolver = resolver
        self.image_path_prefix = image_path_prefix.rstrip('/')
        self.quiet = quiet

    def normalize(self, text: str) -> Tuple[str, Set[ImageCopy], List[str]]:
        """Replace every image embed in text.

        Args:
            text: Markdown body containing wiki embeds

        Returns:
            Tuple of (converted text, images to copy, unresolved filenames)
        """
        images: Set[ImageCopy] = set()
        missing: List[str] = []

        def replace_image(match: re.Match) -> str:
            name, _, alt = match.group(1).partition('|')
            filename = name.strip()
            alt_text = alt.strip() or EXTENSION_PATTERN.sub('', filename)

            image = self.register(filename)
            if image is None:
                missing.append(filename)
            else:
                images.add(image)

            return f"![{alt_text}]({image_url(filename, self.image_path_prefix)})"

        result = IMAGE_EMBED_PATTERN.sub(replace_image, text)
        return result, images, missing

    def register(self, filename: str) -> Optional[ImageCopy]:
        """Resolve filename into a copy entry, warning when it cannot be found."""
        source = self.resolver.resolve(filename)
        if source is None:
            if not self.quiet:
                print(f"  Warning: Image not found: {filename}")
            return None
        return ImageCopy(source=source, filename=filename)
