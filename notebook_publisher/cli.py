"""Command line interface for Notebook Publisher."""

import argparse
import sys
from pathlib import Path
from typing import List, Optional

from notebook_publisher.core.builder import SiteBuilder
from notebook_publisher.core.config import load_config
from notebook_publisher.core.models import ConfigError, NoteReadError


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='notebook-publisher',
        description='Build a static website from a notebook of Markdown notes.',
    )
    subparsers = parser.add_subparsers(dest='command', required=True)

    build = subparsers.add_parser('build', help='Generate every page and copy referenced images')
    build.add_argument('--config', type=Path, help='YAML file with site settings')
    build.add_argument('--blog-root', type=Path, help='Folder holding the source collections (BLOG_ROOT)')
    build.add_argument('--vault-root', type=Path, help='Root searched for images (VAULT_ROOT)')
    build.add_argument('--output', type=Path, dest='output_dir', help='Output directory (OUTPUT_DIR)')
    build.add_argument('--quiet', action='store_true', help='Only report errors')
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    try:
        config = load_config(
            args.config,
            blog_root=args.blog_root,
            vault_root=args.vault_root,
            output_dir=args.output_dir,
        )
        SiteBuilder(config, quiet=args.quiet).build()
    except (ConfigError, NoteReadError, OSError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    return 0


if __name__ == '__main__':
    sys.exit(main())
