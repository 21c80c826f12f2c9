"""Shared page shell: document head, navigation and footer."""

import datetime
from html import escape
from typing import Optional

from notebook_publisher.core.config import SiteConfig

NAV_PAGES = ('home', 'writing', 'series')


def render_nav(config: SiteConfig, active: str = '') -> str:
    """Site navigation with the active page marked."""
    links = [
        ('home', '/', 'home'),
        ('writing', '/writing.html', 'writing'),
        ('series', f'/series/{config.series_slug}.html', config.series_slug),
    ]
    items = []
    for name, href, label in links:
        marker = ' class="active"' if name == active else ''
        items.append(f'                <li><a href="{href}"{marker}>{escape(label)}</a></li>')
    joined = '\n'.join(items)
    return f"""
    <header class="site-header">
        <nav class="nav-container">
            <ul class="nav-links">
{joined}
            </ul>
        </nav>
    </header>"""


def render_page(
    config: SiteConfig,
    title: str,
    main: str,
    active: str = '',
    depth: int = 0,
    narrow: bool = False,
    description: Optional[str] = None,
    extra_head: str = '',
    year: Optional[int] = None,
) -> str:
    """Wrap page content in the complete HTML document.

    Args:
        config: Site configuration
        title: Contents of the <title> element, unescaped
        main: Inner HTML of <main>
        active: Name of the active navigation page, if any
        depth: Directory depth of the page below the output root
        narrow: Use the narrow content column
        description: Optional meta description
        extra_head: Additional tags for <head>
        year: Footer copyright year (default: current year)

    Returns:
        The HTML document
    """
    if active and active not in NAV_PAGES:
        raise ValueError(f"Unknown navigation page: {active}")
    if year is None:
        year = datetime.date.today().year

    assets = '../' * depth
    container = 'container container-narrow' if narrow else 'container'
    head = [
        '    <meta charset="UTF-8">',
        '    <meta name="viewport" content="width=device-width, initial-scale=1.0">',
        f'    <title>{escape(title)}</title>',
    ]
    if description:
        head.append(f'    <meta name="description" content="{escape(description)}">')
    if extra_head:
        head.append(extra_head)
    head.append(f'    <link rel="stylesheet" href="{assets}css/style.css">')
    head_html = '\n'.join(head)

    return f"""<!DOCTYPE html>
<html lang="en">
<head>
{head_html}
</head>
<body>
    {render_nav(config, active)}

    <main class="{container}">
{main}
    </main>

    <footer class="site-footer">
        <div class="container">
            <p>&copy; {year} {escape(config.site_title)}. All rights reserved.</p>
        </div>
    </footer>

    <script src="{assets}js/main.js"></script>
</body>
</html>"""
