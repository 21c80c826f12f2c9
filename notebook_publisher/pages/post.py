"""Post page with optional series navigation."""

from html import escape
from typing import List, Optional

from notebook_publisher.core.config import SiteConfig
from notebook_publisher.core.models import Post
from notebook_publisher.pages.layout import render_page
from notebook_publisher.transforms.text import format_date


def render_series_nav(post: Post, series: List[Post], config: SiteConfig) -> str:
    """Navigation between neighbouring posts of the series.

    The position shown is 0-indexed; links are omitted at either end.
    """
    slugs = [p.slug for p in series]
    index = slugs.index(post.slug)
    prev_post = series[index - 1] if index > 0 else None
    next_post = series[index + 1] if index < len(series) - 1 else None

    prev_link = '<span></span>'
    if prev_post:
        prev_link = f'<a href="/posts/{prev_post.slug}.html" class="prev-post">← {escape(prev_post.title)}</a>'
    next_link = '<span></span>'
    if next_post:
        next_link = f'<a href="/posts/{next_post.slug}.html" class="next-post">{escape(next_post.title)} →</a>'

    return f"""
            <nav class="series-nav">
                <div class="series-info">
                    <a href="/series/{config.series_slug}.html">{escape(config.series_name)}</a>
                    <span class="series-progress">Part {index} of {len(series)}</span>
                </div>
                <div class="series-links">
                    {prev_link}
                    {next_link}
                </div>
            </nav>"""


def render_post_page(
    post: Post,
    config: SiteConfig,
    series: Optional[List[Post]] = None,
    year: Optional[int] = None,
) -> str:
    """Render a post page.

    Args:
        post: The post to render
        config: Site configuration
        series: Sibling posts in order, when the post belongs to the series
        year: Footer year override

    Returns:
        Complete HTML document
    """
    series_nav = render_series_nav(post, series, config) if series else ''
    canonical = f'    <link rel="canonical" href="{escape(config.site_url.rstrip("/"))}/posts/{post.slug}.html">'

    main = f"""        <article>
            <header class="post-header">
                <time class="post-date">{format_date(post.date)}</time>
                <h1>{escape(post.title)}</h1>
            </header>
{series_nav}

            <div class="post-content">
                {post.html}
            </div>
{series_nav}
        </article>"""

    return render_page(
        config,
        title=f"{post.title} - {config.site_title}",
        main=main,
        depth=1,
        description=post.description,
        extra_head=canonical,
        year=year,
    )
