"""Series index page."""

from html import escape
from typing import List, Optional

from notebook_publisher.core.config import SiteConfig
from notebook_publisher.core.models import Post
from notebook_publisher.pages.layout import render_page
from notebook_publisher.transforms.text import count_label, format_date


def render_series_page(posts: List[Post], config: SiteConfig, year: Optional[int] = None) -> str:
    """Render the ordered list of series posts, numbered from 0."""
    items = '\n'.join(
        f"""
                <li class="series-item">
                    <span class="series-item-number">{index}</span>
                    <a href="/posts/{post.slug}.html">{escape(post.title)}</a>
                    <time>{format_date(post.date)}</time>
                </li>"""
        for index, post in enumerate(posts)
    )

    main = f"""        <section class="series-header">
            <h1>{escape(config.series_name)}</h1>
            <p class="series-description">{escape(config.series_description)}</p>
            <p class="series-meta">{count_label(len(posts), 'post')}</p>
        </section>

        <section class="series-list">
            <ol>
{items}
            </ol>
        </section>"""

    return render_page(
        config,
        title=f"{config.series_name} - {config.site_title}",
        main=main,
        active='series',
        depth=1,
        year=year,
    )
