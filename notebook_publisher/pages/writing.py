"""Writing page: the series card followed by every article."""

from html import escape
from typing import List, Optional

from notebook_publisher.core.config import SiteConfig
from notebook_publisher.core.models import Post
from notebook_publisher.pages.layout import render_page
from notebook_publisher.transforms.text import count_label, excerpt


def render_series_card(series: List[Post], config: SiteConfig) -> str:
    if not series:
        return ''
    return f"""
            <a href="/series/{config.series_slug}.html" class="series-card">
                <div class="series-card-content">
                    <h2>{escape(config.series_title)}</h2>
                    <p>{escape(config.series_description)}</p>
                    <span class="series-count">{count_label(len(series), 'post')}</span>
                </div>
                <span class="series-arrow">→</span>
            </a>"""


def render_article_card(post: Post) -> str:
    return f"""
            <article class="post-card">
                <h2 class="post-title"><a href="/posts/{post.slug}.html">{escape(post.title)}</a></h2>
                <p class="post-excerpt">{escape(excerpt(post.description, post.body))}</p>
            </article>"""


def render_writing_page(
    articles: List[Post],
    series: List[Post],
    config: SiteConfig,
    year: Optional[int] = None,
) -> str:
    """Render the listing of all writing."""
    cards = '\n'.join(render_article_card(p) for p in articles)

    main = f"""        <section class="page-header">
            <h1>all writing</h1>
        </section>

        <section class="series-section">
{render_series_card(series, config)}
        </section>

        <section class="posts">
{cards}
        </section>"""

    return render_page(
        config,
        title=f"Writing - {config.site_title}",
        main=main,
        active='writing',
        narrow=True,
        year=year,
    )
