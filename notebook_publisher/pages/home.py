"""Homepage: hero section and project cards."""

from html import escape
from typing import List, Optional

from notebook_publisher.core.config import SiteConfig
from notebook_publisher.core.models import Project
from notebook_publisher.pages.layout import render_page
from notebook_publisher.transforms.images import image_url

DETAIL_MARKER = '→'


def format_project_description(description: Optional[str]) -> str:
    """One paragraph per line; lines starting with an arrow are details."""
    if not description:
        return ''

    paragraphs = []
    for line in description.split('\n'):
        css_class = 'project-detail' if line.startswith(DETAIL_MARKER) else 'project-description'
        paragraphs.append(f'<p class="{css_class}">{escape(line)}</p>')
    return '\n                        '.join(paragraphs)


def render_project_card(project: Project) -> str:
    """A project card, linked to the project URL when there is one."""
    title = escape(project.title)
    url = escape(project.url) if project.url else None

    image_html = ''
    if project.image:
        img = f'<img src="{image_url(project.image)}" alt="{title}">'
        if url:
            image_html = f'<a href="{url}" target="_blank" rel="noopener" class="project-image">{img}</a>'
        else:
            image_html = f'<div class="project-image">{img}</div>'

    if url:
        title = f'<a href="{url}" target="_blank" rel="noopener">{title}</a>'

    return f"""
                <article class="project-card">
                    <h3 class="project-title">{title}</h3>
                    <div class="project-card-inner">
                        {image_html}
                        <div class="project-content">
                        {format_project_description(project.description)}
                        </div>
                    </div>
                </article>"""


def render_index_page(projects: List[Project], config: SiteConfig, year: Optional[int] = None) -> str:
    """Render the homepage."""
    projects_html = ''
    if projects:
        cards = '\n'.join(render_project_card(p) for p in projects)
        projects_html = f"""
        <section class="projects-section">
            <h2>Projects</h2>
            <div class="projects-grid">
{cards}
            </div>
        </section>"""

    main = f"""        <section class="hero">
            <div class="hero-photo">
                <img src="{image_url(config.profile_image)}" alt="{escape(config.author_name)}">
            </div>
            <h1>hello, i'm {escape(config.author_name.lower())}.</h1>
            <p class="hero-subtitle">{escape(config.hero_subtitle)}</p>
            <p class="hero-bio">{escape(config.hero_bio)}</p>
        </section>
{projects_html}"""

    return render_page(
        config,
        title=config.site_title,
        main=main,
        active='home',
        description=config.site_description,
        year=year,
    )
