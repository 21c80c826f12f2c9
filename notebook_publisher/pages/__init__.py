"""HTML page generators."""

from notebook_publisher.pages.home import render_index_page
from notebook_publisher.pages.post import render_post_page
from notebook_publisher.pages.series import render_series_page
from notebook_publisher.pages.writing import render_writing_page

__all__ = [
    "render_index_page",
    "render_post_page",
    "render_series_page",
    "render_writing_page",
]
