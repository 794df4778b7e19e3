"""Page templates — the HTML layout and the markdown source of the index page.

Both are compiled once at startup. A custom layout file may replace the
built-in layout; it receives ``site_name``, ``title`` and ``contents``.
"""

import logging
from pathlib import Path

from jinja2 import Environment, Template, TemplateError, select_autoescape
from markupsafe import Markup

from slycms.domain.entities import Article
from slycms.domain.exceptions import RenderError

logger = logging.getLogger(__name__)

LAYOUT_TEMPLATE_TEXT = """<!DOCTYPE html>
<html>
<head>
<meta charset="utf-8">
<title>{{ site_name }} - {{ title }}</title>
<link rel="stylesheet" href="/static/css/styles.css">
</head>
<body>
<article class="markdown-body">
{{ contents }}
</article>
</body>
</html>"""

INDEX_MARKDOWN_TEMPLATE_TEXT = """{% for article in articles %}
* [{{ article.title }}]({{ article.url }}) - {{ article.created_at }}
{% endfor %}"""


class TemplateLoadError(Exception):
    """Raised when a layout template cannot be read or compiled."""


class PageTemplates:
    """Compiled layout and index templates, shared read-only by all requests."""

    def __init__(self, layout: Template, index_markdown: Template):
        self._layout = layout
        self._index_markdown = index_markdown

    @classmethod
    def load(cls, template_file: str | None = None) -> "PageTemplates":
        """Compile the built-in templates, or the layout in ``template_file``.

        Raises:
            TemplateLoadError: if the custom file is unreadable or invalid.
        """
        html_env = Environment(autoescape=select_autoescape(default_for_string=True))
        markdown_env = Environment(autoescape=False, trim_blocks=True)

        layout_text = LAYOUT_TEMPLATE_TEXT
        if template_file:
            try:
                layout_text = Path(template_file).read_text("utf-8")
            except OSError as exc:
                raise TemplateLoadError(f"cannot read template {template_file}: {exc}") from exc
            logger.info("Using custom layout template %s", template_file)

        try:
            layout = html_env.from_string(layout_text)
            index_markdown = markdown_env.from_string(INDEX_MARKDOWN_TEMPLATE_TEXT)
        except TemplateError as exc:
            raise TemplateLoadError(f"cannot compile layout template: {exc}") from exc
        return cls(layout=layout, index_markdown=index_markdown)

    def render_layout(self, site_name: str, title: str, contents_html: str) -> str:
        """Wrap an already-rendered HTML fragment in the page layout."""
        try:
            return self._layout.render(
                site_name=site_name,
                title=title,
                contents=Markup(contents_html),
            )
        except TemplateError as exc:
            raise RenderError(f"layout rendering failed: {exc}") from exc

    def render_index_markdown(self, articles: list[Article]) -> str:
        try:
            return self._index_markdown.render(articles=articles)
        except TemplateError as exc:
            raise RenderError(f"index rendering failed: {exc}") from exc
