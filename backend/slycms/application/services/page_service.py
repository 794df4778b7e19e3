"""Page composition — markdown rendering wrapped in the site layout."""

from slycms.application.interfaces import MarkdownRenderer
from slycms.domain.entities import Article, Profile
from slycms.infrastructure.rendering.templates import PageTemplates

INDEX_TITLE = "index"
PROFILE_TITLE = "profile"


class PageService:
    """Turns stored documents into complete HTML pages."""

    def __init__(self, renderer: MarkdownRenderer, templates: PageTemplates, site_name: str):
        self._renderer = renderer
        self._templates = templates
        self._site_name = site_name

    def _page(self, title: str, markup: str) -> str:
        html = self._renderer.render(markup)
        return self._templates.render_layout(self._site_name, title, html)

    def article_page(self, article: Article) -> str:
        return self._page(article.title, article.contents)

    def index_page(self, articles: list[Article]) -> str:
        """Render the article list as markdown first, then as a page."""
        return self._page(INDEX_TITLE, self._templates.render_index_markdown(articles))

    def profile_page(self, profile: Profile) -> str:
        return self._page(PROFILE_TITLE, profile.contents)
