"""Extension-based content negotiation for article resources.

A request path such as ``/articles/20170821010101.html`` is split into the
resource id (``20170821010101``) and the requested extension (``html``).
The pair (HTTP method, extension) then selects a handler from a small
dispatch table; ``*`` matches any extension.

    GET     html   rendered page
    GET     md     raw markdown
    POST    *      create (the path is ignored)
    PUT     *      replace title and contents
    DELETE  *      remove

A GET for any other extension is a 404, and so is a method absent from the
table.
"""

import logging
from collections.abc import Awaitable, Callable

from fastapi import status
from fastapi.responses import HTMLResponse, JSONResponse, PlainTextResponse, Response

from slycms.application.schemas import ArticleResponse
from slycms.application.services import ArticleService, PageService
from slycms.domain.entities import Article
from slycms.domain.exceptions import EntityNotFoundError, MalformedPathError, UnsupportedMethodError

logger = logging.getLogger(__name__)

ANY_EXTENSION = "*"

Handler = Callable[[str, str], Awaitable[Response]]


def parse_resource_path(path: str) -> tuple[str, str]:
    """Split a request path into ``(id, extension)``.

    Trailing slashes are ignored. The last segment must contain exactly one
    dot; names with no dot or several dots are rejected.

    Raises:
        MalformedPathError: if the last segment is not ``<id>.<extension>``.
    """
    trimmed = path.rstrip("/")
    filename = trimmed.split("/")[-1]
    parts = filename.split(".")
    if len(parts) != 2:
        raise MalformedPathError(path, f"{filename!r} is not a '<id>.<extension>' file name")
    return parts[0], parts[1]


def _article_json(article: Article, status_code: int) -> JSONResponse:
    body = ArticleResponse.from_entity(article).model_dump(mode="json", by_alias=True)
    return JSONResponse(content=body, status_code=status_code)


class ContentRouter:
    """Dispatches article requests on (method, extension)."""

    def __init__(self, articles: ArticleService, pages: PageService):
        self._articles = articles
        self._pages = pages
        self._table: dict[tuple[str, str], Handler] = {
            ("GET", "html"): self._show_html,
            ("GET", "md"): self._show_markdown,
            ("POST", ANY_EXTENSION): self._create,
            ("PUT", ANY_EXTENSION): self._update,
            ("DELETE", ANY_EXTENSION): self._delete,
        }

    @property
    def methods(self) -> set[str]:
        return {method for method, _ in self._table}

    def lookup(self, method: str, extension: str) -> Handler:
        """Find the handler for a (method, extension) pair.

        Raises:
            UnsupportedMethodError: if no entry exists for ``method`` at all.
            EntityNotFoundError: if the method is known but the extension
                has no representation.
        """
        handler = self._table.get((method, extension)) or self._table.get((method, ANY_EXTENSION))
        if handler is not None:
            return handler
        if method not in self.methods:
            raise UnsupportedMethodError(method)
        raise EntityNotFoundError("Representation", extension)

    async def dispatch(self, method: str, path: str, body: str = "") -> Response:
        method = method.upper()
        if method not in self.methods:
            raise UnsupportedMethodError(method)

        if method == "POST":
            key, extension = "", ANY_EXTENSION
        else:
            key, extension = parse_resource_path(path)

        handler = self.lookup(method, extension)
        logger.debug("%s %s → key=%s ext=%s", method, path, key, extension)
        return await handler(key, body)

    # ── Handlers ────────────────────────────────────────────────────

    async def _show_html(self, key: str, body: str) -> Response:
        article = await self._articles.get_article(key)
        return HTMLResponse(self._pages.article_page(article), status_code=status.HTTP_200_OK)

    async def _show_markdown(self, key: str, body: str) -> Response:
        article = await self._articles.get_article(key)
        return PlainTextResponse(article.contents, status_code=status.HTTP_200_OK)

    async def _create(self, key: str, body: str) -> Response:
        article = await self._articles.create_article(body)
        return _article_json(article, status.HTTP_201_CREATED)

    async def _update(self, key: str, body: str) -> Response:
        article = await self._articles.update_article(key, body)
        return _article_json(article, status.HTTP_200_OK)

    async def _delete(self, key: str, body: str) -> Response:
        article = await self._articles.delete_article(key)
        return _article_json(article, status.HTTP_200_OK)
