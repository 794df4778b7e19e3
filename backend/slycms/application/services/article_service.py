"""Application service (use case) for Article operations."""

import logging
from collections.abc import Callable
from datetime import datetime

from slycms.application.interfaces import ArticleRepository
from slycms.domain.entities import Article
from slycms.domain.entities.article import now_to_the_second
from slycms.domain.exceptions import EntityNotFoundError, MalformedInputError
from slycms.domain.title import MAX_TITLE_BYTES, extract_title

logger = logging.getLogger(__name__)

MAX_CONTENTS_BYTES = 50_000


class ArticleService:
    """Orchestrates article business logic. Depends on the repository port (DI)."""

    def __init__(
        self,
        repository: ArticleRepository,
        *,
        max_title_bytes: int = MAX_TITLE_BYTES,
        max_contents_bytes: int = MAX_CONTENTS_BYTES,
        clock: Callable[[], datetime] = now_to_the_second,
    ):
        self._repository = repository
        self._max_title_bytes = max_title_bytes
        self._max_contents_bytes = max_contents_bytes
        self._clock = clock

    def _parse_document(self, body: str) -> str:
        """Validate a submitted document and return its title."""
        size = len(body.encode("utf-8"))
        if size > self._max_contents_bytes:
            raise MalformedInputError(
                f"document is {size} bytes; the limit is {self._max_contents_bytes}"
            )
        return extract_title(body, self._max_title_bytes)

    async def get_article(self, key: str) -> Article:
        article = await self._repository.get_by_key(key)
        if article is None:
            raise EntityNotFoundError("Article", key)
        return article

    async def list_articles(self) -> list[Article]:
        return await self._repository.list_all()

    async def create_article(self, body: str) -> Article:
        title = self._parse_document(body)
        article = Article(title=title, contents=body, created_at=self._clock())
        return await self._repository.insert(article)

    async def update_article(self, key: str, body: str) -> Article:
        article = await self.get_article(key)
        article.update(title=self._parse_document(body), contents=body)
        return await self._repository.update(key, article.title, article.contents)

    async def delete_article(self, key: str) -> Article:
        """Remove an article and return the record as it was before deletion."""
        article = await self.get_article(key)
        await self._repository.delete(key)
        return article
