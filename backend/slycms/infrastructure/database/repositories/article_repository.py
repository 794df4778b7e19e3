"""Concrete repository implementation backed by SQLAlchemy."""

import logging

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from slycms.application.interfaces import ArticleRepository
from slycms.domain import keys
from slycms.domain.entities import Article
from slycms.domain.exceptions import DuplicateEntityError, EntityNotFoundError
from slycms.infrastructure.database.models import ArticleModel
from slycms.infrastructure.database.session import session_scope

logger = logging.getLogger(__name__)


class SQLAlchemyArticleRepository(ArticleRepository):
    """Implements the ArticleRepository port on SQLAlchemy async sessions.

    Every method runs in its own session, so a connection is held only for
    the duration of a single call.
    """

    def __init__(self, session_factory: async_sessionmaker[AsyncSession]):
        self._session_factory = session_factory

    def _to_entity(self, model: ArticleModel) -> Article:
        """Map ORM model → domain entity (a detached copy)."""
        return Article(
            title=model.title,
            contents=model.contents,
            created_at=keys.decode(model.created_at),
        )

    def _to_model(self, entity: Article) -> ArticleModel:
        """Map domain entity → ORM model (for creation)."""
        return ArticleModel(
            created_at=entity.key,
            title=entity.title,
            contents=entity.contents,
        )

    async def get_by_key(self, key: str) -> Article | None:
        async with session_scope(self._session_factory, "get article") as session:
            result = await session.get(ArticleModel, key)
            return self._to_entity(result) if result else None

    async def list_all(self) -> list[Article]:
        stmt = select(ArticleModel).order_by(ArticleModel.created_at.asc())
        async with session_scope(self._session_factory, "list articles") as session:
            result = await session.execute(stmt)
            return [self._to_entity(row) for row in result.scalars().all()]

    async def insert(self, article: Article) -> Article:
        async with session_scope(self._session_factory, "insert article") as session:
            model = self._to_model(article)
            session.add(model)
            try:
                await session.flush()
            except IntegrityError as exc:
                raise DuplicateEntityError("Article", "created_at", article.key) from exc
            logger.info("Inserted article %s", article.key)
            return self._to_entity(model)

    async def update(self, key: str, title: str, contents: str) -> Article:
        async with session_scope(self._session_factory, "update article") as session:
            model = await session.get(ArticleModel, key)
            if model is None:
                raise EntityNotFoundError("Article", key)
            model.title = title
            model.contents = contents
            await session.flush()
            logger.info("Updated article %s", key)
            return self._to_entity(model)

    async def delete(self, key: str) -> None:
        async with session_scope(self._session_factory, "delete article") as session:
            model = await session.get(ArticleModel, key)
            if model is None:
                raise EntityNotFoundError("Article", key)
            await session.delete(model)
            await session.flush()
            logger.info("Deleted article %s", key)
