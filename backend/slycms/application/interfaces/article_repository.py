"""Abstract repository interfaces (ports) — define the contract, not the implementation."""

from abc import ABC, abstractmethod

from slycms.domain.entities import Article


class ArticleRepository(ABC):
    """Port for article persistence, keyed by the 14-digit article key."""

    @abstractmethod
    async def get_by_key(self, key: str) -> Article | None:
        """Retrieve a single article. ``None`` means absent, not failure."""
        ...

    @abstractmethod
    async def list_all(self) -> list[Article]:
        """Retrieve every article, ascending by key (oldest first)."""
        ...

    @abstractmethod
    async def insert(self, article: Article) -> Article:
        """Persist a new article.

        Raises DuplicateEntityError if an article with the same key exists.
        """
        ...

    @abstractmethod
    async def update(self, key: str, title: str, contents: str) -> Article:
        """Replace title and contents of an existing article.

        Raises EntityNotFoundError if no article has ``key``.
        """
        ...

    @abstractmethod
    async def delete(self, key: str) -> None:
        """Remove an article. Raises EntityNotFoundError if absent."""
        ...
