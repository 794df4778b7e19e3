from .article_repository import SQLAlchemyArticleRepository
from .profile_repository import SQLAlchemyProfileRepository

__all__ = [
    "SQLAlchemyArticleRepository",
    "SQLAlchemyProfileRepository",
]
