from .article_service import ArticleService
from .page_service import PageService
from .profile_service import ProfileService

__all__ = [
    "ArticleService",
    "PageService",
    "ProfileService",
]
