from .article_repository import ArticleRepository
from .markdown_renderer import MarkdownRenderer
from .profile_repository import ProfileRepository

__all__ = [
    "ArticleRepository",
    "MarkdownRenderer",
    "ProfileRepository",
]
