from .article import ArticleResponse
from .profile import ProfileResponse
from .static_file import StaticFileResponse

__all__ = [
    "ArticleResponse",
    "ProfileResponse",
    "StaticFileResponse",
]
