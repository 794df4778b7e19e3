from .article import ArticleModel
from .profile import ProfileModel, PROFILE_ROW_ID

__all__ = [
    "ArticleModel",
    "ProfileModel",
    "PROFILE_ROW_ID",
]
