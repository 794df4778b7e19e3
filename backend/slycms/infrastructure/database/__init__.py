from .base import Base
from .session import build_engine, build_session_factory, init_schema, session_scope
from .models import ArticleModel, ProfileModel

__all__ = [
    "Base",
    "build_engine",
    "build_session_factory",
    "init_schema",
    "session_scope",
    "ArticleModel",
    "ProfileModel",
]
