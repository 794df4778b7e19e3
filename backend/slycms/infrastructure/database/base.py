"""SQLAlchemy ORM base; models register their tables on its metadata."""

from sqlalchemy.orm import DeclarativeBase


class Base(DeclarativeBase):
    """Base class for the articles and profile ORM models."""

    pass
