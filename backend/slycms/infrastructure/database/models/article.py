"""SQLAlchemy ORM model for the Article entity."""

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column

from slycms.infrastructure.database.base import Base


class ArticleModel(Base):
    """ORM model — maps to the 'articles' table.

    ``created_at`` holds the 14-digit article key, not a datetime column.
    """

    __tablename__ = "articles"

    created_at: Mapped[str] = mapped_column(String(14), primary_key=True)
    title: Mapped[str] = mapped_column(String(50), nullable=False)
    contents: Mapped[str] = mapped_column(String(50000), nullable=False)

    def __repr__(self) -> str:
        return f"<ArticleModel(created_at={self.created_at}, title='{self.title}')>"
