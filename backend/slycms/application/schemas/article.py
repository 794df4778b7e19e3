"""Pydantic DTOs (Data Transfer Objects) for the Article feature."""

from datetime import datetime

from pydantic import BaseModel, Field

from slycms.domain.entities import Article


class ArticleResponse(BaseModel):
    """JSON projection returned by article write operations."""

    url: str = Field(..., alias="URL", examples=["/articles/20170821010101.html"])
    title: str = Field(..., alias="Title")
    contents: str = Field(..., alias="Contents")
    created_at: datetime = Field(..., alias="CreatedAt")

    model_config = {"populate_by_name": True}

    @classmethod
    def from_entity(cls, article: Article) -> "ArticleResponse":
        # Keys carry no zone; report the instant with the local UTC offset
        return cls(
            url=article.url,
            title=article.title,
            contents=article.contents,
            created_at=article.created_at.astimezone(),
        )
