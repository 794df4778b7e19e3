"""Domain entities — pure Python business objects, no framework dependencies."""

from dataclasses import dataclass, field
from datetime import datetime

from slycms.domain import keys


def now_to_the_second() -> datetime:
    return datetime.now().replace(microsecond=0)


@dataclass
class Article:
    """A markdown document identified by the second it was created in."""

    title: str
    contents: str
    created_at: datetime = field(default_factory=now_to_the_second)

    @property
    def key(self) -> str:
        """The 14-digit primary key and URL segment; never stored separately."""
        return keys.encode(self.created_at)

    @property
    def url(self) -> str:
        return keys.article_url(self.key)

    def update(self, title: str, contents: str) -> None:
        """Replace title and contents. The creation stamp is immutable."""
        self.title = title
        self.contents = contents
