"""SQLAlchemy ORM model for the singleton Profile."""

from sqlalchemy import CheckConstraint, Integer, Text
from sqlalchemy.orm import Mapped, mapped_column

from slycms.infrastructure.database.base import Base

PROFILE_ROW_ID = 1


class ProfileModel(Base):
    """ORM model — maps to the 'profile' table, which holds at most one row."""

    __tablename__ = "profile"
    __table_args__ = (CheckConstraint(f"id = {PROFILE_ROW_ID}", name="profile_singleton"),)

    id: Mapped[int] = mapped_column(Integer, primary_key=True, default=PROFILE_ROW_ID)
    contents: Mapped[str] = mapped_column(Text, nullable=False)
