"""Concrete repository for the singleton profile, backed by SQLAlchemy."""

from sqlalchemy import select
from sqlalchemy.dialects.sqlite import insert
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from slycms.application.interfaces import ProfileRepository
from slycms.domain.entities import Profile
from slycms.infrastructure.database.models import PROFILE_ROW_ID, ProfileModel
from slycms.infrastructure.database.session import session_scope


class SQLAlchemyProfileRepository(ProfileRepository):
    """Implements the ProfileRepository port using one session per call."""

    def __init__(self, session_factory: async_sessionmaker[AsyncSession]):
        self._session_factory = session_factory

    async def load(self) -> Profile | None:
        stmt = select(ProfileModel.contents).where(ProfileModel.id == PROFILE_ROW_ID)
        async with session_scope(self._session_factory, "load profile") as session:
            contents = (await session.execute(stmt)).scalar_one_or_none()
            return Profile(contents=contents) if contents is not None else None

    async def save(self, contents: str) -> Profile:
        # Single upsert statement: concurrent first writes cannot both insert.
        stmt = insert(ProfileModel).values(id=PROFILE_ROW_ID, contents=contents)
        stmt = stmt.on_conflict_do_update(
            index_elements=[ProfileModel.id],
            set_={"contents": stmt.excluded.contents},
        )
        async with session_scope(self._session_factory, "save profile") as session:
            await session.execute(stmt)
        return Profile(contents=contents)
