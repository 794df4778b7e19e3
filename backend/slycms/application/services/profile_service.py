"""Application service for the singleton profile."""

from slycms.application.interfaces import ProfileRepository
from slycms.domain.entities import Profile
from slycms.domain.exceptions import EntityNotFoundError

PROFILE_ID = "profile"


class ProfileService:
    def __init__(self, repository: ProfileRepository):
        self._repository = repository

    async def get_profile(self) -> Profile:
        profile = await self._repository.load()
        if profile is None:
            raise EntityNotFoundError("Profile", PROFILE_ID)
        return profile

    async def save_profile(self, contents: str) -> Profile:
        return await self._repository.save(contents)
