from abc import ABC, abstractmethod

from slycms.domain.entities import Profile


class ProfileRepository(ABC):
    """Port for the singleton profile record."""

    @abstractmethod
    async def load(self) -> Profile | None:
        ...

    @abstractmethod
    async def save(self, contents: str) -> Profile:
        """Insert the profile on first write, overwrite it afterwards."""
        ...
