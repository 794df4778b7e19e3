from pydantic import BaseModel, Field

from slycms.domain.entities import Profile


class ProfileResponse(BaseModel):
    """JSON projection returned after saving the profile."""

    contents: str = Field(..., alias="Contents")

    model_config = {"populate_by_name": True}

    @classmethod
    def from_entity(cls, profile: Profile) -> "ProfileResponse":
        return cls(contents=profile.contents)
