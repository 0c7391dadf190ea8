from pydantic import Field
from mentormatch.dto.base_dto import BaseDto


class PublicProfileDto(BaseDto):
    """Profile fields any authenticated user may see about another user."""

    user_id: int
    name: str
    bio: str
    avatar_url: str
    skills: list[str] = Field(default_factory=list)
    interests: list[str] = Field(default_factory=list)
