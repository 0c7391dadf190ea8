from pydantic import Field
from mentormatch.dto.base_dto import BaseDto
from mentormatch.common.mentorship_enums import UserRole


class ProfileDto(BaseDto):
    id: int
    user_id: int
    role: UserRole
    name: str | None = None
    bio: str | None = None
    avatar_url: str | None = None
    is_complete: bool = False
    skills: list[str] = Field(default_factory=list)
    interests: list[str] = Field(default_factory=list)
