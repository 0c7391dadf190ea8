from pydantic import Field
from mentormatch.dto.base_dto import BaseDto
from mentormatch.dto.base_internal_dto import BaseInternalDTO
from mentormatch.dto.public_profile_dto import PublicProfileDto
from mentormatch.common.mentorship_enums import UserRole


class DiscoveryFilterDto(BaseInternalDTO):
    role: UserRole | None = None
    skill: str | None = None
    interest: str | None = None


class DiscoveredUserDto(BaseDto):
    id: int
    email: str
    role: UserRole
    profile: PublicProfileDto


class DiscoveryPageDto(BaseDto):
    items: list[DiscoveredUserDto] = Field(default_factory=list)
    total_count: int
    total_pages: int
    current_page: int
    per_page: int
