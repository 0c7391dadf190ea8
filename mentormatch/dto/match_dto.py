from mentormatch.dto.base_dto import BaseDto
from mentormatch.dto.public_profile_dto import PublicProfileDto
from mentormatch.common.mentorship_enums import UserRole


class MatchDto(BaseDto):
    role: UserRole
    score: int
    profile: PublicProfileDto


class NoMatchesDto(BaseDto):
    """Returned instead of a ranked list when no candidate qualifies."""

    hint: str
