from mentormatch.dto.base_dto import BaseDto
from mentormatch.common.mentorship_enums import UserRole


class UserDto(BaseDto):
    id: int
    primary_email: str
    role: UserRole
