from typing import Annotated

from pydantic import Field, StringConstraints
from mentormatch.common.constants import VOCABULARY_NAME_MAX_LENGTH
from mentormatch.dto.base_request_dto import BaseRequestDto

VocabularyName = Annotated[str, StringConstraints(max_length=VOCABULARY_NAME_MAX_LENGTH)]


class ProfileCreateDto(BaseRequestDto):
    """
    Request body for creating or updating the caller's profile.

    On update only the fields present in the body are applied; a present
    `skills` or `interests` list replaces the whole set.
    """

    name: str | None = Field(default=None, max_length=100)
    bio: str | None = Field(default=None, max_length=1000)
    avatar_url: str | None = None
    skills: list[VocabularyName] | None = None
    interests: list[VocabularyName] | None = None
