from mentormatch.common.constants import DEFAULT_AVATAR_URL, UNNAMED_USER
from mentormatch.dto.discovery_dto import DiscoveredUserDto
from mentormatch.dto.profile_dto import ProfileDto
from mentormatch.dto.public_profile_dto import PublicProfileDto
from mentormatch.entity.profile_entity import ProfileEntity


class ProfileMapper:
    """
    Mapper converting profile entities into DTOs.
    """

    def map_to_profile_dto(self, entity: ProfileEntity) -> ProfileDto:
        """Map the owner's full view of a profile."""
        return ProfileDto(
            id=entity.profile_id,
            user_id=entity.user_id,
            role=entity.user.role,
            name=entity.name,
            bio=entity.bio,
            avatar_url=entity.avatar_url,
            is_complete=entity.is_complete,
            skills=[skill.name for skill in entity.skills],
            interests=[interest.name for interest in entity.interests],
        )

    def map_to_public_profile_dto(
        self, user_id: int, entity: ProfileEntity | None
    ) -> PublicProfileDto:
        """
        Map the public projection of a user's profile.

        Missing profiles and empty fields fall back to placeholders, so every
        user can be rendered.
        """
        if entity is None:
            return PublicProfileDto(
                user_id=user_id,
                name=UNNAMED_USER,
                bio="",
                avatar_url=DEFAULT_AVATAR_URL,
            )

        return PublicProfileDto(
            user_id=user_id,
            name=entity.name or UNNAMED_USER,
            bio=entity.bio or "",
            avatar_url=entity.avatar_url or DEFAULT_AVATAR_URL,
            skills=[skill.name for skill in entity.skills],
            interests=[interest.name for interest in entity.interests],
        )

    def map_to_discovered_user_dto(self, entity: ProfileEntity) -> DiscoveredUserDto:
        """Map a discovery result row."""
        return DiscoveredUserDto(
            id=entity.user_id,
            email=entity.user.primary_email,
            role=entity.user.role,
            profile=self.map_to_public_profile_dto(entity.user_id, entity),
        )
