from datetime import datetime, timezone

from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from mentormatch.common.constants import DEFAULT_AVATAR_URL
from mentormatch.common.errors import ConflictError, NotFoundError
from mentormatch.dto.profile_create_dto import ProfileCreateDto
from mentormatch.dto.profile_dto import ProfileDto
from mentormatch.entity.profile_entity import ProfileEntity


def normalize_names(names: list[str] | None) -> list[str]:
    """
    Normalize submitted skill or interest names.

    Names are stripped and lower-cased; blanks are dropped and duplicates are
    removed keeping first-seen order.
    """
    normalized = []
    for name in names or []:
        cleaned = name.strip().lower()
        if cleaned and cleaned not in normalized:
            normalized.append(cleaned)
    return normalized


class ProfileService:
    """
    Application service managing the caller's own profile.

    Skill and interest names are resolved against the global vocabulary with
    find-or-create before being associated with the profile.
    """

    def __init__(
        self,
        logger,
        users_repository,
        profile_repository,
        skill_repository,
        interest_repository,
        profile_mapper,
    ):
        """
        Initialize the ProfileService with its dependencies.

        Args:
            logger: The logger instance for logging messages.
            users_repository (UsersRepository): Identity store lookups.
            profile_repository (ProfileRepository): Profile persistence.
            skill_repository (SkillRepository): Skill vocabulary.
            interest_repository (InterestRepository): Interest vocabulary.
            profile_mapper (ProfileMapper): Entity to DTO conversion.
        """
        self.logger = logger
        self.users_repository = users_repository
        self.profile_repository = profile_repository
        self.skill_repository = skill_repository
        self.interest_repository = interest_repository
        self.profile_mapper = profile_mapper

    async def get_profile(self, session: AsyncSession, user_id: int) -> ProfileDto:
        """
        Retrieve the profile of a user.

        Raises:
            NotFoundError: The user has no profile.
        """
        profile = await self.profile_repository.get_profile_by_user_id(
            session=session, user_id=user_id
        )
        if profile is None:
            raise NotFoundError("Profile not found.")

        return self.profile_mapper.map_to_profile_dto(profile)

    async def create_profile(
        self, session: AsyncSession, user_id: int, body: ProfileCreateDto
    ) -> ProfileDto:
        """
        Create the profile of a user.

        Args:
            session (AsyncSession): Active DB session.
            user_id (int): The authenticated user.
            body (ProfileCreateDto): Submitted profile fields.

        Returns:
            ProfileDto: The created profile.

        Raises:
            NotFoundError: The user does not exist.
            ConflictError: The user already has a profile.
        """
        user = await self.users_repository.get_user_by_user_id(
            session=session, user_id=user_id
        )
        if user is None:
            raise NotFoundError("User not found.")

        existing = await self.profile_repository.get_profile_by_user_id(
            session=session, user_id=user_id
        )
        if existing is not None:
            raise ConflictError("Profile already exists. Please update it instead.")

        profile = ProfileEntity(
            user_id=user_id,
            user=user,
            name=body.name,
            bio=body.bio,
            avatar_url=body.avatar_url or DEFAULT_AVATAR_URL,
            is_complete=bool(body.name),
            updated_timestamp=datetime.now(timezone.utc),
            skills=await self.skill_repository.find_or_create(
                session, normalize_names(body.skills)
            ),
            interests=await self.interest_repository.find_or_create(
                session, normalize_names(body.interests)
            ),
        )

        try:
            profile = await self.profile_repository.save_profile(session, profile)
        except IntegrityError as e:
            raise ConflictError(
                "Profile already exists. Please update it instead."
            ) from e

        await session.commit()

        self.logger.info(
            "[ProfileService] profile created. UserID: %s, ProfileID: %s",
            user_id,
            profile.profile_id,
        )
        return self.profile_mapper.map_to_profile_dto(profile)

    async def update_profile(
        self, session: AsyncSession, user_id: int, body: ProfileCreateDto
    ) -> ProfileDto:
        """
        Update the fields present in the request body.

        Raises:
            NotFoundError: The user has no profile.
        """
        profile = await self.profile_repository.get_profile_by_user_id(
            session=session, user_id=user_id
        )
        if profile is None:
            raise NotFoundError("Profile not found.")

        changes = body.submitted_fields()
        for field in ("name", "bio", "avatar_url"):
            if field in changes:
                setattr(profile, field, changes[field])

        if changes.get("skills") is not None:
            profile.skills = await self.skill_repository.find_or_create(
                session, normalize_names(changes["skills"])
            )
        if changes.get("interests") is not None:
            profile.interests = await self.interest_repository.find_or_create(
                session, normalize_names(changes["interests"])
            )

        profile.is_complete = bool(profile.name)
        profile.updated_timestamp = datetime.now(timezone.utc)

        profile = await self.profile_repository.save_profile(session, profile)
        await session.commit()

        self.logger.info("[ProfileService] profile updated. UserID: %s", user_id)
        return self.profile_mapper.map_to_profile_dto(profile)

    async def delete_profile(self, session: AsyncSession, user_id: int) -> None:
        """
        Delete the profile of a user.

        Raises:
            NotFoundError: The user has no profile.
        """
        profile = await self.profile_repository.get_profile_by_user_id(
            session=session, user_id=user_id
        )
        if profile is None:
            raise NotFoundError("Profile not found.")

        await self.profile_repository.delete_profile(session, profile)
        await session.commit()

        self.logger.info("[ProfileService] profile deleted. UserID: %s", user_id)
