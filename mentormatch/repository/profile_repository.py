from sqlalchemy import func, or_, select
from sqlalchemy.ext.asyncio import AsyncSession
from mentormatch.common.mentorship_enums import UserRole
from mentormatch.entity.interest_entity import InterestEntity
from mentormatch.entity.profile_entity import ProfileEntity
from mentormatch.entity.skill_entity import SkillEntity
from mentormatch.entity.users_entity import UsersEntity


class ProfileRepository:
    """
    Repository for handling database operations related to ProfileEntity.

    Loaded profiles always carry their user, skills and interests (eager
    relationships), so callers never trigger lazy loads.
    """

    async def get_profile_by_user_id(
        self, session: AsyncSession, user_id: int
    ) -> ProfileEntity | None:
        """Retrieve the ProfileEntity for a given user ID (1:1 relationship)."""
        if not user_id:
            return None

        result = await session.execute(
            select(ProfileEntity).where(ProfileEntity.user_id == user_id)
        )

        return result.scalars().one_or_none()

    async def get_profiles_by_user_ids(
        self, session: AsyncSession, user_ids: list[int]
    ) -> list[ProfileEntity]:
        """
        Retrieve the profiles of several users.

        Args:
            session (AsyncSession): The active async database session.
            user_ids (list[int]): User IDs to look up.

        Returns:
            list[ProfileEntity]: Profiles found; users without a profile are absent.
        """
        if not user_ids:
            return []

        result = await session.execute(
            select(ProfileEntity).where(ProfileEntity.user_id.in_(user_ids))
        )
        return list(result.scalars().all())

    async def get_candidate_profiles(
        self,
        session: AsyncSession,
        user_id: int,
        role: UserRole,
        skill_ids: list[int],
        interest_ids: list[int],
    ) -> list[ProfileEntity]:
        """
        Retrieve profiles of other users with the given role sharing at least
        one skill or interest with the requester.

        This is an existence pre-filter only; candidates are scored afterwards.

        Args:
            session (AsyncSession): The active async database session.
            user_id (int): The requester, excluded from the result.
            role (UserRole): Role the candidates must have.
            skill_ids (list[int]): The requester's skill IDs.
            interest_ids (list[int]): The requester's interest IDs.

        Returns:
            list[ProfileEntity]: Candidate profiles in profile ID order.
        """
        if not skill_ids and not interest_ids:
            return []

        result = await session.execute(
            select(ProfileEntity)
            .join(UsersEntity, UsersEntity.user_id == ProfileEntity.user_id)
            .where(
                ProfileEntity.user_id != user_id,
                UsersEntity.role == role,
                or_(
                    ProfileEntity.skills.any(SkillEntity.skill_id.in_(skill_ids)),
                    ProfileEntity.interests.any(
                        InterestEntity.interest_id.in_(interest_ids)
                    ),
                ),
            )
            .order_by(ProfileEntity.profile_id)
        )

        return list(result.scalars().all())

    async def search_complete_profiles(
        self,
        session: AsyncSession,
        role: UserRole | None,
        skill_substring: str | None,
        interest_substring: str | None,
        offset: int,
        limit: int,
    ) -> tuple[list[ProfileEntity], int]:
        """
        Retrieve one page of complete profiles matching the discovery filters.

        Substring filters are matched against the lower-cased vocabulary names
        with LIKE wildcards escaped.

        Args:
            session (AsyncSession): The active async database session.
            role (UserRole | None): Restrict to users with this role.
            skill_substring (str | None): Substring of at least one skill name.
            interest_substring (str | None): Substring of at least one interest name.
            offset (int): Number of rows to skip.
            limit (int): Maximum number of rows to return.

        Returns:
            tuple[list[ProfileEntity], int]:
                - The page of profiles ordered by user ID.
                - The total number of matching profiles.
        """
        conditions = [ProfileEntity.is_complete.is_(True)]
        if role is not None:
            conditions.append(UsersEntity.role == role)
        if skill_substring:
            conditions.append(
                ProfileEntity.skills.any(
                    SkillEntity.name.contains(skill_substring, autoescape=True)
                )
            )
        if interest_substring:
            conditions.append(
                ProfileEntity.interests.any(
                    InterestEntity.name.contains(interest_substring, autoescape=True)
                )
            )

        total = await session.scalar(
            select(func.count(ProfileEntity.profile_id))
            .select_from(ProfileEntity)
            .join(UsersEntity, UsersEntity.user_id == ProfileEntity.user_id)
            .where(*conditions)
        )

        result = await session.execute(
            select(ProfileEntity)
            .join(UsersEntity, UsersEntity.user_id == ProfileEntity.user_id)
            .where(*conditions)
            .order_by(ProfileEntity.user_id)
            .offset(offset)
            .limit(limit)
        )

        return list(result.scalars().all()), total or 0

    async def save_profile(
        self, session: AsyncSession, entity: ProfileEntity
    ) -> ProfileEntity:
        """
        Persist a new or modified ProfileEntity, including its skill and
        interest associations.

        Args:
            session (AsyncSession): Active async database session.
            entity (ProfileEntity): The profile to persist.

        Returns:
            ProfileEntity: The same entity, flushed, with its generated ID.
        """
        session.add(entity)
        await session.flush()

        return entity

    async def delete_profile(self, session: AsyncSession, entity: ProfileEntity) -> None:
        """Delete a profile; its association rows go with it."""
        await session.delete(entity)
        await session.flush()
