from mentormatch.entity.users_entity import UsersEntity
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession


class UsersRepository:
    """
    Read-only access to the identity store.

    User rows are written by the external identity provider. This service
    only needs them to check existence and to read the current role.
    """

    async def get_user_by_user_id(
        self, session: AsyncSession, user_id: int
    ) -> UsersEntity | None:
        """
        Look up a user by primary key.

        The role is read fresh on every call; nothing is cached between
        requests.

        Args:
            session (AsyncSession): The caller's session.
            user_id (int): The user to look up.

        Returns:
            UsersEntity | None: The user, or None for an unknown ID.
        """
        return await session.scalar(
            select(UsersEntity).where(UsersEntity.user_id == user_id)
        )
