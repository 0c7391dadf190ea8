from datetime import datetime, timezone
from mentormatch.common.mentorship_enums import ConnectionStatus
from mentormatch.entity.connection_entity import ConnectionEntity
from sqlalchemy import and_, or_, select, update
from sqlalchemy.ext.asyncio import AsyncSession


class ConnectionRepository:
    """
    Repository for handling database operations related to ConnectionEntity.

    The (mentor_id, mentee_id) pair is unique in the table, so each pair has
    at most one row whatever its status.
    """

    async def get_connection_by_id(
        self, session: AsyncSession, connection_id: int
    ) -> ConnectionEntity | None:
        """
        Retrieve a connection by its ID.

        The row is always re-read from the database so a status changed by a
        bulk UPDATE in the same session is visible.

        Args:
            session (AsyncSession): The active async database session.
            connection_id (int): The ID of the connection to retrieve.

        Returns:
            ConnectionEntity | None: The matching connection if found; otherwise None.
        """
        result = await session.execute(
            select(ConnectionEntity)
            .where(ConnectionEntity.connection_id == connection_id)
            .execution_options(populate_existing=True)
        )

        return result.scalars().one_or_none()

    async def get_connection_by_pair(
        self, session: AsyncSession, mentor_id: int, mentee_id: int
    ) -> ConnectionEntity | None:
        """
        Retrieve the connection for a canonical (mentor_id, mentee_id) pair.

        Args:
            session (AsyncSession): The active async database session.
            mentor_id (int): The user ID in the mentor slot.
            mentee_id (int): The user ID in the mentee slot.

        Returns:
            ConnectionEntity | None: The pair's connection if one exists.
        """
        result = await session.execute(
            select(ConnectionEntity).where(
                ConnectionEntity.mentor_id == mentor_id,
                ConnectionEntity.mentee_id == mentee_id,
            )
        )

        return result.scalars().one_or_none()

    async def get_connection_between(
        self, session: AsyncSession, user_id: int, other_user_id: int
    ) -> ConnectionEntity | None:
        """
        Retrieve the connection between two users regardless of which slot
        each one occupies.

        Args:
            session (AsyncSession): The active async database session.
            user_id (int): One participant.
            other_user_id (int): The other participant.

        Returns:
            ConnectionEntity | None: The oldest connection between the two users,
            or None when they have never been connected.
        """
        result = await session.execute(
            select(ConnectionEntity)
            .where(
                or_(
                    and_(
                        ConnectionEntity.mentor_id == user_id,
                        ConnectionEntity.mentee_id == other_user_id,
                    ),
                    and_(
                        ConnectionEntity.mentor_id == other_user_id,
                        ConnectionEntity.mentee_id == user_id,
                    ),
                )
            )
            .order_by(ConnectionEntity.connection_id)
            .limit(1)
        )

        return result.scalars().first()

    async def get_connections_for_user(
        self,
        session: AsyncSession,
        user_id: int,
        status: ConnectionStatus | None = None,
    ) -> list[ConnectionEntity]:
        """
        Retrieve every connection in which the user is mentor or mentee.

        Args:
            session (AsyncSession): The active async database session.
            user_id (int): The participant's user ID.
            status (ConnectionStatus | None): Optional status filter.

        Returns:
            list[ConnectionEntity]: Matching connections ordered by ID.
        """
        query = select(ConnectionEntity).where(
            or_(
                ConnectionEntity.mentor_id == user_id,
                ConnectionEntity.mentee_id == user_id,
            )
        )
        if status is not None:
            query = query.where(ConnectionEntity.status == status)

        result = await session.execute(query.order_by(ConnectionEntity.connection_id))

        return list(result.scalars().all())

    async def insert_connection(
        self, session: AsyncSession, entity: ConnectionEntity
    ) -> ConnectionEntity:
        """
        Insert a new connection inside a savepoint.

        A duplicate (mentor_id, mentee_id) pair raises IntegrityError after the
        savepoint has been rolled back, leaving the outer transaction usable.

        Args:
            session (AsyncSession): The active async database session.
            entity (ConnectionEntity): The connection to insert.

        Returns:
            ConnectionEntity: The inserted entity with its generated ID.
        """
        async with session.begin_nested():
            session.add(entity)

        return entity

    async def update_status(
        self,
        session: AsyncSession,
        connection_id: int,
        expected_status: ConnectionStatus,
        new_status: ConnectionStatus,
        initiator_id: int | None = None,
    ) -> ConnectionEntity | None:
        """
        Move a connection to a new status only if it still has the expected one.

        The check and the write happen in one UPDATE statement, so two
        concurrent transitions of the same row cannot both succeed.

        Args:
            session (AsyncSession): The active async database session.
            connection_id (int): The connection to update.
            expected_status (ConnectionStatus): Status the row must have at write time.
            new_status (ConnectionStatus): Status to write.
            initiator_id (int | None): New initiator, set when a request is reopened.

        Returns:
            ConnectionEntity | None: The updated connection, or None when no row
            matched (missing, or its status changed in the meantime).
        """
        values = {
            "status": new_status,
            "updated_timestamp": datetime.now(timezone.utc),
        }
        if initiator_id is not None:
            values["initiator_id"] = initiator_id

        result = await session.execute(
            update(ConnectionEntity)
            .where(
                ConnectionEntity.connection_id == connection_id,
                ConnectionEntity.status == expected_status,
            )
            .values(**values)
            .execution_options(synchronize_session=False)
        )

        if result.rowcount == 0:
            return None

        return await self.get_connection_by_id(session, connection_id)

    async def delete_connection(
        self, session: AsyncSession, entity: ConnectionEntity
    ) -> None:
        """Delete a connection row and flush the deletion."""
        await session.delete(entity)
        await session.flush()
