from sqlalchemy.ext.asyncio import AsyncSession
from mentormatch.entity.notification_entity import NotificationEntity


class NotificationRepository:
    """Repository for handling database operations related to NotificationEntity."""

    async def insert_notification(
        self, session: AsyncSession, entity: NotificationEntity
    ) -> NotificationEntity:
        """Add a notification row and flush it so its ID is assigned."""
        session.add(entity)
        await session.flush()

        return entity
