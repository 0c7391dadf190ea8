from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession
from mentormatch.common.mentorship_enums import NotificationType
from mentormatch.entity.notification_entity import NotificationEntity


class NotificationService:
    """
    Best-effort notification sink.

    Notifications are plain rows written in the caller's transaction. A
    failed insert is logged and dropped; it never aborts the operation that
    triggered it.
    """

    def __init__(self, logger, notification_repository):
        self.logger = logger
        self.notification_repository = notification_repository

    async def notify(
        self,
        session: AsyncSession,
        user_id: int,
        notification_type: NotificationType,
    ) -> None:
        """
        Record a notification for a user inside a savepoint.

        Args:
            session (AsyncSession): The caller's active session.
            user_id (int): The recipient.
            notification_type (NotificationType): What happened.
        """
        try:
            async with session.begin_nested():
                await self.notification_repository.insert_notification(
                    session,
                    NotificationEntity(user_id=user_id, type=notification_type),
                )
        except SQLAlchemyError as e:
            self.logger.warning(
                "[NotificationService] failed to record %s for user %s: %s",
                notification_type.value,
                user_id,
                str(e),
            )
