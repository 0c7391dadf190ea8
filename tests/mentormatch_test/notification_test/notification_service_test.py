import unittest
from unittest.mock import AsyncMock, MagicMock

from sqlalchemy.exc import OperationalError

from mentormatch.common.mentorship_enums import NotificationType
from mentormatch.notification.notification_service import NotificationService


class TestNotificationService(unittest.IsolatedAsyncioTestCase):
    async def asyncSetUp(self):
        self.mock_logger = MagicMock()
        self.mock_session = MagicMock()

        self.mock_repo = MagicMock()
        self.mock_repo.insert_notification = AsyncMock()

        self.service = NotificationService(
            logger=self.mock_logger, notification_repository=self.mock_repo
        )

    async def test_notify_inserts_row_in_savepoint(self):
        await self.service.notify(
            self.mock_session, 4, NotificationType.CONNECTION_ACCEPTED
        )

        self.mock_session.begin_nested.assert_called_once()
        session, entity = self.mock_repo.insert_notification.call_args.args
        self.assertIs(session, self.mock_session)
        self.assertEqual(entity.user_id, 4)
        self.assertEqual(entity.type, NotificationType.CONNECTION_ACCEPTED)
        self.mock_logger.warning.assert_not_called()

    async def test_notify_failure_is_logged_not_raised(self):
        self.mock_repo.insert_notification.side_effect = OperationalError(
            "INSERT", {}, Exception("disk full")
        )

        await self.service.notify(
            self.mock_session, 4, NotificationType.CONNECTION_REQUEST
        )

        self.mock_logger.warning.assert_called_once()

    async def test_notify_does_not_swallow_programming_errors(self):
        self.mock_repo.insert_notification.side_effect = TypeError("bad entity")

        with self.assertRaises(TypeError):
            await self.service.notify(
                self.mock_session, 4, NotificationType.CONNECTION_REQUEST
            )


if __name__ == "__main__":
    unittest.main()
