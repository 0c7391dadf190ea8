import unittest
from datetime import datetime, timezone
from http import HTTPStatus
from unittest.mock import AsyncMock, MagicMock

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.testclient import TestClient

from mentormatch.common.api_endpoints import (
    CONNECTION_ACCEPT_ENDPOINT,
    CONNECTION_DECLINE_ENDPOINT,
    CONNECTION_LIST_ENDPOINT,
    CONNECTION_PENDING_ENDPOINT,
    CONNECTION_SEND_ENDPOINT,
    CONNECTION_STATUS_ENDPOINT,
)
from mentormatch.common.errors import ConflictError, ForbiddenError, TransientError
from mentormatch.common.fast_api_error_handler import register_exception_handlers
from mentormatch.common.mentorship_enums import (
    ConnectionDecision,
    ConnectionState,
    ConnectionStatus,
)
from mentormatch.connection.connection_controller import ConnectionController
from mentormatch.dto.connection_dto import ConnectionDto
from mentormatch.dto.connection_status_dto import ConnectionStatusDto
from mentormatch.dto.user_context_dto import UserContextDto
from mentormatch.utils.retry_utils import RetryUtils

USER_ID = 2


class TestConnectionController(unittest.TestCase):
    def setUp(self):
        self.mock_connection_service = MagicMock()
        self.mock_database = MagicMock()
        self.mock_session = AsyncMock()
        self.mock_database.session.return_value.__aenter__.return_value = (
            self.mock_session
        )

        self.controller = ConnectionController(
            connection_service=self.mock_connection_service,
            database=self.mock_database,
            retry_utils=RetryUtils(wait_min=0, wait_max=0),
        )

        self.app = FastAPI()
        register_exception_handlers(self.app)
        self.app.include_router(self.controller.router)

    def _get_client_with_mock_user(self):
        mock_user = UserContextDto(user_id=USER_ID, primary_email="mentee@example.com")

        @self.app.middleware("http")
        async def mock_auth_middleware(request: Request, call_next):
            request.state.user = mock_user
            return await call_next(request)

        return TestClient(self.app)

    def _make_connection_dto(self, status=ConnectionStatus.PENDING) -> ConnectionDto:
        now = datetime.now(timezone.utc)
        return ConnectionDto(
            id=10,
            mentor_id=1,
            mentee_id=USER_ID,
            initiator_id=USER_ID,
            status=status,
            created_timestamp=now,
            updated_timestamp=now,
        )

    def test_requires_authenticated_user(self):
        client = TestClient(self.app)

        response = client.get(CONNECTION_LIST_ENDPOINT)

        self.assertEqual(response.status_code, HTTPStatus.UNAUTHORIZED)
        self.assertFalse(response.json()["success"])

    def test_send_request_created(self):
        client = self._get_client_with_mock_user()
        connection = self._make_connection_dto()
        self.mock_connection_service.request_connection = AsyncMock(
            return_value=(connection, True)
        )

        response = client.post(CONNECTION_SEND_ENDPOINT, json={"requestedUserId": 1})

        self.assertEqual(response.status_code, HTTPStatus.CREATED)
        self.assertEqual(response.json()["data"], jsonable_encoder(connection))
        self.assertEqual(response.json()["data"]["mentorId"], 1)
        self.mock_connection_service.request_connection.assert_awaited_once_with(
            self.mock_session, initiator_id=USER_ID, target_id=1
        )

    def test_send_request_reopened(self):
        client = self._get_client_with_mock_user()
        self.mock_connection_service.request_connection = AsyncMock(
            return_value=(self._make_connection_dto(), False)
        )

        response = client.post(CONNECTION_SEND_ENDPOINT, json={"requestedUserId": 1})

        self.assertEqual(response.status_code, HTTPStatus.OK)
        self.assertEqual(response.json()["message"], "Connection request re-sent.")

    def test_send_request_conflict(self):
        client = self._get_client_with_mock_user()
        self.mock_connection_service.request_connection = AsyncMock(
            side_effect=ConflictError("A connection request already exists.")
        )

        response = client.post(CONNECTION_SEND_ENDPOINT, json={"requestedUserId": 1})

        self.assertEqual(response.status_code, HTTPStatus.CONFLICT)
        self.assertEqual(
            response.json()["message"], "A connection request already exists."
        )

    def test_send_request_invalid_body(self):
        client = self._get_client_with_mock_user()
        self.mock_connection_service.request_connection = AsyncMock()

        response = client.post(CONNECTION_SEND_ENDPOINT, json={"requestedUserId": 0})

        self.assertEqual(response.status_code, HTTPStatus.BAD_REQUEST)
        self.mock_connection_service.request_connection.assert_not_awaited()

    def test_accept_request(self):
        client = self._get_client_with_mock_user()
        self.mock_connection_service.respond_to_request = AsyncMock(
            return_value=self._make_connection_dto(ConnectionStatus.ACCEPTED)
        )

        response = client.patch(CONNECTION_ACCEPT_ENDPOINT, json={"connectionId": 10})

        self.assertEqual(response.status_code, HTTPStatus.OK)
        self.assertEqual(response.json()["message"], "Connection request accepted.")
        self.mock_connection_service.respond_to_request.assert_awaited_once_with(
            self.mock_session,
            responder_id=USER_ID,
            connection_id=10,
            decision=ConnectionDecision.ACCEPT,
        )

    def test_decline_request_forbidden(self):
        client = self._get_client_with_mock_user()
        self.mock_connection_service.respond_to_request = AsyncMock(
            side_effect=ForbiddenError("You are not a participant of this connection.")
        )

        response = client.patch(CONNECTION_DECLINE_ENDPOINT, json={"connectionId": 10})

        self.assertEqual(response.status_code, HTTPStatus.FORBIDDEN)
        self.assertEqual(
            self.mock_connection_service.respond_to_request.call_args.kwargs[
                "decision"
            ],
            ConnectionDecision.DECLINE,
        )

    def test_get_connections(self):
        client = self._get_client_with_mock_user()
        self.mock_connection_service.list_connections = AsyncMock(return_value=[])

        response = client.get(CONNECTION_LIST_ENDPOINT)

        self.assertEqual(response.status_code, HTTPStatus.OK)
        self.assertEqual(response.json()["data"], [])
        self.mock_connection_service.list_connections.assert_awaited_once_with(
            self.mock_session, USER_ID
        )

    def test_get_pending_retries_transient_errors(self):
        client = self._get_client_with_mock_user()
        self.mock_connection_service.list_pending = AsyncMock(
            side_effect=[TransientError("db down"), []]
        )

        response = client.get(CONNECTION_PENDING_ENDPOINT)

        self.assertEqual(response.status_code, HTTPStatus.OK)
        self.assertEqual(self.mock_connection_service.list_pending.await_count, 2)
        self.assertEqual(self.mock_database.session.call_count, 2)

    def test_get_pending_gives_up_after_retries(self):
        client = self._get_client_with_mock_user()
        self.mock_connection_service.list_pending = AsyncMock(
            side_effect=TransientError("db down")
        )

        response = client.get(CONNECTION_PENDING_ENDPOINT)

        self.assertEqual(response.status_code, HTTPStatus.SERVICE_UNAVAILABLE)
        self.assertEqual(self.mock_connection_service.list_pending.await_count, 3)

    def test_get_status(self):
        client = self._get_client_with_mock_user()
        status = ConnectionStatusDto(
            status=ConnectionState.PENDING, is_receiver=True, connection_id=10
        )
        self.mock_connection_service.get_status = AsyncMock(return_value=status)

        response = client.get(CONNECTION_STATUS_ENDPOINT, params={"otherUserId": 1})

        self.assertEqual(response.status_code, HTTPStatus.OK)
        self.assertEqual(
            response.json()["data"],
            {"status": "PENDING", "isReceiver": True, "connectionId": 10},
        )
        self.mock_connection_service.get_status.assert_awaited_once_with(
            self.mock_session, USER_ID, 1
        )

    def test_get_status_requires_other_user(self):
        client = self._get_client_with_mock_user()

        response = client.get(CONNECTION_STATUS_ENDPOINT)

        self.assertEqual(response.status_code, HTTPStatus.BAD_REQUEST)

    def test_delete_connection(self):
        client = self._get_client_with_mock_user()
        self.mock_connection_service.delete_connection = AsyncMock()

        response = client.delete("/connection/10")

        self.assertEqual(response.status_code, HTTPStatus.OK)
        self.mock_connection_service.delete_connection.assert_awaited_once_with(
            self.mock_session, user_id=USER_ID, connection_id=10
        )


if __name__ == "__main__":
    unittest.main()
