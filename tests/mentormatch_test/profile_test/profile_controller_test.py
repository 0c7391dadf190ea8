import unittest
from http import HTTPStatus
from unittest.mock import AsyncMock, MagicMock

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.testclient import TestClient

from mentormatch.common.api_endpoints import MY_PROFILE_ENDPOINT
from mentormatch.common.errors import ConflictError, NotFoundError
from mentormatch.common.fast_api_error_handler import register_exception_handlers
from mentormatch.common.mentorship_enums import UserRole
from mentormatch.dto.profile_dto import ProfileDto
from mentormatch.dto.user_context_dto import UserContextDto
from mentormatch.profile.profile_controller import ProfileController
from mentormatch.utils.retry_utils import RetryUtils

USER_ID = 7


class TestProfileController(unittest.TestCase):
    def setUp(self):
        self.mock_profile_service = MagicMock()
        self.mock_database = MagicMock()
        self.mock_session = AsyncMock()
        self.mock_database.session.return_value.__aenter__.return_value = (
            self.mock_session
        )

        self.controller = ProfileController(
            profile_service=self.mock_profile_service,
            database=self.mock_database,
            retry_utils=RetryUtils(wait_min=0, wait_max=0),
        )

        self.app = FastAPI()
        register_exception_handlers(self.app)
        self.app.include_router(self.controller.router)

    def _get_client_with_mock_user(self):
        mock_user = UserContextDto(user_id=USER_ID, primary_email="user@example.com")

        @self.app.middleware("http")
        async def mock_auth_middleware(request: Request, call_next):
            request.state.user = mock_user
            return await call_next(request)

        return TestClient(self.app)

    def _make_profile_dto(self) -> ProfileDto:
        return ProfileDto(
            id=1,
            user_id=USER_ID,
            role=UserRole.MENTEE,
            name="Mia",
            bio=None,
            avatar_url="mia.png",
            is_complete=True,
            skills=["python"],
            interests=[],
        )

    def test_get_my_profile_success(self):
        client = self._get_client_with_mock_user()
        mock_profile = self._make_profile_dto()
        self.mock_profile_service.get_profile = AsyncMock(return_value=mock_profile)

        response = client.get(MY_PROFILE_ENDPOINT)
        response_json = response.json()

        self.assertEqual(response.status_code, HTTPStatus.OK)
        self.assertEqual(response_json["message"], "Profile retrieved successfully")
        self.assertEqual(
            response_json["data"], {"profile": jsonable_encoder(mock_profile)}
        )
        self.mock_profile_service.get_profile.assert_awaited_once_with(
            self.mock_session, USER_ID
        )

    def test_get_my_profile_not_found(self):
        client = self._get_client_with_mock_user()
        self.mock_profile_service.get_profile = AsyncMock(
            side_effect=NotFoundError("Profile not found.")
        )

        response = client.get(MY_PROFILE_ENDPOINT)

        self.assertEqual(response.status_code, HTTPStatus.NOT_FOUND)
        self.assertFalse(response.json()["success"])

    def test_create_my_profile(self):
        client = self._get_client_with_mock_user()
        self.mock_profile_service.create_profile = AsyncMock(
            return_value=self._make_profile_dto()
        )

        response = client.post(
            MY_PROFILE_ENDPOINT,
            json={"name": "Mia", "avatarUrl": "mia.png", "skills": ["Python"]},
        )

        self.assertEqual(response.status_code, HTTPStatus.CREATED)
        _, user_id, body = self.mock_profile_service.create_profile.call_args.args
        self.assertEqual(user_id, USER_ID)
        self.assertEqual(body.avatar_url, "mia.png")
        self.assertEqual(body.skills, ["Python"])

    def test_create_my_profile_conflict(self):
        client = self._get_client_with_mock_user()
        self.mock_profile_service.create_profile = AsyncMock(
            side_effect=ConflictError(
                "Profile already exists. Please update it instead."
            )
        )

        response = client.post(MY_PROFILE_ENDPOINT, json={"name": "Mia"})

        self.assertEqual(response.status_code, HTTPStatus.CONFLICT)
        self.assertEqual(
            response.json()["message"],
            "Profile already exists. Please update it instead.",
        )

    def test_create_my_profile_rejects_unknown_fields(self):
        client = self._get_client_with_mock_user()
        self.mock_profile_service.create_profile = AsyncMock()

        response = client.post(MY_PROFILE_ENDPOINT, json={"role": "MENTOR"})

        self.assertEqual(response.status_code, HTTPStatus.BAD_REQUEST)
        self.mock_profile_service.create_profile.assert_not_awaited()

    def test_create_my_profile_rejects_overlong_vocabulary_names(self):
        client = self._get_client_with_mock_user()
        self.mock_profile_service.create_profile = AsyncMock()

        for field in ("skills", "interests"):
            with self.subTest(field=field):
                response = client.post(
                    MY_PROFILE_ENDPOINT,
                    json={"name": "Mia", field: ["python", "x" * 101]},
                )

                self.assertEqual(response.status_code, HTTPStatus.BAD_REQUEST)
                self.assertTrue(
                    response.json()["message"].startswith("Validation Error:")
                )
        self.mock_profile_service.create_profile.assert_not_awaited()

    def test_update_my_profile_rejects_overlong_skill_name(self):
        client = self._get_client_with_mock_user()
        self.mock_profile_service.update_profile = AsyncMock()

        response = client.put(MY_PROFILE_ENDPOINT, json={"skills": ["x" * 101]})

        self.assertEqual(response.status_code, HTTPStatus.BAD_REQUEST)
        self.mock_profile_service.update_profile.assert_not_awaited()

    def test_create_my_profile_accepts_name_at_column_width(self):
        client = self._get_client_with_mock_user()
        self.mock_profile_service.create_profile = AsyncMock(
            return_value=self._make_profile_dto()
        )

        response = client.post(
            MY_PROFILE_ENDPOINT, json={"name": "Mia", "skills": ["x" * 100]}
        )

        self.assertEqual(response.status_code, HTTPStatus.CREATED)

    def test_update_my_profile(self):
        client = self._get_client_with_mock_user()
        self.mock_profile_service.update_profile = AsyncMock(
            return_value=self._make_profile_dto()
        )

        response = client.put(MY_PROFILE_ENDPOINT, json={"bio": "Hello"})

        self.assertEqual(response.status_code, HTTPStatus.OK)
        body = self.mock_profile_service.update_profile.call_args.args[2]
        self.assertEqual(body.model_fields_set, {"bio"})

    def test_delete_my_profile(self):
        client = self._get_client_with_mock_user()
        self.mock_profile_service.delete_profile = AsyncMock()

        response = client.delete(MY_PROFILE_ENDPOINT)

        self.assertEqual(response.status_code, HTTPStatus.OK)
        self.mock_profile_service.delete_profile.assert_awaited_once_with(
            self.mock_session, USER_ID
        )


if __name__ == "__main__":
    unittest.main()
