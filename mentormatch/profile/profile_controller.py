from http import HTTPStatus

from fastapi import APIRouter

from mentormatch.common.api_endpoints import MY_PROFILE_ENDPOINT
from mentormatch.common.fast_api_response_wrapper import api_response
from mentormatch.dto.profile_create_dto import ProfileCreateDto
from mentormatch.dto.profile_dto import ProfileDto
from mentormatch.utils.permission_decorators import authenticate


class ProfileController:
    """
    FastAPI controller exposing the caller's own profile.

    Handles authentication, request parsing, and transaction boundaries,
    delegating all business logic to ProfileService.
    """

    def __init__(self, profile_service, database, retry_utils):
        """
        Initialize the ProfileController with its dependencies and register routes.

        Args:
            profile_service (ProfileService): Service handling profile business logic.
            database (Database): Database access object providing async session management.
            retry_utils (RetryUtils): Retry policy for read-only endpoints.
        """
        self.router = APIRouter(tags=["profile"])
        self.profile_service = profile_service
        self.database = database
        self.retry_utils = retry_utils

        self.router.add_api_route(
            MY_PROFILE_ENDPOINT,
            endpoint=authenticate()(self.get_my_profile),
            methods=["GET"],
            response_model=None,
        )
        self.router.add_api_route(
            MY_PROFILE_ENDPOINT,
            endpoint=authenticate()(self.create_my_profile),
            methods=["POST"],
            response_model=None,
        )
        self.router.add_api_route(
            MY_PROFILE_ENDPOINT,
            endpoint=authenticate()(self.update_my_profile),
            methods=["PUT"],
            response_model=None,
        )
        self.router.add_api_route(
            MY_PROFILE_ENDPOINT,
            endpoint=authenticate()(self.delete_my_profile),
            methods=["DELETE"],
            response_model=None,
        )

    async def get_my_profile(self, user_id: int):
        """
        Retrieve the profile of the currently authenticated user.

        Returns:
            A standardized API response containing the user's profile,
            including skill and interest names.

        Raises:
            NotFoundError: The user has not created a profile yet (404).
        """
        profile: ProfileDto = await self.retry_utils.run_in_session(
            self.database,
            lambda session: self.profile_service.get_profile(session, user_id),
        )

        return api_response(
            message="Profile retrieved successfully",
            data={"profile": profile},
        )

    async def create_my_profile(self, user_id: int, body: ProfileCreateDto):
        """
        Create the profile of the currently authenticated user.

        Skill and interest names are normalized and created in the shared
        vocabulary when new.

        Returns:
            A standardized API response (201) containing the created profile.
        """
        async with self.database.session() as session:
            profile: ProfileDto = await self.profile_service.create_profile(
                session, user_id, body
            )

        return api_response(
            message="Profile created successfully",
            data={"profile": profile},
            status_code=HTTPStatus.CREATED,
        )

    async def update_my_profile(self, user_id: int, body: ProfileCreateDto):
        """
        Update the profile of the currently authenticated user.

        Only the fields present in the request body are updated. Omitted
        fields are left unchanged; a present `skills` or `interests` list
        replaces the current set.
        """
        async with self.database.session() as session:
            profile: ProfileDto = await self.profile_service.update_profile(
                session, user_id, body
            )

        return api_response(
            message="Profile updated successfully",
            data={"profile": profile},
        )

    async def delete_my_profile(self, user_id: int):
        """Delete the profile of the currently authenticated user."""
        async with self.database.session() as session:
            await self.profile_service.delete_profile(session, user_id)

        return api_response(message="Profile deleted successfully")
