from fastapi import APIRouter

from mentormatch.common.api_endpoints import MY_IDENTITY_ENDPOINT
from mentormatch.common.errors import NotFoundError
from mentormatch.common.fast_api_response_wrapper import api_response
from mentormatch.dto.user_dto import UserDto
from mentormatch.utils.permission_decorators import authenticate


class AuthenticationController:
    """
    Controller for the authenticated identity.

    Relies on `AuthMiddleware` to inject the user context into
    `request.state.user`.

    Endpoints:
        GET /users/me: Returns the current user's ID, email and role.
    """

    def __init__(self, users_repository, database, retry_utils):
        self.router = APIRouter(tags=["Authentication"])
        self.users_repository = users_repository
        self.database = database
        self.retry_utils = retry_utils

        self.router.add_api_route(
            MY_IDENTITY_ENDPOINT,
            endpoint=authenticate()(self.get_me),
            methods=["GET"],
            response_model=None,
        )

    async def get_me(self, user_id: int):
        """
        Get the current authenticated user.

        Example:
            {
                "success": True,
                "message": "Successfully",
                "data": {"id": 7, "primaryEmail": "a@b.c", "role": "MENTOR"}
            }
        """
        user = await self.retry_utils.run_in_session(
            self.database,
            lambda session: self.users_repository.get_user_by_user_id(
                session=session, user_id=user_id
            ),
        )
        if user is None:
            raise NotFoundError("User not found.")

        return api_response(
            message="Successfully",
            data=UserDto(
                id=user.user_id, primary_email=user.primary_email, role=user.role
            ),
        )
