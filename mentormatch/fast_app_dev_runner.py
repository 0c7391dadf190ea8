"""
Development ASGI entry point for the MentorMatch API.

This script performs the following steps:
1. Builds application dependencies via AppDependencyBuilder.
2. Swaps in an authentication service that trusts the X-Dev-User-Id header.
3. Creates the FastAPI application instance with all controllers/services injected.
4. Runs the application using Uvicorn ASGI server.
"""

import uvicorn
from starlette.datastructures import Headers

from mentormatch.authentication.authentication_service import AuthenticationService
from mentormatch.common.errors import UnauthenticatedError
from mentormatch.dto.user_context_dto import UserContextDto
from mentormatch.utils.app_dependency_builder import AppDependencyBuilder

DEV_USER_HEADER = "X-Dev-User-Id"


class DevAuthenticationService(AuthenticationService):
    """
    Authentication service used exclusively in development mode.

    This service skips token validation and trusts the user ID sent in the
    X-Dev-User-Id header. It should never be used in production environments.
    """

    def authenticate_request(
        self, headers: Headers, cookies: dict[str, str] | None = None
    ) -> UserContextDto:
        raw_user_id = headers.get(DEV_USER_HEADER)
        if not raw_user_id or not raw_user_id.isdigit():
            raise UnauthenticatedError(f"Missing or invalid {DEV_USER_HEADER} header")

        return UserContextDto(user_id=int(raw_user_id))


builder = AppDependencyBuilder()

# Only use this in local development environments, never in production.
dev_auth_service = DevAuthenticationService(logger=builder.logger)
builder.fast_app_factory.authentication_service = dev_auth_service

app = builder.fast_app_factory.create_app()

if __name__ == "__main__":
    uvicorn.run(
        "mentormatch.fast_app_dev_runner:app", host="0.0.0.0", port=5001, reload=True
    )
