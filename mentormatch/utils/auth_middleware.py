from http import HTTPStatus

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request

from mentormatch.common.api_endpoints import HEALTH_ENDPOINT
from mentormatch.common.errors import UnauthenticatedError
from mentormatch.common.fast_api_response_wrapper import api_response

PUBLIC_PATHS = frozenset({HEALTH_ENDPOINT, "/docs", "/redoc", "/openapi.json"})


class AuthMiddleware(BaseHTTPMiddleware):
    """
    Resolves the caller of every request before it reaches a controller.

    Token verification is delegated to `AuthenticationService`. On success the
    caller's `UserContextDto` is stored in `request.state.user` for the
    `authenticate()` decorator and the controllers.

    Health check and API documentation paths are served without credentials.

    Usage:
        app.add_middleware(AuthMiddleware, auth_service=auth_service)

    Exception Handling:
        - UnauthenticatedError: HTTP 401 with the error message.
        - Other exceptions: HTTP 401 with "Authentication failed".
    """

    def __init__(self, app, auth_service):
        super().__init__(app)
        self.auth_service = auth_service

    async def dispatch(self, request: Request, call_next):
        """Resolve the caller from the session token, or answer 401."""
        if request.url.path in PUBLIC_PATHS:
            return await call_next(request)

        try:
            user_context = self.auth_service.authenticate_request(
                request.headers, request.cookies
            )
            request.state.user = user_context

        except UnauthenticatedError as e:
            return api_response(
                success=False,
                message=str(e),
                status_code=HTTPStatus.UNAUTHORIZED,
            )
        except Exception:
            return api_response(
                success=False,
                message="Authentication failed",
                status_code=HTTPStatus.UNAUTHORIZED,
            )

        return await call_next(request)
