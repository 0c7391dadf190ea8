import os
from typing import Any

import jwt
from starlette.datastructures import Headers

from mentormatch.common.constants import ACCESS_TOKEN_COOKIE, DEFAULT_JWT_ALGORITHM
from mentormatch.common.environment_constants import JWT_ALGORITHM, JWT_SECRET
from mentormatch.common.errors import UnauthenticatedError
from mentormatch.dto.user_context_dto import UserContextDto


class AuthenticationService:
    """
    Service responsible for authenticating HTTP requests.

    Session tokens are HS256 JWTs issued by the external identity provider.
    They are read from the `access_token` cookie or, failing that, from an
    `Authorization: Bearer` header. The user ID is taken from the `userId`
    claim, or from `sub` when `userId` is absent.
    """

    def __init__(self, logger, jwt_secret: str | None = None, jwt_algorithm=None):
        """
        Initialize the AuthenticationService.

        Args:
            logger: A logger instance.
            jwt_secret (str | None): Shared signing secret. Defaults to JWT_SECRET.
            jwt_algorithm (str | None): Signing algorithm. Defaults to JWT_ALGORITHM,
                then HS256.
        """
        self.logger = logger
        self.jwt_secret = jwt_secret or os.getenv(JWT_SECRET)
        self.jwt_algorithm = (
            jwt_algorithm or os.getenv(JWT_ALGORITHM) or DEFAULT_JWT_ALGORITHM
        )

    def authenticate_request(
        self, headers: Headers, cookies: dict[str, str] | None = None
    ) -> UserContextDto:
        """
        Authenticate an incoming request.

        Args:
            headers (Headers): The request headers.
            cookies (dict[str, str] | None): The request cookies.

        Returns:
            UserContextDto: The caller's user ID and email.

        Raises:
            UnauthenticatedError: No token, or the token is invalid or expired.
        """
        token = (cookies or {}).get(ACCESS_TOKEN_COOKIE)

        if not token:
            auth_header = headers.get("Authorization")
            if auth_header and auth_header.startswith("Bearer "):
                token = auth_header.split(" ", 1)[1]

        if not token:
            raise UnauthenticatedError("Missing authentication credentials")

        return self._verify_token(token)

    def _verify_token(self, token: str) -> UserContextDto:
        if not self.jwt_secret:
            self.logger.error("[AuthenticationService] JWT secret is not configured")
            raise UnauthenticatedError("Authentication is not configured")

        try:
            payload = jwt.decode(
                token,
                key=self.jwt_secret,
                algorithms=[self.jwt_algorithm],
            )
        except jwt.InvalidTokenError as e:
            raise UnauthenticatedError(f"Token Invalid: {str(e)}") from e

        return self._build_context(payload)

    def _build_context(self, payload: dict[str, Any]) -> UserContextDto:
        """
        Build the UserContextDto from a decoded token payload.

        Args:
            payload (dict): Decoded JWT payload.

        Returns:
            UserContextDto: Contains user_id and primary_email.
        """
        raw_user_id = payload.get("userId", payload.get("sub"))
        try:
            user_id = int(raw_user_id)
        except (TypeError, ValueError) as e:
            raise UnauthenticatedError("Token does not identify a user") from e

        if user_id <= 0:
            raise UnauthenticatedError("Token does not identify a user")

        return UserContextDto(user_id=user_id, primary_email=payload.get("email"))
