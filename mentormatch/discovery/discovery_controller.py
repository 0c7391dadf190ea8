from fastapi import APIRouter, Query

from mentormatch.common.api_endpoints import DISCOVERY_ENDPOINT
from mentormatch.common.constants import DEFAULT_PAGE, DEFAULT_PAGE_SIZE
from mentormatch.common.fast_api_response_wrapper import api_response
from mentormatch.common.mentorship_enums import UserRole
from mentormatch.dto.discovery_dto import DiscoveryFilterDto
from mentormatch.utils.permission_decorators import authenticate


class DiscoveryController:
    def __init__(self, discovery_service, database, retry_utils):
        """
        Initialize the DiscoveryController with required dependencies and register routes.

        Args:
            discovery_service (DiscoveryService): Discovery query logic.
            database (Database): Database access object providing async session management.
            retry_utils (RetryUtils): Retry policy for read-only endpoints.
        """
        if not discovery_service:
            raise ValueError("DiscoveryService instance is required.")

        self.discovery_service = discovery_service
        self.database = database
        self.retry_utils = retry_utils

        self.router = APIRouter(tags=["discovery"])

        self.router.add_api_route(
            DISCOVERY_ENDPOINT,
            endpoint=authenticate()(self.discover_users),
            methods=["GET"],
            response_model=None,
        )

    async def discover_users(
        self,
        role: UserRole | None = Query(None),
        skills: str | None = Query(None),
        interests: str | None = Query(None),
        page: int = Query(DEFAULT_PAGE),
        limit: int = Query(DEFAULT_PAGE_SIZE),
    ):
        """
        List complete profiles, optionally filtered by role, skill and interest.

        Query Parameters:
            role (UserRole | None): MENTOR or MENTEE.
            skills (str | None): Case-insensitive substring of a skill name.
            interests (str | None): Case-insensitive substring of an interest name.
            page (int): 1-based page number, defaults to 1.
            limit (int): Page size, defaults to 10.
        """
        filters = DiscoveryFilterDto(role=role, skill=skills, interest=interests)

        result = await self.retry_utils.run_in_session(
            self.database,
            lambda session: self.discovery_service.discover(
                session, filters, page, limit
            ),
        )

        return api_response(message="Successfully fetched users.", data=result)
