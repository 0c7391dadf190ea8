from fastapi import APIRouter

from mentormatch.common.api_endpoints import MATCHMAKING_ENDPOINT
from mentormatch.common.fast_api_response_wrapper import api_response
from mentormatch.dto.match_dto import NoMatchesDto
from mentormatch.utils.permission_decorators import authenticate


class MatchmakingController:
    def __init__(self, matchmaking_service, database, retry_utils):
        """
        Initialize the MatchmakingController with required dependencies and register routes.

        Args:
            matchmaking_service (MatchmakingService): Ranking logic.
            database (Database): Database access object providing async session management.
            retry_utils (RetryUtils): Retry policy for read-only endpoints.
        """
        if not matchmaking_service:
            raise ValueError("MatchmakingService instance is required.")

        self.matchmaking_service = matchmaking_service
        self.database = database
        self.retry_utils = retry_utils

        self.router = APIRouter(tags=["matchmaking"])

        self.router.add_api_route(
            MATCHMAKING_ENDPOINT,
            endpoint=authenticate()(self.get_matches),
            methods=["GET"],
            response_model=None,
        )

    async def get_matches(self, user_id: int):
        """
        Retrieve the ranked matches of the current user.

        Return:
            API response whose data is the list of matches, or null together
            with a hint message when there is no match.
        """
        matches = await self.retry_utils.run_in_session(
            self.database,
            lambda session: self.matchmaking_service.get_matches(session, user_id),
        )

        if isinstance(matches, NoMatchesDto):
            return api_response(message=matches.hint, data=None)

        return api_response(message="Successfully fetched matches.", data=matches)
