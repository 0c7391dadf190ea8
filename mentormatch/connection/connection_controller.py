from http import HTTPStatus

from fastapi import APIRouter, Query

from mentormatch.common.api_endpoints import (
    CONNECTION_ACCEPT_ENDPOINT,
    CONNECTION_DECLINE_ENDPOINT,
    CONNECTION_DELETE_ENDPOINT,
    CONNECTION_LIST_ENDPOINT,
    CONNECTION_PENDING_ENDPOINT,
    CONNECTION_SEND_ENDPOINT,
    CONNECTION_STATUS_ENDPOINT,
)
from mentormatch.common.fast_api_response_wrapper import api_response
from mentormatch.common.mentorship_enums import ConnectionDecision
from mentormatch.dto.connection_request_dto import (
    ConnectionActionDto,
    ConnectionCreateDto,
)
from mentormatch.utils.permission_decorators import authenticate


class ConnectionController:
    """
    FastAPI controller exposing the connection lifecycle.

    Write endpoints run once in a single session; the state machine itself
    answers a client retry with a conflict. Read endpoints are retried on
    transient datastore failures.
    """

    def __init__(self, connection_service, database, retry_utils):
        """
        Initialize the ConnectionController with its dependencies and register routes.

        Args:
            connection_service (ConnectionService): Connection lifecycle logic.
            database (Database): Database access object providing async session management.
            retry_utils (RetryUtils): Retry policy for read-only endpoints.
        """
        if not connection_service:
            raise ValueError("ConnectionService instance is required.")

        self.connection_service = connection_service
        self.database = database
        self.retry_utils = retry_utils

        self.router = APIRouter(tags=["connection"])

        self.router.add_api_route(
            CONNECTION_SEND_ENDPOINT,
            endpoint=authenticate()(self.send_request),
            methods=["POST"],
            response_model=None,
        )
        self.router.add_api_route(
            CONNECTION_ACCEPT_ENDPOINT,
            endpoint=authenticate()(self.accept_request),
            methods=["PATCH"],
            response_model=None,
        )
        self.router.add_api_route(
            CONNECTION_DECLINE_ENDPOINT,
            endpoint=authenticate()(self.decline_request),
            methods=["PATCH"],
            response_model=None,
        )
        self.router.add_api_route(
            CONNECTION_LIST_ENDPOINT,
            endpoint=authenticate()(self.get_connections),
            methods=["GET"],
            response_model=None,
        )
        self.router.add_api_route(
            CONNECTION_PENDING_ENDPOINT,
            endpoint=authenticate()(self.get_pending_requests),
            methods=["GET"],
            response_model=None,
        )
        self.router.add_api_route(
            CONNECTION_STATUS_ENDPOINT,
            endpoint=authenticate()(self.get_connection_status),
            methods=["GET"],
            response_model=None,
        )
        self.router.add_api_route(
            CONNECTION_DELETE_ENDPOINT,
            endpoint=authenticate()(self.delete_connection),
            methods=["DELETE"],
            response_model=None,
        )

    async def send_request(self, user_id: int, body: ConnectionCreateDto):
        """
        Send a connection request to another user.

        Returns 201 when a new request was created and 200 when a previously
        declined request was reopened.
        """
        async with self.database.session() as session:
            connection, created = await self.connection_service.request_connection(
                session, initiator_id=user_id, target_id=body.requested_user_id
            )

        if created:
            return api_response(
                message="Connection request sent.",
                data=connection,
                status_code=HTTPStatus.CREATED,
            )

        return api_response(message="Connection request re-sent.", data=connection)

    async def accept_request(self, user_id: int, body: ConnectionActionDto):
        """Accept a pending connection request."""
        return await self._respond(user_id, body, ConnectionDecision.ACCEPT)

    async def decline_request(self, user_id: int, body: ConnectionActionDto):
        """Decline a pending connection request."""
        return await self._respond(user_id, body, ConnectionDecision.DECLINE)

    async def _respond(
        self, user_id: int, body: ConnectionActionDto, decision: ConnectionDecision
    ):
        async with self.database.session() as session:
            connection = await self.connection_service.respond_to_request(
                session,
                responder_id=user_id,
                connection_id=body.connection_id,
                decision=decision,
            )

        return api_response(
            message=f"Connection request {connection.status.value.lower()}.",
            data=connection,
        )

    async def get_connections(self, user_id: int):
        """
        Retrieve every connection of the current user.

        Return:
            API response containing a list of connections, each with the
            mentor's and mentee's public profile.
        """
        connections = await self.retry_utils.run_in_session(
            self.database,
            lambda session: self.connection_service.list_connections(
                session, user_id
            ),
        )

        return api_response(
            message="Successfully fetched connections.", data=connections
        )

    async def get_pending_requests(self, user_id: int):
        """Retrieve the pending connection requests of the current user."""
        connections = await self.retry_utils.run_in_session(
            self.database,
            lambda session: self.connection_service.list_pending(session, user_id),
        )

        return api_response(
            message="Successfully fetched pending requests.", data=connections
        )

    async def get_connection_status(
        self,
        user_id: int,
        other_user_id: int = Query(..., alias="otherUserId", gt=0),
    ):
        """
        Retrieve the connection status between the current user and another user.

        Query Parameters:
            otherUserId (int): The user whose relationship is queried.
        """
        status = await self.retry_utils.run_in_session(
            self.database,
            lambda session: self.connection_service.get_status(
                session, user_id, other_user_id
            ),
        )

        return api_response(message="Successfully fetched status.", data=status)

    async def delete_connection(self, user_id: int, connection_id: int):
        """Delete a connection the current user participates in."""
        async with self.database.session() as session:
            await self.connection_service.delete_connection(
                session, user_id=user_id, connection_id=connection_id
            )

        return api_response(message="Connection deleted.")
