from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from mentormatch.common.constants import (
    DECISION_TO_NOTIFICATION,
    DECISION_TO_STATUS,
    STATUS_TO_STATE,
)
from mentormatch.common.errors import (
    ConflictError,
    ForbiddenError,
    InvalidRequestError,
    NotFoundError,
)
from mentormatch.common.mentorship_enums import (
    ConnectionDecision,
    ConnectionState,
    ConnectionStatus,
    NotificationType,
)
from mentormatch.connection.connection_roles import resolve_connection_slots
from mentormatch.dto.connection_detail_dto import ConnectionDetailDto
from mentormatch.dto.connection_dto import ConnectionDto
from mentormatch.dto.connection_status_dto import ConnectionStatusDto
from mentormatch.entity.connection_entity import ConnectionEntity

REQUEST_EXISTS_MESSAGE = "A connection request already exists."


class ConnectionService:
    """
    Orchestrates the mentor/mentee connection lifecycle.

    States and transitions:
        NONE -> PENDING            (request)
        PENDING -> ACCEPTED        (accept)
        PENDING -> DECLINED        (decline)
        DECLINED -> PENDING        (re-request, same row)
        any -> removed             (delete by a participant)

    Every transition is written with a conditional UPDATE or guarded by the
    unique (mentor_id, mentee_id) constraint, so concurrent requests for the
    same pair end in ConflictError instead of duplicate rows.
    """

    def __init__(
        self,
        logger,
        users_repository,
        profile_repository,
        connection_repository,
        notification_service,
        connection_mapper,
        profile_mapper,
    ):
        """
        Initializes the ConnectionService with required dependencies.

        Args:
            logger: The logger instance for logging messages.
            users_repository (UsersRepository): Identity store lookups.
            profile_repository (ProfileRepository): Profile lookups for list expansion.
            connection_repository (ConnectionRepository): The connection ledger.
            notification_service (NotificationService): Best-effort notification sink.
            connection_mapper (ConnectionMapper): Connection entity to DTO conversion.
            profile_mapper (ProfileMapper): Public profile projection.
        """
        self.logger = logger
        self.users_repository = users_repository
        self.profile_repository = profile_repository
        self.connection_repository = connection_repository
        self.notification_service = notification_service
        self.connection_mapper = connection_mapper
        self.profile_mapper = profile_mapper

    async def request_connection(
        self, session: AsyncSession, initiator_id: int, target_id: int
    ) -> tuple[ConnectionDto, bool]:
        """
        Send a connection request from one user to another.

        This method:
        1. Rejects self-connections and unknown users.
        2. Resolves the mentor and mentee slots from the two users' roles.
        3. Creates a PENDING connection, or reopens a DECLINED one in place.
        4. Notifies the target.

        Args:
            session (AsyncSession): Active database async session.
            initiator_id (int): The authenticated user sending the request.
            target_id (int): The user being asked.

        Returns:
            tuple[ConnectionDto, bool]
                - ConnectionDto: The pending connection.
                - bool: True if a new row was created, False if a declined one was reopened.

        Raises:
            InvalidRequestError: Self-connection or incompatible roles.
            NotFoundError: Either user does not exist.
            ConflictError: A pending or accepted connection already exists.
        """
        if initiator_id == target_id:
            raise InvalidRequestError("You cannot connect with yourself.")

        initiator = await self.users_repository.get_user_by_user_id(
            session=session, user_id=initiator_id
        )
        target = await self.users_repository.get_user_by_user_id(
            session=session, user_id=target_id
        )
        if initiator is None or target is None:
            raise NotFoundError("User not found.")

        mentor_id, mentee_id = resolve_connection_slots(
            initiator_id, initiator.role, target_id, target.role
        )

        existing = await self.connection_repository.get_connection_by_pair(
            session=session, mentor_id=mentor_id, mentee_id=mentee_id
        )

        if existing is None:
            connection = await self._create_pending(
                session, mentor_id, mentee_id, initiator_id
            )
            created = True
        elif existing.status == ConnectionStatus.DECLINED:
            connection = await self.connection_repository.update_status(
                session=session,
                connection_id=existing.connection_id,
                expected_status=ConnectionStatus.DECLINED,
                new_status=ConnectionStatus.PENDING,
                initiator_id=initiator_id,
            )
            if connection is None:
                raise ConflictError(REQUEST_EXISTS_MESSAGE)
            created = False
        else:
            raise ConflictError(REQUEST_EXISTS_MESSAGE)

        await self.notification_service.notify(
            session, target_id, NotificationType.CONNECTION_REQUEST
        )
        await session.commit()

        self.logger.info(
            "[ConnectionService] connection %s %s. Mentor: %s, Mentee: %s, Initiator: %s",
            connection.connection_id,
            "created" if created else "reopened",
            mentor_id,
            mentee_id,
            initiator_id,
        )
        return self.connection_mapper.map_to_connection_dto(connection), created

    async def _create_pending(
        self, session: AsyncSession, mentor_id: int, mentee_id: int, initiator_id: int
    ) -> ConnectionEntity:
        """Insert a PENDING row; a concurrent duplicate becomes ConflictError."""
        try:
            return await self.connection_repository.insert_connection(
                session,
                ConnectionEntity(
                    mentor_id=mentor_id,
                    mentee_id=mentee_id,
                    initiator_id=initiator_id,
                    status=ConnectionStatus.PENDING,
                ),
            )
        except IntegrityError as e:
            self.logger.warning(
                "[ConnectionService] duplicate request for mentor %s and mentee %s",
                mentor_id,
                mentee_id,
            )
            raise ConflictError(REQUEST_EXISTS_MESSAGE) from e

    async def respond_to_request(
        self,
        session: AsyncSession,
        responder_id: int,
        connection_id: int,
        decision: ConnectionDecision,
    ) -> ConnectionDto:
        """
        Accept or decline a pending connection.

        Args:
            session (AsyncSession): Active database async session.
            responder_id (int): The authenticated participant responding.
            connection_id (int): The connection to respond to.
            decision (ConnectionDecision): ACCEPT or DECLINE.

        Returns:
            ConnectionDto: The connection with its new status.

        Raises:
            NotFoundError: The connection does not exist.
            ForbiddenError: The responder is not a participant.
            ConflictError: The connection is not (or no longer) PENDING.
        """
        connection = await self._get_participant_connection(
            session, responder_id, connection_id
        )

        if connection.status != ConnectionStatus.PENDING:
            raise ConflictError(
                f"This connection request cannot be {DECISION_TO_STATUS[decision].value.lower()}."
            )

        updated = await self.connection_repository.update_status(
            session=session,
            connection_id=connection_id,
            expected_status=ConnectionStatus.PENDING,
            new_status=DECISION_TO_STATUS[decision],
        )
        if updated is None:
            raise ConflictError("This connection request has already been answered.")

        other_user_id = (
            updated.mentee_id if updated.mentor_id == responder_id else updated.mentor_id
        )
        await self.notification_service.notify(
            session, other_user_id, DECISION_TO_NOTIFICATION[decision]
        )
        await session.commit()

        self.logger.info(
            "[ConnectionService] connection %s %s by user %s",
            connection_id,
            updated.status.value,
            responder_id,
        )
        return self.connection_mapper.map_to_connection_dto(updated)

    async def list_connections(
        self, session: AsyncSession, user_id: int
    ) -> list[ConnectionDetailDto]:
        """Retrieve all connections of a user, expanded with both participants' profiles."""
        connections = await self.connection_repository.get_connections_for_user(
            session=session, user_id=user_id
        )
        return await self._expand(session, connections)

    async def list_pending(
        self, session: AsyncSession, user_id: int
    ) -> list[ConnectionDetailDto]:
        """Retrieve the PENDING connections of a user, expanded like list_connections."""
        connections = await self.connection_repository.get_connections_for_user(
            session=session, user_id=user_id, status=ConnectionStatus.PENDING
        )
        return await self._expand(session, connections)

    async def get_status(
        self, session: AsyncSession, user_id: int, other_user_id: int
    ) -> ConnectionStatusDto:
        """
        Describe the connection between the caller and another user.

        `is_receiver` is only set for PENDING connections and is True when the
        caller is the participant expected to respond.

        Args:
            session (AsyncSession): Active database async session.
            user_id (int): The authenticated user.
            other_user_id (int): The user the caller is looking at.

        Returns:
            ConnectionStatusDto: NONE, PENDING, CONNECTED or DECLINED.
        """
        connection = await self.connection_repository.get_connection_between(
            session=session, user_id=user_id, other_user_id=other_user_id
        )
        if connection is None:
            return ConnectionStatusDto(status=ConnectionState.NONE)

        is_receiver = None
        if connection.status == ConnectionStatus.PENDING:
            is_receiver = connection.initiator_id != user_id

        return ConnectionStatusDto(
            status=STATUS_TO_STATE[connection.status],
            is_receiver=is_receiver,
            connection_id=connection.connection_id,
        )

    async def delete_connection(
        self, session: AsyncSession, user_id: int, connection_id: int
    ) -> None:
        """
        Delete a connection the user participates in, whatever its status.

        Raises:
            NotFoundError: The connection does not exist.
            ForbiddenError: The user is not a participant.
        """
        connection = await self._get_participant_connection(
            session, user_id, connection_id
        )

        await self.connection_repository.delete_connection(session, connection)
        await session.commit()

        self.logger.info(
            "[ConnectionService] connection %s deleted by user %s",
            connection_id,
            user_id,
        )

    async def _get_participant_connection(
        self, session: AsyncSession, user_id: int, connection_id: int
    ) -> ConnectionEntity:
        connection = await self.connection_repository.get_connection_by_id(
            session=session, connection_id=connection_id
        )
        if connection is None:
            raise NotFoundError("Connection not found.")

        if user_id not in (connection.mentor_id, connection.mentee_id):
            raise ForbiddenError("You are not a participant of this connection.")

        return connection

    async def _expand(
        self, session: AsyncSession, connections: list[ConnectionEntity]
    ) -> list[ConnectionDetailDto]:
        if not connections:
            return []

        user_ids = sorted(
            {c.mentor_id for c in connections} | {c.mentee_id for c in connections}
        )
        profiles = {
            profile.user_id: profile
            for profile in await self.profile_repository.get_profiles_by_user_ids(
                session=session, user_ids=user_ids
            )
        }

        return [
            self.connection_mapper.map_to_connection_detail_dto(
                connection,
                mentor=self.profile_mapper.map_to_public_profile_dto(
                    connection.mentor_id, profiles.get(connection.mentor_id)
                ),
                mentee=self.profile_mapper.map_to_public_profile_dto(
                    connection.mentee_id, profiles.get(connection.mentee_id)
                ),
            )
            for connection in connections
        ]
