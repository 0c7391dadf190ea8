from mentormatch.authentication.authentication_controller import (
    AuthenticationController,
)
from mentormatch.authentication.authentication_service import AuthenticationService
from mentormatch.common.database import Database
from mentormatch.common.logger import get_logger
from mentormatch.connection.connection_controller import ConnectionController
from mentormatch.connection.connection_mapper import ConnectionMapper
from mentormatch.connection.connection_service import ConnectionService
from mentormatch.discovery.discovery_controller import DiscoveryController
from mentormatch.discovery.discovery_service import DiscoveryService
from mentormatch.matchmaking.matchmaking_controller import MatchmakingController
from mentormatch.matchmaking.matchmaking_service import MatchmakingService
from mentormatch.notification.notification_service import NotificationService
from mentormatch.profile.profile_controller import ProfileController
from mentormatch.profile.profile_mapper import ProfileMapper
from mentormatch.profile.profile_service import ProfileService
from mentormatch.repository.connection_repository import ConnectionRepository
from mentormatch.repository.notification_repository import NotificationRepository
from mentormatch.repository.profile_repository import ProfileRepository
from mentormatch.repository.users_repository import UsersRepository
from mentormatch.repository.vocabulary_repository import (
    InterestRepository,
    SkillRepository,
)
from mentormatch.utils.fast_app_factory import FastAppFactory
from mentormatch.utils.retry_utils import RetryUtils


class AppDependencyBuilder:
    """
    A builder class responsible for constructing all service and controller dependencies
    used throughout the application.

    This class acts as a centralized place for wiring together:
    - Logging, retry policy and the database
    - Repositories and mappers
    - Business services (profile, connection, matchmaking, discovery)
    - HTTP API controllers and the FastAPI app factory

    Example:
        builder = AppDependencyBuilder()
        app = builder.fast_app_factory.create_app()
    """

    def __init__(self, database: Database | None = None):
        self.logger = get_logger()
        self.retry_utils = RetryUtils()
        self.database = database or Database()

        self.users_repository = UsersRepository()
        self.profile_repository = ProfileRepository()
        self.skill_repository = SkillRepository()
        self.interest_repository = InterestRepository()
        self.connection_repository = ConnectionRepository()
        self.notification_repository = NotificationRepository()

        self.profile_mapper = ProfileMapper()
        self.connection_mapper = ConnectionMapper()

        self.notification_service = NotificationService(
            logger=self.logger,
            notification_repository=self.notification_repository,
        )
        self.profile_service = ProfileService(
            logger=self.logger,
            users_repository=self.users_repository,
            profile_repository=self.profile_repository,
            skill_repository=self.skill_repository,
            interest_repository=self.interest_repository,
            profile_mapper=self.profile_mapper,
        )
        self.connection_service = ConnectionService(
            logger=self.logger,
            users_repository=self.users_repository,
            profile_repository=self.profile_repository,
            connection_repository=self.connection_repository,
            notification_service=self.notification_service,
            connection_mapper=self.connection_mapper,
            profile_mapper=self.profile_mapper,
        )
        self.matchmaking_service = MatchmakingService(
            logger=self.logger,
            profile_repository=self.profile_repository,
            profile_mapper=self.profile_mapper,
        )
        self.discovery_service = DiscoveryService(
            logger=self.logger,
            profile_repository=self.profile_repository,
            profile_mapper=self.profile_mapper,
        )
        self.authentication_service = AuthenticationService(logger=self.logger)

        self.authentication_controller = AuthenticationController(
            users_repository=self.users_repository,
            database=self.database,
            retry_utils=self.retry_utils,
        )
        self.profile_controller = ProfileController(
            profile_service=self.profile_service,
            database=self.database,
            retry_utils=self.retry_utils,
        )
        self.connection_controller = ConnectionController(
            connection_service=self.connection_service,
            database=self.database,
            retry_utils=self.retry_utils,
        )
        self.matchmaking_controller = MatchmakingController(
            matchmaking_service=self.matchmaking_service,
            database=self.database,
            retry_utils=self.retry_utils,
        )
        self.discovery_controller = DiscoveryController(
            discovery_service=self.discovery_service,
            database=self.database,
            retry_utils=self.retry_utils,
        )

        self.fast_app_factory = FastAppFactory(
            database=self.database,
            authentication_service=self.authentication_service,
            authentication_controller=self.authentication_controller,
            profile_controller=self.profile_controller,
            connection_controller=self.connection_controller,
            matchmaking_controller=self.matchmaking_controller,
            discovery_controller=self.discovery_controller,
        )
