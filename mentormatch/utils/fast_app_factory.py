import os
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from mentormatch.common.api_endpoints import HEALTH_ENDPOINT
from mentormatch.common.environment_constants import CORS_ORIGINS
from mentormatch.common.fast_api_error_handler import register_exception_handlers
from mentormatch.utils.auth_middleware import AuthMiddleware


class FastAppFactory:
    """
    Factory class for creating and configuring a FastAPI application.

    This class encapsulates the setup of the FastAPI app, including
    routing, middleware, exception handling and shutdown of the database pool.
    """

    def __init__(
        self,
        database,
        authentication_service,
        authentication_controller,
        profile_controller,
        connection_controller,
        matchmaking_controller,
        discovery_controller,
    ):
        """
        Initialize the factory.

        Args:
            database: Database whose engine is disposed on shutdown.
            authentication_service: AuthenticationService instance used by middleware to validate requests.
            authentication_controller: Controller serving the current identity.
            profile_controller: Controller for the caller's own profile.
            connection_controller: Controller for the connection lifecycle.
            matchmaking_controller: Controller for ranked match suggestions.
            discovery_controller: Controller for the filtered user listing.
        """
        self.database = database
        self.authentication_service = authentication_service
        self.authentication_controller = authentication_controller
        self.profile_controller = profile_controller
        self.connection_controller = connection_controller
        self.matchmaking_controller = matchmaking_controller
        self.discovery_controller = discovery_controller

    def create_app(self, is_prod: bool = False) -> FastAPI:
        """
        Create and configure a FastAPI application instance.

        This method performs the following setup steps:
            1. Initializes the FastAPI application.
                - In production mode (is_prod=True), disables Swagger UI, ReDoc,
                    and the OpenAPI schema endpoints.
            2. Registers global exception handlers.
            3. Adds authentication middleware, wrapped by CORS middleware when
               CORS_ORIGINS is set.
            4. Registers the controller routes under the '/api' prefix.
            5. Adds a simple health check endpoint at '/fastapi/health'.

        Args:
            is_prod (bool): Whether the application is running in production mode.
                If True, API documentation and schema endpoints are disabled.
                Defaults to False.

        Returns:
            FastAPI: A fully configured FastAPI application instance.
        """
        database = self.database

        @asynccontextmanager
        async def lifespan(app: FastAPI):
            yield
            await database.close()

        app = FastAPI(
            docs_url=None if is_prod else "/docs",
            redoc_url=None if is_prod else "/redoc",
            openapi_url=None if is_prod else "/openapi.json",
            lifespan=lifespan,
        )

        register_exception_handlers(app)

        app.add_middleware(AuthMiddleware, auth_service=self.authentication_service)

        # Added last so it runs first and answers preflight requests unauthenticated.
        origins = [
            origin.strip()
            for origin in os.getenv(CORS_ORIGINS, "").split(",")
            if origin.strip()
        ]
        if origins:
            app.add_middleware(
                CORSMiddleware,
                allow_origins=origins,
                allow_credentials=True,
                allow_methods=["*"],
                allow_headers=["*"],
            )

        app.include_router(self.authentication_controller.router, prefix="/api")
        app.include_router(self.profile_controller.router, prefix="/api")
        app.include_router(self.connection_controller.router, prefix="/api")
        app.include_router(self.matchmaking_controller.router, prefix="/api")
        app.include_router(self.discovery_controller.router, prefix="/api")

        @app.get(HEALTH_ENDPOINT)
        def health_check():
            """
            Health check endpoint.

            Returns a simple JSON response to verify that the
            application is running.
            """
            return {"status": "ok"}

        return app
