"""
ASGI entry point for the MentorMatch API.

This script performs the following steps:
1. Builds application dependencies via AppDependencyBuilder.
2. Creates the FastAPI application instance with injected dependencies and controllers
   using the fast_app_factory.
3. The resulting app instance is a native ASGI application.

Example usage:
    uvicorn mentormatch.prod_runner:asgi_app --host 0.0.0.0 --port 5001
"""

from mentormatch.utils.app_dependency_builder import AppDependencyBuilder

builder = AppDependencyBuilder()

asgi_app = builder.fast_app_factory.create_app(is_prod=True)
