from http import HTTPStatus
from mentormatch.common.errors import (
    ConflictError,
    ForbiddenError,
    MentorMatchError,
    NotFoundError,
    UnauthenticatedError,
)
from mentormatch.common.fast_api_response_wrapper import api_response
from mentormatch.common.logger import get_logger
from fastapi import Request, FastAPI
from fastapi.exceptions import RequestValidationError

logger = get_logger("http")


def resolve_status(exc: Exception) -> HTTPStatus:
    """Map an exception onto the HTTP status reported to the client."""
    match exc:
        case ValueError() | RequestValidationError():
            return HTTPStatus.BAD_REQUEST
        case UnauthenticatedError():
            return HTTPStatus.UNAUTHORIZED
        case ForbiddenError():
            return HTTPStatus.FORBIDDEN
        case NotFoundError():
            return HTTPStatus.NOT_FOUND
        case ConflictError():
            return HTTPStatus.CONFLICT
        case RuntimeError():
            return HTTPStatus.SERVICE_UNAVAILABLE
        case _:
            return HTTPStatus.INTERNAL_SERVER_ERROR


async def global_exception_handler(request: Request, exc: Exception):
    """
    Global exception handler used to convert Python exceptions into a unified API response.
    It also performs structured logging while preventing sensitive information from leaking
    to the client.
    """
    status = resolve_status(exc)

    # /api/<area>/... -> area
    parts = request.url.path.strip("/").split("/")
    area = parts[1] if len(parts) > 1 else "unknown"
    is_server_error = status >= 500

    log_msg = str(exc)

    if status == HTTPStatus.SERVICE_UNAVAILABLE:
        user_message = "Service temporarily unavailable. Please try again later."
    elif is_server_error:
        user_message = "Internal Server Error. Please contact support."
    elif isinstance(exc, RequestValidationError):
        first_error = exc.errors()[0]
        user_message = (
            f"Validation Error: {first_error.get('loc', [])[-1]} - "
            f"{first_error.get('msg')}"
        )
    else:
        user_message = str(exc)

    # Full stack traces are logged only for server-side errors.
    log_method = logger.error if is_server_error else logger.warning
    log_method(
        "[%s] %s on area [%s]: %s",
        "Server Error" if is_server_error else "Client Error",
        type(exc).__name__,
        area,
        log_msg,
        exc_info=is_server_error,
    )

    return api_response(
        success=False,
        message=user_message,
        status_code=status,
    )


def register_exception_handlers(app: FastAPI):
    """
    Registers the global exception handlers on the provided FastAPI application.
    This ensures domain errors and unexpected exceptions are consistently processed
    and returned in the standard API response format.

    Domain errors are registered explicitly so they are answered by the
    exception middleware instead of the server-error middleware, which would
    re-raise them after responding.
    """
    for exc_cls in (Exception, RequestValidationError, MentorMatchError, ValueError):
        app.add_exception_handler(exc_cls, global_exception_handler)
