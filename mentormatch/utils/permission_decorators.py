import functools
import inspect
from enum import Enum
from http import HTTPStatus

from starlette.requests import Request

from mentormatch.common.fast_api_response_wrapper import api_response


class ApiParamName(str, Enum):
    REQUEST = "request"
    CURRENT_USER = "current_user"
    USER_ID = "user_id"


INJECTED_PARAMS = frozenset(member.value for member in ApiParamName)


def _injected_values(request: Request, user) -> dict:
    return {
        ApiParamName.REQUEST.value: request,
        ApiParamName.CURRENT_USER.value: user,
        ApiParamName.USER_ID.value: user.user_id,
    }


def authenticate():
    """
    Require an authenticated caller on a FastAPI endpoint.

    `AuthMiddleware` stores a `UserContextDto` in `request.state.user`. The
    decorated endpoint answers 401 when it is missing. Otherwise the endpoint
    receives whichever of these parameters it declares by name:

    - `request`: the Starlette/FastAPI Request
    - `current_user`: the UserContextDto
    - `user_id`: `current_user.user_id`

    The endpoint's signature is rewritten for FastAPI: the injected names are
    hidden, so clients cannot supply them as query parameters, and a
    `request: Request` parameter is added in front.

    Example:
        self.router.add_api_route(
            CONNECTION_PENDING_ENDPOINT,
            endpoint=authenticate()(self.get_pending),
            methods=["GET"],
        )

        async def get_pending(self, user_id: int):
            ...
    """

    def decorator(func):
        sig = inspect.signature(func)
        declared = sig.parameters
        wanted = [name for name in declared if name in INJECTED_PARAMS]

        exposed_params = [
            param for name, param in declared.items() if name not in INJECTED_PARAMS
        ]
        exposed_params.insert(
            0,
            inspect.Parameter(
                ApiParamName.REQUEST.value,
                inspect.Parameter.POSITIONAL_OR_KEYWORD,
                annotation=Request,
            ),
        )

        @functools.wraps(func)
        async def wrapper(request: Request, *args, **kwargs):
            user = getattr(request.state, "user", None)
            if not user:
                return api_response(
                    success=False,
                    message="Unauthorized: User context missing",
                    status_code=HTTPStatus.UNAUTHORIZED,
                )

            kwargs.pop(ApiParamName.REQUEST.value, None)
            values = _injected_values(request, user)
            kwargs.update({name: values[name] for name in wanted})

            return await func(*args, **kwargs)

        wrapper.__signature__ = sig.replace(parameters=exposed_params)
        return wrapper

    return decorator
