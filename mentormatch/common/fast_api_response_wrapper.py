from fastapi.responses import JSONResponse
from fastapi.encoders import jsonable_encoder
from http import HTTPStatus
from typing import Any


def api_response(
    message: str,
    success: bool = True,
    data: Any = None,
    status_code: HTTPStatus = HTTPStatus.OK,
) -> JSONResponse:
    """
    Wrap a result in the envelope every MentorMatch endpoint answers with:

        {"success": bool, "message": str, "data": <payload or null>}

    `data` may be a DTO, a list of DTOs or a plain dict. DTOs go through
    `jsonable_encoder`, which emits their camelCase aliases.

    Example:
        return api_response(
            message="Connection request sent.",
            data=connection_dto,
            status_code=HTTPStatus.CREATED,
        )
    """
    return JSONResponse(
        status_code=status_code.value,
        content=jsonable_encoder(
            {"success": success, "message": message, "data": data}
        ),
    )
