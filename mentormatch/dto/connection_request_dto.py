from pydantic import Field
from mentormatch.dto.base_request_dto import BaseRequestDto


class ConnectionCreateDto(BaseRequestDto):
    """Request body for sending a connection request."""

    requested_user_id: int = Field(gt=0)


class ConnectionActionDto(BaseRequestDto):
    """Request body for accepting or declining a connection request."""

    connection_id: int = Field(gt=0)
