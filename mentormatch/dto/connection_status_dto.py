from mentormatch.dto.base_dto import BaseDto
from mentormatch.common.mentorship_enums import ConnectionState


class ConnectionStatusDto(BaseDto):
    status: ConnectionState
    is_receiver: bool | None = None
    connection_id: int | None = None
