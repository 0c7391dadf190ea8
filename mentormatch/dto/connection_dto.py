from datetime import datetime
from mentormatch.dto.base_dto import BaseDto
from mentormatch.common.mentorship_enums import ConnectionStatus


class ConnectionDto(BaseDto):
    id: int
    mentor_id: int
    mentee_id: int
    initiator_id: int
    status: ConnectionStatus
    created_timestamp: datetime | None = None
    updated_timestamp: datetime | None = None
