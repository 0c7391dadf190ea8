from mentormatch.dto.connection_detail_dto import ConnectionDetailDto
from mentormatch.dto.connection_dto import ConnectionDto
from mentormatch.dto.public_profile_dto import PublicProfileDto
from mentormatch.entity.connection_entity import ConnectionEntity


class ConnectionMapper:
    """Mapper converting connection entities into DTOs."""

    def map_to_connection_dto(self, entity: ConnectionEntity) -> ConnectionDto:
        return ConnectionDto(
            id=entity.connection_id,
            mentor_id=entity.mentor_id,
            mentee_id=entity.mentee_id,
            initiator_id=entity.initiator_id,
            status=entity.status,
            created_timestamp=entity.created_timestamp,
            updated_timestamp=entity.updated_timestamp,
        )

    def map_to_connection_detail_dto(
        self,
        entity: ConnectionEntity,
        mentor: PublicProfileDto,
        mentee: PublicProfileDto,
    ) -> ConnectionDetailDto:
        return ConnectionDetailDto(
            id=entity.connection_id,
            mentor_id=entity.mentor_id,
            mentee_id=entity.mentee_id,
            initiator_id=entity.initiator_id,
            status=entity.status,
            created_timestamp=entity.created_timestamp,
            updated_timestamp=entity.updated_timestamp,
            mentor=mentor,
            mentee=mentee,
        )
