from mentormatch.dto.connection_dto import ConnectionDto
from mentormatch.dto.public_profile_dto import PublicProfileDto


class ConnectionDetailDto(ConnectionDto):
    """A connection expanded with both participants' public profiles."""

    mentor: PublicProfileDto
    mentee: PublicProfileDto
