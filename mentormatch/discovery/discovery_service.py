import math

from sqlalchemy.ext.asyncio import AsyncSession

from mentormatch.common.errors import InvalidRequestError
from mentormatch.dto.discovery_dto import DiscoveryFilterDto, DiscoveryPageDto


def _normalize_substring(value: str | None) -> str | None:
    if value is None:
        return None
    return value.strip().lower() or None


class DiscoveryService:
    """
    Filtered, paginated listing of complete profiles.
    """

    def __init__(self, logger, profile_repository, profile_mapper):
        self.logger = logger
        self.profile_repository = profile_repository
        self.profile_mapper = profile_mapper

    async def discover(
        self,
        session: AsyncSession,
        filters: DiscoveryFilterDto,
        page: int,
        page_size: int,
    ) -> DiscoveryPageDto:
        """
        Retrieve one page of users matching the filters.

        Skill and interest filters are case-insensitive substring matches.
        Only complete profiles are listed, ordered by user ID.

        Args:
            session (AsyncSession): Active database async session.
            filters (DiscoveryFilterDto): Optional role, skill and interest filters.
            page (int): 1-based page number.
            page_size (int): Number of users per page.

        Returns:
            DiscoveryPageDto: The page items and pagination metadata.

        Raises:
            InvalidRequestError: `page` or `page_size` is not a positive integer.
        """
        if (
            not isinstance(page, int)
            or not isinstance(page_size, int)
            or page < 1
            or page_size < 1
        ):
            raise InvalidRequestError("Invalid page or limit parameters.")

        profiles, total = await self.profile_repository.search_complete_profiles(
            session=session,
            role=filters.role,
            skill_substring=_normalize_substring(filters.skill),
            interest_substring=_normalize_substring(filters.interest),
            offset=(page - 1) * page_size,
            limit=page_size,
        )

        self.logger.debug(
            "[DiscoveryService] %s of %s users returned for page %s", len(profiles), total, page
        )

        return DiscoveryPageDto(
            items=[
                self.profile_mapper.map_to_discovered_user_dto(profile)
                for profile in profiles
            ],
            total_count=total,
            total_pages=math.ceil(total / page_size),
            current_page=page,
            per_page=page_size,
        )
