from sqlalchemy.ext.asyncio import AsyncSession

from mentormatch.common.constants import COUNTERPART_ROLE, MATCH_LIMIT, NO_MATCHES_HINT
from mentormatch.common.errors import NotFoundError
from mentormatch.dto.match_dto import MatchDto, NoMatchesDto
from mentormatch.matchmaking.match_scorer import rank_candidates, score_candidate


class MatchmakingService:
    """
    Suggests counterpart users ranked by shared skills and interests.

    Roles are read from the identity store on every call, so a role change is
    picked up by the next request.
    """

    def __init__(self, logger, profile_repository, profile_mapper):
        """
        Args:
            logger: The logger instance for logging messages.
            profile_repository (ProfileRepository): Profile lookups and candidate pool.
            profile_mapper (ProfileMapper): Public profile projection.
        """
        self.logger = logger
        self.profile_repository = profile_repository
        self.profile_mapper = profile_mapper

    async def get_matches(
        self, session: AsyncSession, user_id: int
    ) -> list[MatchDto] | NoMatchesDto:
        """
        Build the ranked match list of a user.

        This method:
        1. Loads the requester's profile and role.
        2. Pre-filters profiles of the counterpart role sharing at least one
           skill or interest.
        3. Scores every candidate and keeps the best MATCH_LIMIT.

        Args:
            session (AsyncSession): Active database async session.
            user_id (int): The requester.

        Returns:
            list[MatchDto] | NoMatchesDto: Matches in descending score order, or
            a NoMatchesDto carrying a hint when nobody qualifies.

        Raises:
            NotFoundError: The requester has no profile.
        """
        profile = await self.profile_repository.get_profile_by_user_id(
            session=session, user_id=user_id
        )
        if profile is None:
            raise NotFoundError("Profile not found.")

        counterpart_role = COUNTERPART_ROLE.get(profile.user.role)
        if counterpart_role is None:
            self.logger.warning(
                "[MatchmakingService] user %s has no counterpart role", user_id
            )
            return NoMatchesDto(hint=NO_MATCHES_HINT)

        skill_ids = [skill.skill_id for skill in profile.skills]
        interest_ids = [interest.interest_id for interest in profile.interests]

        candidates = await self.profile_repository.get_candidate_profiles(
            session=session,
            user_id=user_id,
            role=counterpart_role,
            skill_ids=skill_ids,
            interest_ids=interest_ids,
        )

        ranked = rank_candidates(
            [
                (candidate, score_candidate(candidate, skill_ids, interest_ids))
                for candidate in candidates
            ],
            MATCH_LIMIT,
        )

        self.logger.info(
            "[MatchmakingService] %s candidates scored, %s returned. UserID: %s",
            len(candidates),
            len(ranked),
            user_id,
        )

        if not ranked:
            return NoMatchesDto(hint=NO_MATCHES_HINT)

        return [
            MatchDto(
                role=counterpart_role,
                score=score,
                profile=self.profile_mapper.map_to_public_profile_dto(
                    candidate.user_id, candidate
                ),
            )
            for candidate, score in ranked
        ]
