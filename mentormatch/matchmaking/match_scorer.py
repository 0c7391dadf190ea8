from collections.abc import Iterable

from mentormatch.common.constants import MATCH_LIMIT
from mentormatch.entity.profile_entity import ProfileEntity


def score_candidate(
    candidate: ProfileEntity,
    reference_skill_ids: Iterable[int],
    reference_interest_ids: Iterable[int],
) -> int:
    """
    Count the skills and interests a candidate shares with the requester.

    Each shared skill and each shared interest adds one point; there is no
    weighting or normalization.

    Args:
        candidate (ProfileEntity): The candidate profile with its skills and interests loaded.
        reference_skill_ids (Iterable[int]): The requester's skill IDs.
        reference_interest_ids (Iterable[int]): The requester's interest IDs.

    Returns:
        int: The number of shared skills plus the number of shared interests.
    """
    skill_ids = set(reference_skill_ids)
    interest_ids = set(reference_interest_ids)

    return sum(1 for skill in candidate.skills if skill.skill_id in skill_ids) + sum(
        1 for interest in candidate.interests if interest.interest_id in interest_ids
    )


def rank_candidates(
    scored: list[tuple[ProfileEntity, int]], limit: int = MATCH_LIMIT
) -> list[tuple[ProfileEntity, int]]:
    """
    Order scored candidates by descending score and keep the top `limit`.

    The sort is stable: candidates with equal scores keep their pool order.
    """
    return sorted(scored, key=lambda pair: pair[1], reverse=True)[:limit]
