from mentormatch.common.errors import InvalidRequestError
from mentormatch.common.mentorship_enums import UserRole

# (initiator role, target role) -> whether the initiator takes the mentor slot.
_INITIATOR_IS_MENTOR: dict[tuple[UserRole, UserRole], bool] = {
    (UserRole.MENTOR, UserRole.MENTEE): True,
    (UserRole.MENTEE, UserRole.MENTOR): False,
}


def resolve_connection_slots(
    initiator_id: int,
    initiator_role: UserRole,
    target_id: int,
    target_role: UserRole,
) -> tuple[int, int]:
    """
    Place two users into the (mentor_id, mentee_id) slots of a connection.

    The result depends only on the roles, never on who initiated, so the
    same pair always resolves to the same ordered key.

    Returns:
        tuple[int, int]: (mentor_id, mentee_id).

    Raises:
        InvalidRequestError: The pair is not exactly one mentor and one mentee.
    """
    initiator_is_mentor = _INITIATOR_IS_MENTOR.get((initiator_role, target_role))
    if initiator_is_mentor is None:
        raise InvalidRequestError(
            "Roles incompatible: mentors can only connect with mentees and vice versa."
        )

    if initiator_is_mentor:
        return initiator_id, target_id
    return target_id, initiator_id
