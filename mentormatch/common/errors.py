class MentorMatchError(Exception):
    """Root of every domain error raised by the matchmaking services."""


class InvalidRequestError(MentorMatchError, ValueError):
    """Malformed or contradictory input, e.g. a self-connection or bad paging."""


class UnauthenticatedError(MentorMatchError):
    """Missing or invalid identity context."""


class ForbiddenError(MentorMatchError):
    """The caller is authenticated but not a party to the resource."""


class NotFoundError(MentorMatchError):
    """A referenced user, profile or connection does not exist."""


class ConflictError(MentorMatchError):
    """The operation violates the connection state machine or a uniqueness rule."""


class TransientError(MentorMatchError, RuntimeError):
    """The datastore is temporarily unavailable."""
