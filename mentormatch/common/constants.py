from mentormatch.common.mentorship_enums import (
    ConnectionDecision,
    ConnectionState,
    ConnectionStatus,
    NotificationType,
    UserRole,
)

MATCH_LIMIT = 10
NO_MATCHES_HINT = (
    "No matches found, try expanding your profile with more skills or interests."
)

DEFAULT_PAGE = 1
DEFAULT_PAGE_SIZE = 10

# Column width of skill and interest names.
VOCABULARY_NAME_MAX_LENGTH = 100

UNNAMED_USER = "Unnamed User"
DEFAULT_AVATAR_URL = "https://www.pngall.com/wp-content/uploads/5/Profile-PNG-File.png"

ACCESS_TOKEN_COOKIE = "access_token"
DEFAULT_JWT_ALGORITHM = "HS256"

# The role a user is matched against. Roles outside the table have no counterpart.
COUNTERPART_ROLE: dict[UserRole, UserRole] = {
    UserRole.MENTOR: UserRole.MENTEE,
    UserRole.MENTEE: UserRole.MENTOR,
}

DECISION_TO_STATUS: dict[ConnectionDecision, ConnectionStatus] = {
    ConnectionDecision.ACCEPT: ConnectionStatus.ACCEPTED,
    ConnectionDecision.DECLINE: ConnectionStatus.DECLINED,
}

DECISION_TO_NOTIFICATION: dict[ConnectionDecision, NotificationType] = {
    ConnectionDecision.ACCEPT: NotificationType.CONNECTION_ACCEPTED,
    ConnectionDecision.DECLINE: NotificationType.CONNECTION_DECLINED,
}

STATUS_TO_STATE: dict[ConnectionStatus, ConnectionState] = {
    ConnectionStatus.PENDING: ConnectionState.PENDING,
    ConnectionStatus.ACCEPTED: ConnectionState.CONNECTED,
    ConnectionStatus.DECLINED: ConnectionState.DECLINED,
}
