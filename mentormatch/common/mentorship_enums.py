from enum import Enum


class UserRole(str, Enum):
    MENTOR = "MENTOR"
    MENTEE = "MENTEE"


class ConnectionStatus(str, Enum):
    PENDING = "PENDING"
    ACCEPTED = "ACCEPTED"
    DECLINED = "DECLINED"


class ConnectionDecision(str, Enum):
    ACCEPT = "ACCEPT"
    DECLINE = "DECLINE"


class ConnectionState(str, Enum):
    """Connection state between two users as seen by one of them."""

    NONE = "NONE"
    PENDING = "PENDING"
    CONNECTED = "CONNECTED"
    DECLINED = "DECLINED"


class NotificationType(str, Enum):
    CONNECTION_REQUEST = "CONNECTION_REQUEST"
    CONNECTION_ACCEPTED = "CONNECTION_ACCEPTED"
    CONNECTION_DECLINED = "CONNECTION_DECLINED"
