from dataclasses import dataclass


@dataclass
class UserContextDto:
    user_id: int
    primary_email: str | None = None
