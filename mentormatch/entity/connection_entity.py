from datetime import datetime, timezone
from sqlalchemy import (
    CheckConstraint,
    DateTime,
    Enum as SAEnum,
    ForeignKey,
    Integer,
    UniqueConstraint,
)
from sqlalchemy.orm import Mapped, mapped_column
from mentormatch.common.base import Base
from mentormatch.common.mentorship_enums import ConnectionStatus


class ConnectionEntity(Base):
    __tablename__ = "connection"

    connection_id: Mapped[int] = mapped_column(
        Integer, primary_key=True, autoincrement=True
    )
    mentor_id: Mapped[int] = mapped_column(
        ForeignKey("users.user_id", ondelete="CASCADE"), index=True
    )
    mentee_id: Mapped[int] = mapped_column(
        ForeignKey("users.user_id", ondelete="CASCADE"), index=True
    )
    # The participant who sent the latest request; the other one responds.
    initiator_id: Mapped[int] = mapped_column(
        ForeignKey("users.user_id", ondelete="CASCADE")
    )
    status: Mapped[ConnectionStatus] = mapped_column(
        SAEnum(ConnectionStatus, name="connection_status", native_enum=False)
    )
    created_timestamp: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=lambda: datetime.now(timezone.utc)
    )
    updated_timestamp: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=lambda: datetime.now(timezone.utc)
    )

    __table_args__ = (
        CheckConstraint("mentor_id <> mentee_id", name="check_different_ids"),
        UniqueConstraint("mentor_id", "mentee_id", name="uq_connection_pair"),
    )
