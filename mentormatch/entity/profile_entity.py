from datetime import datetime, timezone
from sqlalchemy import Boolean, DateTime, ForeignKey, Integer, String
from sqlalchemy.orm import Mapped, mapped_column, relationship
from mentormatch.common.base import Base
from mentormatch.entity.users_entity import UsersEntity
from mentormatch.entity.skill_entity import SkillEntity
from mentormatch.entity.interest_entity import InterestEntity
from mentormatch.entity.profile_skill_entity import ProfileSkillEntity
from mentormatch.entity.profile_interest_entity import ProfileInterestEntity


class ProfileEntity(Base):
    __tablename__ = "profile"

    profile_id: Mapped[int] = mapped_column(
        Integer, primary_key=True, autoincrement=True
    )
    user_id: Mapped[int] = mapped_column(
        ForeignKey("users.user_id", ondelete="CASCADE"), index=True, unique=True
    )
    name: Mapped[str | None] = mapped_column(String)
    bio: Mapped[str | None] = mapped_column(String)
    avatar_url: Mapped[str | None] = mapped_column(String)
    is_complete: Mapped[bool] = mapped_column(Boolean, default=False)
    updated_timestamp: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=lambda: datetime.now(timezone.utc)
    )

    user: Mapped[UsersEntity] = relationship(lazy="joined")

    # Join rows are written only through these collections.
    skills: Mapped[list[SkillEntity]] = relationship(
        secondary=ProfileSkillEntity.__table__,
        lazy="selectin",
        order_by=SkillEntity.name,
    )
    interests: Mapped[list[InterestEntity]] = relationship(
        secondary=ProfileInterestEntity.__table__,
        lazy="selectin",
        order_by=InterestEntity.name,
    )
