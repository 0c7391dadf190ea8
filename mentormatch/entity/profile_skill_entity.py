from sqlalchemy import ForeignKey
from sqlalchemy.orm import Mapped, mapped_column
from mentormatch.common.base import Base


class ProfileSkillEntity(Base):
    __tablename__ = "profile_skill"

    profile_id: Mapped[int] = mapped_column(
        ForeignKey("profile.profile_id", ondelete="CASCADE"), primary_key=True
    )
    skill_id: Mapped[int] = mapped_column(
        ForeignKey("skill.skill_id", ondelete="CASCADE"), primary_key=True, index=True
    )
