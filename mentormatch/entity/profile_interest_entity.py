from sqlalchemy import ForeignKey
from sqlalchemy.orm import Mapped, mapped_column
from mentormatch.common.base import Base


class ProfileInterestEntity(Base):
    __tablename__ = "profile_interest"

    profile_id: Mapped[int] = mapped_column(
        ForeignKey("profile.profile_id", ondelete="CASCADE"), primary_key=True
    )
    interest_id: Mapped[int] = mapped_column(
        ForeignKey("interest.interest_id", ondelete="CASCADE"),
        primary_key=True,
        index=True,
    )
