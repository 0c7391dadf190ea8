from sqlalchemy import Integer, String
from sqlalchemy.orm import Mapped, mapped_column
from mentormatch.common.base import Base
from mentormatch.common.constants import VOCABULARY_NAME_MAX_LENGTH


class SkillEntity(Base):
    __tablename__ = "skill"

    skill_id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)

    # Lower-cased, stripped name.
    name: Mapped[str] = mapped_column(String(VOCABULARY_NAME_MAX_LENGTH), unique=True)
