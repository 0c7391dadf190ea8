from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession
from mentormatch.entity.interest_entity import InterestEntity
from mentormatch.entity.skill_entity import SkillEntity


class VocabularyRepository:
    """
    Repository for a global, de-duplicated name vocabulary (skills or interests).

    Names are expected to be normalized by the caller; the table carries a
    unique constraint on the name column.
    """

    def __init__(self, entity_cls: type[SkillEntity] | type[InterestEntity]):
        """
        Args:
            entity_cls: The vocabulary entity class, SkillEntity or InterestEntity.
        """
        self.entity_cls = entity_cls

    async def get_by_names(self, session: AsyncSession, names: list[str]) -> list:
        """Retrieve the vocabulary entries whose name is in `names`."""
        if not names:
            return []

        result = await session.execute(
            select(self.entity_cls).where(self.entity_cls.name.in_(names))
        )
        return list(result.scalars().all())

    async def find_or_create(self, session: AsyncSession, names: list[str]) -> list:
        """
        Return one entry per name, creating the missing ones.

        Each insert runs in its own savepoint. If another transaction created
        the same name first, the unique constraint fires, the savepoint is
        rolled back and the existing row is read instead.

        Args:
            session (AsyncSession): The active async database session.
            names (list[str]): Normalized, de-duplicated names.

        Returns:
            list: Entities in the same order as `names`.
        """
        found = {
            entity.name: entity for entity in await self.get_by_names(session, names)
        }

        for name in names:
            if name in found:
                continue

            entity = self.entity_cls(name=name)
            try:
                async with session.begin_nested():
                    session.add(entity)
            except IntegrityError:
                entity = (await self.get_by_names(session, [name]))[0]

            found[name] = entity

        return [found[name] for name in names]


class SkillRepository(VocabularyRepository):
    def __init__(self):
        super().__init__(SkillEntity)


class InterestRepository(VocabularyRepository):
    def __init__(self):
        super().__init__(InterestEntity)
