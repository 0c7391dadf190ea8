from mentormatch.entity.interest_entity import InterestEntity
from mentormatch.entity.skill_entity import SkillEntity
from mentormatch.repository.vocabulary_repository import (
    InterestRepository,
    SkillRepository,
)
from tests.mentormatch_test.repository_test.base_repository_test_lib import (
    BaseRepositoryTestLib,
)


class TestVocabularyRepository(BaseRepositoryTestLib):
    async def asyncSetUp(self):
        await super().asyncSetUp()

        self.skill_repo = SkillRepository()
        self.interest_repo = InterestRepository()

        self.python = SkillEntity(name="python")
        await self.insert_entities([self.python, InterestEntity(name="chess")])

    async def test_get_by_names(self):
        result = await self.skill_repo.get_by_names(self.session, ["python", "go"])

        self.assertEqual([s.name for s in result], ["python"])

    async def test_get_by_names_empty(self):
        self.assertEqual(await self.skill_repo.get_by_names(self.session, []), [])

    async def test_find_or_create_reuses_and_creates(self):
        result = await self.skill_repo.find_or_create(
            self.session, ["go", "python"]
        )

        self.assertEqual([s.name for s in result], ["go", "python"])
        self.assertIs(result[1], self.python)
        self.assertIsNotNone(result[0].skill_id)

        stored = await self.skill_repo.get_by_names(self.session, ["go"])
        self.assertEqual(len(stored), 1)

    async def test_find_or_create_is_per_vocabulary(self):
        result = await self.interest_repo.find_or_create(
            self.session, ["python", "chess"]
        )

        self.assertTrue(all(isinstance(i, InterestEntity) for i in result))
        self.assertEqual([i.name for i in result], ["python", "chess"])
