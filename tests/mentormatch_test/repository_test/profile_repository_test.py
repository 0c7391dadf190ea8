from mentormatch.common.mentorship_enums import UserRole
from mentormatch.entity.interest_entity import InterestEntity
from mentormatch.entity.profile_entity import ProfileEntity
from mentormatch.entity.skill_entity import SkillEntity
from mentormatch.repository.profile_repository import ProfileRepository
from tests.mentormatch_test.repository_test.base_repository_test_lib import (
    BaseRepositoryTestLib,
)


class TestProfileRepository(BaseRepositoryTestLib):
    async def asyncSetUp(self):
        await super().asyncSetUp()

        self.repo = ProfileRepository()

        self.python = SkillEntity(name="python")
        self.sql = SkillEntity(name="sql")
        self.rust = SkillEntity(name="rust")
        self.chess = InterestEntity(name="chess")
        self.hiking = InterestEntity(name="hiking")
        await self.insert_entities(
            [self.python, self.sql, self.rust, self.chess, self.hiking]
        )

        self.mentee = await self.insert_user("mentee@example.com", UserRole.MENTEE)
        self.mentor_a = await self.insert_user("a@example.com", UserRole.MENTOR)
        self.mentor_b = await self.insert_user("b@example.com", UserRole.MENTOR)
        self.mentor_c = await self.insert_user("c@example.com", UserRole.MENTOR)
        self.mentee_d = await self.insert_user("d@example.com", UserRole.MENTEE)

        self.mentee_profile = self._profile(
            self.mentee, "Mia", [self.python, self.sql], [self.chess]
        )
        # Shares a skill.
        self.profile_a = self._profile(self.mentor_a, "Ann", [self.python], [])
        # Shares nothing.
        self.profile_b = self._profile(self.mentor_b, "Ben", [self.rust], [self.hiking])
        # Shares an interest, profile incomplete.
        self.profile_c = self._profile(self.mentor_c, None, [], [self.chess])
        # Shares a skill, same role as the requester.
        self.profile_d = self._profile(self.mentee_d, "Dan", [self.python], [])

        await self.insert_entities(
            [
                self.mentee_profile,
                self.profile_a,
                self.profile_b,
                self.profile_c,
                self.profile_d,
            ]
        )

    def _profile(self, user, name, skills, interests):
        return ProfileEntity(
            user_id=user.user_id,
            user=user,
            name=name,
            bio=None,
            avatar_url=None,
            is_complete=bool(name),
            skills=skills,
            interests=interests,
        )

    async def test_get_profile_by_user_id(self):
        result = await self.repo.get_profile_by_user_id(
            self.session, self.mentee.user_id
        )

        self.assertEqual(result.profile_id, self.mentee_profile.profile_id)
        self.assertEqual([s.name for s in result.skills], ["python", "sql"])

    async def test_get_profile_by_user_id_missing(self):
        self.assertIsNone(await self.repo.get_profile_by_user_id(self.session, 9999))
        self.assertIsNone(await self.repo.get_profile_by_user_id(self.session, None))

    async def test_get_profiles_by_user_ids(self):
        result = await self.repo.get_profiles_by_user_ids(
            self.session, [self.mentor_a.user_id, self.mentor_b.user_id, 9999]
        )

        self.assertEqual(
            {p.user_id for p in result},
            {self.mentor_a.user_id, self.mentor_b.user_id},
        )

    async def test_get_profiles_by_user_ids_empty(self):
        self.assertEqual(await self.repo.get_profiles_by_user_ids(self.session, []), [])

    async def test_get_candidate_profiles(self):
        result = await self.repo.get_candidate_profiles(
            self.session,
            user_id=self.mentee.user_id,
            role=UserRole.MENTOR,
            skill_ids=[self.python.skill_id, self.sql.skill_id],
            interest_ids=[self.chess.interest_id],
        )

        self.assertEqual(
            [p.profile_id for p in result],
            [self.profile_a.profile_id, self.profile_c.profile_id],
        )

    async def test_get_candidate_profiles_excludes_requester(self):
        result = await self.repo.get_candidate_profiles(
            self.session,
            user_id=self.mentee.user_id,
            role=UserRole.MENTEE,
            skill_ids=[self.python.skill_id],
            interest_ids=[],
        )

        self.assertEqual([p.profile_id for p in result], [self.profile_d.profile_id])

    async def test_get_candidate_profiles_without_reference_ids(self):
        result = await self.repo.get_candidate_profiles(
            self.session,
            user_id=self.mentee.user_id,
            role=UserRole.MENTOR,
            skill_ids=[],
            interest_ids=[],
        )

        self.assertEqual(result, [])

    async def test_search_complete_profiles_no_filters(self):
        profiles, total = await self.repo.search_complete_profiles(
            self.session, None, None, None, offset=0, limit=10
        )

        self.assertEqual(total, 4)
        self.assertEqual(
            [p.user_id for p in profiles],
            [
                self.mentee.user_id,
                self.mentor_a.user_id,
                self.mentor_b.user_id,
                self.mentee_d.user_id,
            ],
        )

    async def test_search_complete_profiles_filters(self):
        profiles, total = await self.repo.search_complete_profiles(
            self.session, UserRole.MENTOR, "yth", None, offset=0, limit=10
        )

        self.assertEqual(total, 1)
        self.assertEqual([p.user_id for p in profiles], [self.mentor_a.user_id])

    async def test_search_complete_profiles_interest_filter(self):
        profiles, total = await self.repo.search_complete_profiles(
            self.session, None, None, "hik", offset=0, limit=10
        )

        self.assertEqual(total, 1)
        self.assertEqual([p.user_id for p in profiles], [self.mentor_b.user_id])

    async def test_search_complete_profiles_escapes_wildcards(self):
        profiles, total = await self.repo.search_complete_profiles(
            self.session, None, "%", None, offset=0, limit=10
        )

        self.assertEqual(total, 0)
        self.assertEqual(profiles, [])

    async def test_search_complete_profiles_pagination(self):
        profiles, total = await self.repo.search_complete_profiles(
            self.session, None, None, None, offset=2, limit=1
        )

        self.assertEqual(total, 4)
        self.assertEqual([p.user_id for p in profiles], [self.mentor_b.user_id])

    async def test_delete_profile(self):
        await self.repo.delete_profile(self.session, self.profile_b)

        result = await self.repo.get_profile_by_user_id(
            self.session, self.mentor_b.user_id
        )
        self.assertIsNone(result)
