"""Unit tests for QuestionService."""

from datetime import datetime, timedelta
from uuid import uuid4

import pytest

from forum.domain.error import AuthorizationError, NotFoundError, ValidationError
from forum.domain.model import Question
from forum.domain.repository import (
    AnswerRepository,
    ProfileRepository,
    QuestionRepository,
    VoteRepository,
)
from forum.domain.service import AnswerService, QuestionService, VoteService
from forum.domain.value import (
    QuestionFilter,
    QuestionId,
    TagName,
    UserId,
    UserRole,
    VoteTarget,
    VoteType,
)
from tests.conftest import make_profile
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


class TestCreateQuestion:
    """Tests for create_question."""

    @pytest.mark.asyncio
    async def test_create_question_starts_with_zero_aggregates(self, unit_env):
        question_service = await unit_env.get(QuestionService)
        author = await make_profile(await unit_env.get(ProfileRepository))

        question = await question_service.create_question(
            author.user_id, "  Title  ", "  Body  ", ["Python"]
        )

        assert question.title == "Title"
        assert question.body == "Body"
        assert question.upvote_count == 0
        assert question.downvote_count == 0
        assert question.answer_count == 0
        assert question.has_accepted_answer is False

    @pytest.mark.asyncio
    async def test_tags_are_normalized_and_deduplicated(self, unit_env):
        question_service = await unit_env.get(QuestionService)

        tags = question_service.normalize_tags([" Python ", "python", "", "SQL"])

        assert tags == [TagName("python"), TagName("sql")]

    @pytest.mark.asyncio
    async def test_too_many_tags_raises(self, unit_env):
        question_service = await unit_env.get(QuestionService)
        author = await make_profile(await unit_env.get(ProfileRepository))

        with pytest.raises(ValidationError, match="at most 5 tags"):
            await question_service.create_question(
                author.user_id, "T", "B", ["a", "b", "c", "d", "e", "f"]
            )

    @pytest.mark.asyncio
    async def test_tag_with_whitespace_raises(self, unit_env):
        question_service = await unit_env.get(QuestionService)

        with pytest.raises(ValidationError, match="Invalid tag"):
            question_service.normalize_tags(["two words"])

    @pytest.mark.asyncio
    async def test_blank_title_raises(self, unit_env):
        question_service = await unit_env.get(QuestionService)

        with pytest.raises(ValidationError):
            await question_service.create_question(UserId(uuid4()), " ", "B", [])


class TestListQuestions:
    """Tests for list_questions filters and ordering."""

    async def _seed(self, unit_env) -> list[Question]:
        question_repo = await unit_env.get(QuestionRepository)
        user_id = UserId(uuid4())
        base = datetime(2024, 1, 1)
        seeds = [
            ("Oldest question", ["python"], 5, 1, 0),
            ("Middle question", ["sql"], 9, 0, 2),
            ("Newest question", ["python", "sql"], 1, 7, 0),
        ]
        questions = []
        for i, (title, tags, up, down, answers) in enumerate(seeds):
            questions.append(
                await question_repo.save(
                    Question(
                        id=QuestionId(uuid4()),
                        title=title,
                        body=f"About {title.lower()}",
                        tags=[TagName(t) for t in tags],
                        user_id=user_id,
                        upvote_count=up,
                        downvote_count=down,
                        answer_count=answers,
                        created_at=base + timedelta(days=i),
                        updated_at=base + timedelta(days=i),
                    )
                )
            )
        return questions

    @pytest.mark.asyncio
    async def test_newest_first_by_default(self, unit_env):
        question_service = await unit_env.get(QuestionService)
        oldest, middle, newest = await self._seed(unit_env)

        result = await question_service.list_questions()

        assert [q.id for q in result] == [newest.id, middle.id, oldest.id]

    @pytest.mark.asyncio
    async def test_oldest_filter(self, unit_env):
        question_service = await unit_env.get(QuestionService)
        oldest, middle, newest = await self._seed(unit_env)

        result = await question_service.list_questions(filter=QuestionFilter.OLDEST)

        assert [q.id for q in result] == [oldest.id, middle.id, newest.id]

    @pytest.mark.asyncio
    async def test_most_voted_orders_by_upvotes(self, unit_env):
        question_service = await unit_env.get(QuestionService)
        oldest, middle, newest = await self._seed(unit_env)

        result = await question_service.list_questions(
            filter=QuestionFilter.MOST_VOTED
        )

        assert [q.id for q in result] == [middle.id, oldest.id, newest.id]

    @pytest.mark.asyncio
    async def test_unanswered_filter(self, unit_env):
        question_service = await unit_env.get(QuestionService)
        oldest, _, newest = await self._seed(unit_env)

        result = await question_service.list_questions(
            filter=QuestionFilter.UNANSWERED
        )

        assert [q.id for q in result] == [newest.id, oldest.id]

    @pytest.mark.asyncio
    async def test_tag_and_search_filters(self, unit_env):
        question_service = await unit_env.get(QuestionService)
        _, middle, newest = await self._seed(unit_env)

        by_tag = await question_service.list_questions(tag=TagName("sql"))
        by_search = await question_service.list_questions(search="  MIDDLE ")

        assert [q.id for q in by_tag] == [newest.id, middle.id]
        assert [q.id for q in by_search] == [middle.id]

    @pytest.mark.asyncio
    async def test_limit_and_offset(self, unit_env):
        question_service = await unit_env.get(QuestionService)
        oldest, middle, _ = await self._seed(unit_env)

        result = await question_service.list_questions(limit=2, offset=1)

        assert [q.id for q in result] == [middle.id, oldest.id]

    @pytest.mark.asyncio
    async def test_list_tags_is_sorted_and_distinct(self, unit_env):
        question_service = await unit_env.get(QuestionService)
        await self._seed(unit_env)

        tags = await question_service.list_tags()

        assert [t.root for t in tags] == ["python", "sql"]


class TestDeleteQuestion:
    """Tests for delete_question."""

    @pytest.mark.asyncio
    async def test_delete_cascades_to_answers_and_votes(self, unit_env):
        question_service = await unit_env.get(QuestionService)
        answer_service = await unit_env.get(AnswerService)
        vote_service = await unit_env.get(VoteService)
        answer_repo = await unit_env.get(AnswerRepository)
        vote_repo = await unit_env.get(VoteRepository)
        author = await make_profile(await unit_env.get(ProfileRepository))

        question = await question_service.create_question(
            author.user_id, "Doomed", "Body", []
        )
        answer = await answer_service.create_answer(author.user_id, question.id, "A")
        voter = UserId(uuid4())
        await vote_service.cast_vote(
            voter, VoteTarget.question(question.id), VoteType.UPVOTE
        )
        await vote_service.cast_vote(
            voter, VoteTarget.answer(answer.id), VoteType.DOWNVOTE
        )

        await question_service.delete_question(author.user_id, question.id)

        with pytest.raises(NotFoundError):
            await question_service.get_question(question.id)
        assert await answer_repo.find_by_question(question.id) == []
        assert await vote_repo.find_by_target(VoteTarget.answer(answer.id)) == []
        assert await vote_repo.find_by_target(VoteTarget.question(question.id)) == []

    @pytest.mark.asyncio
    async def test_non_owner_cannot_delete(self, unit_env):
        question_service = await unit_env.get(QuestionService)
        profile_repo = await unit_env.get(ProfileRepository)
        author = await make_profile(profile_repo)
        stranger = await make_profile(profile_repo)
        question = await question_service.create_question(
            author.user_id, "Mine", "Body", []
        )

        with pytest.raises(AuthorizationError):
            await question_service.delete_question(stranger.user_id, question.id)

        assert await question_service.get_question(question.id) == question

    @pytest.mark.asyncio
    async def test_admin_can_delete(self, unit_env):
        question_service = await unit_env.get(QuestionService)
        profile_repo = await unit_env.get(ProfileRepository)
        author = await make_profile(profile_repo)
        admin = await make_profile(profile_repo, role=UserRole.ADMIN)
        question = await question_service.create_question(
            author.user_id, "Spam", "Body", []
        )

        await question_service.delete_question(admin.user_id, question.id)

        with pytest.raises(NotFoundError):
            await question_service.get_question(question.id)
