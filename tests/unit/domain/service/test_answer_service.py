"""Unit tests for AnswerService."""

import asyncio
from uuid import uuid4

import pytest

from forum.domain.error import AuthorizationError, NotFoundError, ValidationError
from forum.domain.repository import AnswerRepository, ProfileRepository, VoteRepository
from forum.domain.service import AnswerService, QuestionService, VoteService
from forum.domain.value import AnswerId, QuestionId, UserId, UserRole, VoteTarget, VoteType
from tests.conftest import make_profile
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


async def _setup(unit_env, answers: int = 0):
    """Question by its own author plus ``answers`` answers by another principal."""
    question_service = await unit_env.get(QuestionService)
    answer_service = await unit_env.get(AnswerService)
    profile_repo = await unit_env.get(ProfileRepository)

    asker = await make_profile(profile_repo)
    answerer = await make_profile(profile_repo)
    question = await question_service.create_question(
        asker.user_id, "Why is the sky blue?", "Asking for a friend", ["physics"]
    )
    created = [
        await answer_service.create_answer(
            answerer.user_id, question.id, f"Rayleigh scattering #{i}"
        )
        for i in range(answers)
    ]
    return asker, answerer, question, created


class TestCreateAnswer:
    """Tests for create_answer."""

    @pytest.mark.asyncio
    async def test_create_answer_increments_answer_count(self, unit_env):
        question_service = await unit_env.get(QuestionService)
        _, _, question, answers = await _setup(unit_env, answers=3)

        updated = await question_service.get_question(question.id)
        assert updated.answer_count == 3
        assert all(not a.is_accepted for a in answers)

    @pytest.mark.asyncio
    async def test_create_answer_on_missing_question_raises(self, unit_env):
        answer_service = await unit_env.get(AnswerService)
        answer_repo = await unit_env.get(AnswerRepository)
        question_id = QuestionId(uuid4())

        with pytest.raises(NotFoundError, match="Question not found"):
            await answer_service.create_answer(UserId(uuid4()), question_id, "Hi")

        # Nothing was stored by the rolled back transaction
        assert await answer_repo.find_by_question(question_id) == []

    @pytest.mark.asyncio
    async def test_blank_body_raises_validation_error(self, unit_env):
        answer_service = await unit_env.get(AnswerService)
        _, answerer, question, _ = await _setup(unit_env)

        with pytest.raises(ValidationError):
            await answer_service.create_answer(answerer.user_id, question.id, "   ")

    @pytest.mark.asyncio
    async def test_concurrent_answers_are_all_counted(self, unit_env):
        answer_service = await unit_env.get(AnswerService)
        question_service = await unit_env.get(QuestionService)
        _, answerer, question, _ = await _setup(unit_env)

        await asyncio.gather(
            *(
                answer_service.create_answer(answerer.user_id, question.id, f"A{i}")
                for i in range(10)
            )
        )

        updated = await question_service.get_question(question.id)
        assert updated.answer_count == 10


class TestDeleteAnswer:
    """Tests for delete_answer."""

    @pytest.mark.asyncio
    async def test_delete_answer_decrements_answer_count(self, unit_env):
        """Three answers minus one leaves an answer count of two."""
        answer_service = await unit_env.get(AnswerService)
        question_service = await unit_env.get(QuestionService)
        _, answerer, question, answers = await _setup(unit_env, answers=3)

        await answer_service.delete_answer(answerer.user_id, answers[0].id)

        updated = await question_service.get_question(question.id)
        assert updated.answer_count == 2

    @pytest.mark.asyncio
    async def test_delete_accepted_answer_clears_question_flag(self, unit_env):
        answer_service = await unit_env.get(AnswerService)
        question_service = await unit_env.get(QuestionService)
        asker, answerer, question, answers = await _setup(unit_env, answers=2)
        await answer_service.set_answer_accepted(asker.user_id, answers[0].id, True)

        await answer_service.delete_answer(answerer.user_id, answers[0].id)

        updated = await question_service.get_question(question.id)
        assert updated.has_accepted_answer is False
        assert updated.answer_count == 1

    @pytest.mark.asyncio
    async def test_delete_unaccepted_answer_keeps_question_flag(self, unit_env):
        answer_service = await unit_env.get(AnswerService)
        question_service = await unit_env.get(QuestionService)
        asker, answerer, question, answers = await _setup(unit_env, answers=2)
        await answer_service.set_answer_accepted(asker.user_id, answers[0].id, True)

        await answer_service.delete_answer(answerer.user_id, answers[1].id)

        updated = await question_service.get_question(question.id)
        assert updated.has_accepted_answer is True

    @pytest.mark.asyncio
    async def test_delete_answer_removes_its_votes(self, unit_env):
        answer_service = await unit_env.get(AnswerService)
        vote_service = await unit_env.get(VoteService)
        vote_repo = await unit_env.get(VoteRepository)
        _, answerer, _, answers = await _setup(unit_env, answers=1)
        target = VoteTarget.answer(answers[0].id)
        await vote_service.cast_vote(UserId(uuid4()), target, VoteType.UPVOTE)

        await answer_service.delete_answer(answerer.user_id, answers[0].id)

        assert await vote_repo.find_by_target(target) == []

    @pytest.mark.asyncio
    async def test_non_owner_cannot_delete(self, unit_env):
        answer_service = await unit_env.get(AnswerService)
        question_service = await unit_env.get(QuestionService)
        profile_repo = await unit_env.get(ProfileRepository)
        _, _, question, answers = await _setup(unit_env, answers=1)
        stranger = await make_profile(profile_repo)

        with pytest.raises(AuthorizationError):
            await answer_service.delete_answer(stranger.user_id, answers[0].id)

        updated = await question_service.get_question(question.id)
        assert updated.answer_count == 1

    @pytest.mark.asyncio
    async def test_admin_can_delete_any_answer(self, unit_env):
        answer_service = await unit_env.get(AnswerService)
        question_service = await unit_env.get(QuestionService)
        profile_repo = await unit_env.get(ProfileRepository)
        _, _, question, answers = await _setup(unit_env, answers=1)
        admin = await make_profile(profile_repo, role=UserRole.ADMIN)

        await answer_service.delete_answer(admin.user_id, answers[0].id)

        updated = await question_service.get_question(question.id)
        assert updated.answer_count == 0

    @pytest.mark.asyncio
    async def test_delete_missing_answer_raises(self, unit_env):
        answer_service = await unit_env.get(AnswerService)

        with pytest.raises(NotFoundError, match="Answer not found"):
            await answer_service.delete_answer(UserId(uuid4()), AnswerId(uuid4()))


class TestSetAnswerAccepted:
    """Tests for set_answer_accepted."""

    @pytest.mark.asyncio
    async def test_accept_sets_answer_and_question_flag(self, unit_env):
        answer_service = await unit_env.get(AnswerService)
        question_service = await unit_env.get(QuestionService)
        asker, _, question, answers = await _setup(unit_env, answers=1)

        accepted = await answer_service.set_answer_accepted(
            asker.user_id, answers[0].id, True
        )

        assert accepted.is_accepted is True
        updated = await question_service.get_question(question.id)
        assert updated.has_accepted_answer is True

    @pytest.mark.asyncio
    async def test_last_accept_wins(self, unit_env):
        """Accepting a second answer unaccepts the first one."""
        answer_service = await unit_env.get(AnswerService)
        question_service = await unit_env.get(QuestionService)
        asker, _, question, answers = await _setup(unit_env, answers=3)

        await answer_service.set_answer_accepted(asker.user_id, answers[0].id, True)
        await answer_service.set_answer_accepted(asker.user_id, answers[2].id, True)

        listed = await answer_service.get_answers_for_question(question.id)
        assert [a.id for a in listed if a.is_accepted] == [answers[2].id]
        # Accepted answer is listed first
        assert listed[0].id == answers[2].id
        updated = await question_service.get_question(question.id)
        assert updated.has_accepted_answer is True

    @pytest.mark.asyncio
    async def test_unaccept_clears_question_flag(self, unit_env):
        answer_service = await unit_env.get(AnswerService)
        question_service = await unit_env.get(QuestionService)
        asker, _, question, answers = await _setup(unit_env, answers=2)
        await answer_service.set_answer_accepted(asker.user_id, answers[1].id, True)

        result = await answer_service.set_answer_accepted(
            asker.user_id, answers[1].id, False
        )

        assert result.is_accepted is False
        updated = await question_service.get_question(question.id)
        assert updated.has_accepted_answer is False

    @pytest.mark.asyncio
    async def test_setting_current_value_is_noop(self, unit_env):
        answer_service = await unit_env.get(AnswerService)
        question_service = await unit_env.get(QuestionService)
        asker, _, question, answers = await _setup(unit_env, answers=1)

        result = await answer_service.set_answer_accepted(
            asker.user_id, answers[0].id, False
        )

        assert result.is_accepted is False
        updated = await question_service.get_question(question.id)
        assert updated.has_accepted_answer is False

    @pytest.mark.asyncio
    async def test_only_question_owner_can_accept(self, unit_env):
        """Answer authors and admins cannot accept on the asker's behalf."""
        answer_service = await unit_env.get(AnswerService)
        profile_repo = await unit_env.get(ProfileRepository)
        _, answerer, _, answers = await _setup(unit_env, answers=1)
        admin = await make_profile(profile_repo, role=UserRole.ADMIN)

        with pytest.raises(AuthorizationError):
            await answer_service.set_answer_accepted(
                answerer.user_id, answers[0].id, True
            )
        with pytest.raises(AuthorizationError):
            await answer_service.set_answer_accepted(
                admin.user_id, answers[0].id, True
            )

        answer = await answer_service.get_answer(answers[0].id)
        assert answer.is_accepted is False

    @pytest.mark.asyncio
    async def test_concurrent_accepts_leave_one_accepted(self, unit_env):
        answer_service = await unit_env.get(AnswerService)
        question_service = await unit_env.get(QuestionService)
        asker, _, question, answers = await _setup(unit_env, answers=4)

        await asyncio.gather(
            *(
                answer_service.set_answer_accepted(asker.user_id, a.id, True)
                for a in answers
            )
        )

        listed = await answer_service.get_answers_for_question(question.id)
        assert sum(1 for a in listed if a.is_accepted) == 1
        updated = await question_service.get_question(question.id)
        assert updated.has_accepted_answer is True
