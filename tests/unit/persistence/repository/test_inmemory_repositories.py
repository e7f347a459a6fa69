"""Unit tests for the in-memory repositories."""

from datetime import datetime, timedelta
from uuid import uuid4

import pytest

from forum.domain.error import ConflictError
from forum.domain.model import Answer, Question, Vote
from forum.domain.value import (
    AnswerId,
    QuestionFilter,
    QuestionId,
    UserId,
    VotableType,
    VoteId,
    VoteTarget,
    VoteType,
)
from forum.persistence.repository.inmemory import (
    InMemoryAnswerRepository,
    InMemoryDatabase,
    InMemoryQuestionRepository,
    InMemoryVoteRepository,
    StorageError,
)


def _question(**overrides) -> Question:
    now = datetime.now()
    fields = dict(
        id=QuestionId(uuid4()),
        title="Title",
        body="Body",
        user_id=UserId(uuid4()),
        created_at=now,
        updated_at=now,
    )
    fields.update(overrides)
    return Question(**fields)


def _answer(question_id: QuestionId, **overrides) -> Answer:
    now = datetime.now()
    fields = dict(
        id=AnswerId(uuid4()),
        question_id=question_id,
        body="Answer",
        user_id=UserId(uuid4()),
        created_at=now,
        updated_at=now,
    )
    fields.update(overrides)
    return Answer(**fields)


@pytest.fixture
def database() -> InMemoryDatabase:
    return InMemoryDatabase()


class TestInMemoryQuestionRepository:
    @pytest.mark.asyncio
    async def test_most_voted_breaks_ties_by_newest(self, database):
        repo = InMemoryQuestionRepository(database)
        base = datetime(2024, 5, 1)
        older = await repo.save(_question(upvote_count=3, created_at=base))
        newer = await repo.save(
            _question(upvote_count=3, created_at=base + timedelta(hours=1))
        )
        top = await repo.save(_question(upvote_count=4, downvote_count=4))

        result = await repo.find_all(filter=QuestionFilter.MOST_VOTED)

        assert [q.id for q in result] == [top.id, newer.id, older.id]

    @pytest.mark.asyncio
    async def test_counters_cannot_go_negative(self, database):
        repo = InMemoryQuestionRepository(database)
        question = await repo.save(_question())

        with pytest.raises(StorageError):
            await repo.adjust_vote_counts(question.id, 0, -1)

    @pytest.mark.asyncio
    async def test_delete_cascades(self, database):
        questions = InMemoryQuestionRepository(database)
        answers = InMemoryAnswerRepository(database)
        votes = InMemoryVoteRepository(database)
        question = await questions.save(_question())
        answer = await answers.save(_answer(question.id))
        await votes.save(
            Vote.for_target(
                VoteId(uuid4()),
                UserId(uuid4()),
                VoteTarget.answer(answer.id),
                VoteType.UPVOTE,
            )
        )

        assert await questions.delete(question.id) is True
        assert database.answers == {}
        assert database.votes == {}
        assert await questions.delete(question.id) is False


class TestInMemoryAnswerRepository:
    @pytest.mark.asyncio
    async def test_clear_accepted_except(self, database):
        repo = InMemoryAnswerRepository(database)
        question_id = QuestionId(uuid4())
        keep = await repo.save(_answer(question_id, is_accepted=True))
        other = await repo.save(_answer(question_id, is_accepted=True))
        elsewhere = await repo.save(_answer(QuestionId(uuid4()), is_accepted=True))

        cleared = await repo.clear_accepted_except(question_id, keep.id)

        assert cleared == 1
        assert (await repo.find_by_id(keep.id)).is_accepted is True
        assert (await repo.find_by_id(other.id)).is_accepted is False
        assert (await repo.find_by_id(elsewhere.id)).is_accepted is True

    @pytest.mark.asyncio
    async def test_exists_accepted_with_exclusion(self, database):
        repo = InMemoryAnswerRepository(database)
        question_id = QuestionId(uuid4())
        accepted = await repo.save(_answer(question_id, is_accepted=True))

        assert await repo.exists_accepted(question_id) is True
        assert (
            await repo.exists_accepted(question_id, exclude_answer_id=accepted.id)
            is False
        )


class TestInMemoryVoteRepository:
    @pytest.mark.asyncio
    async def test_one_vote_per_user_and_target(self, database):
        repo = InMemoryVoteRepository(database)
        user_id = UserId(uuid4())
        target = VoteTarget.question(QuestionId(uuid4()))
        await repo.save(Vote.for_target(VoteId(uuid4()), user_id, target, VoteType.UPVOTE))

        with pytest.raises(ConflictError):
            await repo.save(
                Vote.for_target(VoteId(uuid4()), user_id, target, VoteType.DOWNVOTE)
            )

    @pytest.mark.asyncio
    async def test_batch_lookup_filters_by_type(self, database):
        repo = InMemoryVoteRepository(database)
        user_id = UserId(uuid4())
        shared_id = uuid4()
        question_vote = await repo.save(
            Vote.for_target(
                VoteId(uuid4()),
                user_id,
                VoteTarget.question(QuestionId(shared_id)),
                VoteType.UPVOTE,
            )
        )

        found = await repo.find_by_user_and_targets(
            user_id, VotableType.QUESTION, [shared_id]
        )
        missing = await repo.find_by_user_and_targets(
            user_id, VotableType.ANSWER, [shared_id]
        )

        assert found == [question_vote]
        assert missing == []

    @pytest.mark.asyncio
    async def test_update_vote_type_keeps_identity(self, database):
        repo = InMemoryVoteRepository(database)
        vote = await repo.save(
            Vote.for_target(
                VoteId(uuid4()),
                UserId(uuid4()),
                VoteTarget.answer(AnswerId(uuid4())),
                VoteType.UPVOTE,
            )
        )

        updated = await repo.update_vote_type(vote.id, VoteType.DOWNVOTE)

        assert updated.id == vote.id
        assert updated.vote_type == VoteType.DOWNVOTE
        assert updated.created_at == vote.created_at
