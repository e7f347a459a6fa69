"""In-memory answer repository for testing."""

from datetime import datetime
from typing import List, Optional

from pydantic import ValidationError

from forum.domain.model import Answer
from forum.domain.repository import AnswerRepository
from forum.domain.value import AnswerId, QuestionId

from .database import InMemoryDatabase, StorageError


class InMemoryAnswerRepository(AnswerRepository):
    """In-memory implementation of AnswerRepository for testing."""

    def __init__(self, database: InMemoryDatabase) -> None:
        self.database = database

    async def find_by_id(
        self, answer_id: AnswerId, for_update: bool = False
    ) -> Optional[Answer]:
        return self.database.answers.get(answer_id)

    async def find_by_question(self, question_id: QuestionId) -> List[Answer]:
        answers = [
            a for a in self.database.answers.values() if a.question_id == question_id
        ]
        answers.sort(key=lambda a: a.created_at)
        answers.sort(key=lambda a: a.is_accepted, reverse=True)
        return answers

    async def save(self, answer: Answer) -> Answer:
        self.database.answers[answer.id] = answer
        return answer

    async def delete(self, answer_id: AnswerId) -> bool:
        return self.database.delete_answer_cascade(answer_id)

    def _update(self, answer_id: AnswerId, **changes) -> None:
        answer = self.database.answers.get(answer_id)
        if answer is None:
            return
        changes["updated_at"] = datetime.now()
        try:
            self.database.answers[answer_id] = Answer.model_validate(
                {**answer.model_dump(), **changes}
            )
        except ValidationError as e:
            raise StorageError(f"answers row {answer_id} rejected: {e}") from e

    async def adjust_vote_counts(
        self, answer_id: AnswerId, upvote_delta: int, downvote_delta: int
    ) -> None:
        answer = self.database.answers.get(answer_id)
        if answer is None:
            return
        self._update(
            answer_id,
            upvote_count=answer.upvote_count + upvote_delta,
            downvote_count=answer.downvote_count + downvote_delta,
        )

    async def set_accepted(self, answer_id: AnswerId, value: bool) -> None:
        self._update(answer_id, is_accepted=value)

    async def clear_accepted_except(
        self, question_id: QuestionId, answer_id: AnswerId
    ) -> int:
        cleared = [
            a.id
            for a in self.database.answers.values()
            if a.question_id == question_id and a.id != answer_id and a.is_accepted
        ]
        for other_id in cleared:
            self._update(other_id, is_accepted=False)
        return len(cleared)

    async def exists_accepted(
        self, question_id: QuestionId, exclude_answer_id: Optional[AnswerId] = None
    ) -> bool:
        return any(
            a.is_accepted
            for a in self.database.answers.values()
            if a.question_id == question_id and a.id != exclude_answer_id
        )
