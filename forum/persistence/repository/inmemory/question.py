"""In-memory question repository for testing."""

from datetime import datetime
from typing import List, Optional

from pydantic import ValidationError

from forum.domain.model import Question
from forum.domain.repository import QuestionRepository
from forum.domain.value import QuestionFilter, QuestionId, TagName

from .database import InMemoryDatabase, StorageError


class InMemoryQuestionRepository(QuestionRepository):
    """In-memory implementation of QuestionRepository for testing."""

    def __init__(self, database: InMemoryDatabase) -> None:
        self.database = database

    async def find_by_id(
        self, question_id: QuestionId, for_update: bool = False
    ) -> Optional[Question]:
        # Row locks are covered by the transaction lock
        return self.database.questions.get(question_id)

    async def find_all(
        self,
        filter: QuestionFilter = QuestionFilter.NEWEST,
        tag: Optional[TagName] = None,
        search: Optional[str] = None,
        limit: int = 20,
        offset: int = 0,
    ) -> List[Question]:
        questions = list(self.database.questions.values())

        if tag:
            questions = [q for q in questions if tag in q.tags]

        if search:
            needle = search.lower()
            questions = [
                q
                for q in questions
                if needle in q.title.lower() or needle in q.body.lower()
            ]

        if filter == QuestionFilter.OLDEST:
            questions.sort(key=lambda q: q.created_at)
        elif filter == QuestionFilter.MOST_VOTED:
            questions.sort(key=lambda q: (q.upvote_count, q.created_at), reverse=True)
        else:
            if filter == QuestionFilter.UNANSWERED:
                questions = [q for q in questions if q.answer_count == 0]
            questions.sort(key=lambda q: q.created_at, reverse=True)

        return questions[offset : offset + limit]

    async def list_tags(self) -> List[TagName]:
        names = {tag.root for q in self.database.questions.values() for tag in q.tags}
        return [TagName(name) for name in sorted(names)]

    async def save(self, question: Question) -> Question:
        self.database.questions[question.id] = question
        return question

    async def delete(self, question_id: QuestionId) -> bool:
        return self.database.delete_question_cascade(question_id)

    def _update(self, question_id: QuestionId, **changes) -> None:
        question = self.database.questions.get(question_id)
        if question is None:
            return
        changes["updated_at"] = datetime.now()
        # model_validate re-checks the non-negative counter constraints
        try:
            self.database.questions[question_id] = Question.model_validate(
                {**question.model_dump(), **changes}
            )
        except ValidationError as e:
            raise StorageError(f"questions row {question_id} rejected: {e}") from e

    async def adjust_vote_counts(
        self, question_id: QuestionId, upvote_delta: int, downvote_delta: int
    ) -> None:
        question = self.database.questions.get(question_id)
        if question is None:
            return
        self._update(
            question_id,
            upvote_count=question.upvote_count + upvote_delta,
            downvote_count=question.downvote_count + downvote_delta,
        )

    async def adjust_answer_count(self, question_id: QuestionId, delta: int) -> None:
        question = self.database.questions.get(question_id)
        if question is None:
            return
        self._update(question_id, answer_count=question.answer_count + delta)

    async def set_has_accepted_answer(
        self, question_id: QuestionId, value: bool
    ) -> None:
        self._update(question_id, has_accepted_answer=value)
