"""Question domain service."""

from datetime import datetime
from typing import Optional
from uuid import uuid4

import logfire

from forum.domain.error import NotFoundError, ValidationError
from forum.domain.model import Question
from forum.domain.repository import QuestionRepository, TransactionManager
from forum.domain.value import QuestionFilter, QuestionId, TagName, UserId

from .base import Service
from .profile_service import ProfileService


class QuestionService(Service):
    """Domain service for question operations.

    Also owns the question-side aggregate updates used by the vote and
    answer rules. Those helpers do not open a transaction of their own and
    must be called inside the caller's ``atomic()`` block.
    """

    def __init__(
        self,
        question_repository: QuestionRepository,
        profile_service: ProfileService,
        transaction_manager: TransactionManager,
        max_tags: int = 5,
    ) -> None:
        """Initialize question service.

        Args:
            question_repository: Question repository
            profile_service: Profile domain service (ownership checks)
            transaction_manager: Transaction boundary for writes
            max_tags: Maximum number of tags per question
        """
        self.question_repository = question_repository
        self.profile_service = profile_service
        self.transaction_manager = transaction_manager
        self.max_tags = max_tags

    def normalize_tags(self, tags: list[str]) -> list[TagName]:
        """Normalize tags: trim, lowercase, drop blanks and duplicates.

        Raises:
            ValidationError: If a tag is invalid or there are too many
        """
        normalized: list[TagName] = []
        for raw in tags:
            if not raw.strip():
                continue
            try:
                tag = TagName(raw)
            except ValueError as e:
                raise ValidationError(f"Invalid tag '{raw}': {e}") from e
            if tag not in normalized:
                normalized.append(tag)

        if len(normalized) > self.max_tags:
            raise ValidationError(f"A question can have at most {self.max_tags} tags")
        return normalized

    async def create_question(
        self, user_id: UserId, title: str, body: str, tags: list[str]
    ) -> Question:
        """Create a question with zeroed aggregates.

        Args:
            user_id: Author principal ID
            title: Question title
            body: Question body
            tags: Raw tag names

        Returns:
            Created question

        Raises:
            ValidationError: If title/body are blank or tags are invalid
        """
        with logfire.span(
            "question_service.create_question", user_id=str(user_id), title=title
        ):
            title = title.strip()
            body = body.strip()
            if not title or not body:
                raise ValidationError("Title and body are required")

            now = datetime.now()
            question = Question(
                id=QuestionId(uuid4()),
                title=title,
                body=body,
                tags=self.normalize_tags(tags),
                user_id=user_id,
                created_at=now,
                updated_at=now,
            )

            async with self.transaction_manager.atomic("create_question"):
                saved = await self.question_repository.save(question)

            logfire.info(
                "Question created",
                question_id=str(saved.id),
                user_id=str(user_id),
                tags=[t.root for t in saved.tags],
            )
            return saved

    async def get_question(self, question_id: QuestionId) -> Question:
        """Get a question by ID.

        Raises:
            NotFoundError: If the question does not exist
        """
        with logfire.span(
            "question_service.get_question", question_id=str(question_id)
        ):
            question = await self.question_repository.find_by_id(question_id)
            if not question:
                logfire.warn("Question not found", question_id=str(question_id))
                raise NotFoundError("Question", str(question_id))
            return question

    async def list_questions(
        self,
        filter: QuestionFilter = QuestionFilter.NEWEST,
        tag: Optional[TagName] = None,
        search: Optional[str] = None,
        limit: int = 20,
        offset: int = 0,
    ) -> list[Question]:
        """List questions for the question index."""
        with logfire.span(
            "question_service.list_questions",
            filter=filter.value,
            tag=tag.root if tag else None,
            search=search,
            limit=limit,
            offset=offset,
        ):
            questions = await self.question_repository.find_all(
                filter=filter,
                tag=tag,
                search=search.strip() if search and search.strip() else None,
                limit=limit,
                offset=offset,
            )
            logfire.info("Questions listed", count=len(questions))
            return questions

    async def list_tags(self) -> list[TagName]:
        """List distinct tags across all questions."""
        return await self.question_repository.list_tags()

    async def delete_question(self, user_id: UserId, question_id: QuestionId) -> None:
        """Delete a question with its answers and votes.

        Args:
            user_id: Acting principal (owner or admin)
            question_id: Question to delete

        Raises:
            NotFoundError: If the question does not exist
            AuthorizationError: If the principal is neither owner nor admin
        """
        with logfire.span(
            "question_service.delete_question",
            question_id=str(question_id),
            user_id=str(user_id),
        ):
            async with self.transaction_manager.atomic("delete_question"):
                question = await self.lock_question(question_id)
                await self.profile_service.authorize_owner_or_admin(
                    user_id, question.user_id, "delete", "question", str(question_id)
                )
                await self.question_repository.delete(question_id)

            logfire.info(
                "Question deleted",
                question_id=str(question_id),
                answer_count=question.answer_count,
            )

    # Aggregate helpers, called inside an open transaction

    async def lock_question(self, question_id: QuestionId) -> Question:
        """Fetch a question and lock its row for the current transaction.

        Raises:
            NotFoundError: If the question does not exist
        """
        question = await self.question_repository.find_by_id(
            question_id, for_update=True
        )
        if not question:
            logfire.warn("Question not found", question_id=str(question_id))
            raise NotFoundError("Question", str(question_id))
        return question

    async def apply_vote_delta(
        self, question_id: QuestionId, upvote_delta: int, downvote_delta: int
    ) -> None:
        """Adjust the question's vote counters."""
        await self.question_repository.adjust_vote_counts(
            question_id, upvote_delta, downvote_delta
        )
        logfire.debug(
            "Question vote counts adjusted",
            question_id=str(question_id),
            upvote_delta=upvote_delta,
            downvote_delta=downvote_delta,
        )

    async def increment_answer_count(self, question_id: QuestionId) -> None:
        await self.question_repository.adjust_answer_count(question_id, 1)

    async def decrement_answer_count(self, question_id: QuestionId) -> None:
        await self.question_repository.adjust_answer_count(question_id, -1)

    async def set_has_accepted_answer(
        self, question_id: QuestionId, value: bool
    ) -> None:
        await self.question_repository.set_has_accepted_answer(question_id, value)
        logfire.debug(
            "Question accepted flag set", question_id=str(question_id), value=value
        )
