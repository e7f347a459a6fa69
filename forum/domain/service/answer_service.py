"""Answer domain service.

Implements the answer-count rule and the accepted-answer exclusivity rule.

Lock order is question row first, then answer rows, for every operation that
touches both. Vote operations only lock the voted row, so they never close a
cycle with these.
"""

from datetime import datetime
from uuid import uuid4

import logfire

from forum.domain.error import AuthorizationError, NotFoundError, ValidationError
from forum.domain.model import Answer
from forum.domain.repository import AnswerRepository, TransactionManager
from forum.domain.value import AnswerId, QuestionId, UserId

from .base import Service
from .profile_service import ProfileService
from .question_service import QuestionService


class AnswerService(Service):
    """Domain service for answer operations."""

    def __init__(
        self,
        answer_repository: AnswerRepository,
        question_service: QuestionService,
        profile_service: ProfileService,
        transaction_manager: TransactionManager,
    ) -> None:
        """Initialize answer service.

        Args:
            answer_repository: Answer repository
            question_service: Question domain service
            profile_service: Profile domain service (ownership checks)
            transaction_manager: Transaction boundary for writes
        """
        self.answer_repository = answer_repository
        self.question_service = question_service
        self.profile_service = profile_service
        self.transaction_manager = transaction_manager

    async def create_answer(
        self, user_id: UserId, question_id: QuestionId, body: str
    ) -> Answer:
        """Post an answer and increment the question's answer count.

        Args:
            user_id: Author principal ID
            question_id: Question being answered
            body: Answer text

        Returns:
            Created answer

        Raises:
            ValidationError: If the body is blank
            NotFoundError: If the question does not exist
        """
        with logfire.span(
            "answer_service.create_answer",
            question_id=str(question_id),
            user_id=str(user_id),
        ):
            body = body.strip()
            if not body:
                raise ValidationError("Answer body is required")

            async with self.transaction_manager.atomic("create_answer"):
                await self.question_service.lock_question(question_id)

                now = datetime.now()
                answer = Answer(
                    id=AnswerId(uuid4()),
                    question_id=question_id,
                    body=body,
                    user_id=user_id,
                    created_at=now,
                    updated_at=now,
                )
                saved = await self.answer_repository.save(answer)
                await self.question_service.increment_answer_count(question_id)

            logfire.info(
                "Answer created",
                answer_id=str(saved.id),
                question_id=str(question_id),
                user_id=str(user_id),
            )
            return saved

    async def delete_answer(self, user_id: UserId, answer_id: AnswerId) -> None:
        """Delete an answer and keep the question aggregates consistent.

        Decrements answer_count and, if the answer was accepted, recomputes
        the question's accepted flag from the remaining answers.

        Args:
            user_id: Acting principal (owner or admin)
            answer_id: Answer to delete

        Raises:
            NotFoundError: If the answer does not exist
            AuthorizationError: If the principal is neither owner nor admin
        """
        with logfire.span(
            "answer_service.delete_answer",
            answer_id=str(answer_id),
            user_id=str(user_id),
        ):
            async with self.transaction_manager.atomic("delete_answer"):
                answer = await self.get_answer(answer_id)
                await self.question_service.lock_question(answer.question_id)
                answer = await self.lock_answer(answer_id)

                await self.profile_service.authorize_owner_or_admin(
                    user_id, answer.user_id, "delete", "answer", str(answer_id)
                )

                await self.answer_repository.delete(answer_id)
                await self.question_service.decrement_answer_count(answer.question_id)

                if answer.is_accepted:
                    still_accepted = await self.answer_repository.exists_accepted(
                        answer.question_id
                    )
                    await self.question_service.set_has_accepted_answer(
                        answer.question_id, still_accepted
                    )

            logfire.info(
                "Answer deleted",
                answer_id=str(answer_id),
                question_id=str(answer.question_id),
                was_accepted=answer.is_accepted,
            )

    async def set_answer_accepted(
        self, user_id: UserId, answer_id: AnswerId, accepted: bool
    ) -> Answer:
        """Accept or unaccept an answer.

        Accepting clears every other accepted answer to the same question
        (last accept wins) and sets the question's flag. Unaccepting sets the
        flag to whether another accepted answer remains. Setting the current
        value is a no-op.

        Args:
            user_id: Acting principal (must own the question)
            answer_id: Answer to update
            accepted: New value of is_accepted

        Returns:
            The answer after the update

        Raises:
            NotFoundError: If the answer or its question does not exist
            AuthorizationError: If the principal does not own the question
        """
        with logfire.span(
            "answer_service.set_answer_accepted",
            answer_id=str(answer_id),
            user_id=str(user_id),
            accepted=accepted,
        ):
            async with self.transaction_manager.atomic("set_answer_accepted"):
                answer = await self.get_answer(answer_id)
                question = await self.question_service.lock_question(
                    answer.question_id
                )
                if question.user_id != user_id:
                    logfire.warn(
                        "Non-owner tried to change accepted answer",
                        answer_id=str(answer_id),
                        question_id=str(question.id),
                        user_id=str(user_id),
                    )
                    raise AuthorizationError(
                        "accept", "answer", str(answer_id), str(user_id)
                    )

                answer = await self.lock_answer(answer_id)
                if answer.is_accepted == accepted:
                    logfire.info(
                        "Accepted state unchanged", answer_id=str(answer_id)
                    )
                    return answer

                if accepted:
                    # Siblings first so a single accepted row exists at every step
                    cleared = await self.answer_repository.clear_accepted_except(
                        question.id, answer_id
                    )
                    await self.answer_repository.set_accepted(answer_id, True)
                    await self.question_service.set_has_accepted_answer(
                        question.id, True
                    )
                    logfire.info(
                        "Answer accepted",
                        answer_id=str(answer_id),
                        question_id=str(question.id),
                        cleared_siblings=cleared,
                    )
                else:
                    await self.answer_repository.set_accepted(answer_id, False)
                    still_accepted = await self.answer_repository.exists_accepted(
                        question.id, exclude_answer_id=answer_id
                    )
                    await self.question_service.set_has_accepted_answer(
                        question.id, still_accepted
                    )
                    logfire.info(
                        "Answer unaccepted",
                        answer_id=str(answer_id),
                        question_id=str(question.id),
                        question_still_accepted=still_accepted,
                    )

                answer = await self.get_answer(answer_id)

            return answer

    async def get_answer(self, answer_id: AnswerId) -> Answer:
        """Get an answer by ID.

        Raises:
            NotFoundError: If the answer does not exist
        """
        answer = await self.answer_repository.find_by_id(answer_id)
        if not answer:
            logfire.warn("Answer not found", answer_id=str(answer_id))
            raise NotFoundError("Answer", str(answer_id))
        return answer

    async def get_answers_for_question(self, question_id: QuestionId) -> list[Answer]:
        """Get answers to a question, accepted first then oldest first."""
        with logfire.span(
            "answer_service.get_answers_for_question", question_id=str(question_id)
        ):
            answers = await self.answer_repository.find_by_question(question_id)
            logfire.info(
                "Answers retrieved for question",
                question_id=str(question_id),
                count=len(answers),
            )
            return answers

    # Aggregate helpers, called inside an open transaction

    async def lock_answer(self, answer_id: AnswerId) -> Answer:
        """Fetch an answer and lock its row for the current transaction.

        Raises:
            NotFoundError: If the answer does not exist
        """
        answer = await self.answer_repository.find_by_id(answer_id, for_update=True)
        if not answer:
            logfire.warn("Answer not found", answer_id=str(answer_id))
            raise NotFoundError("Answer", str(answer_id))
        return answer

    async def apply_vote_delta(
        self, answer_id: AnswerId, upvote_delta: int, downvote_delta: int
    ) -> None:
        """Adjust the answer's vote counters."""
        await self.answer_repository.adjust_vote_counts(
            answer_id, upvote_delta, downvote_delta
        )
        logfire.debug(
            "Answer vote counts adjusted",
            answer_id=str(answer_id),
            upvote_delta=upvote_delta,
            downvote_delta=downvote_delta,
        )
