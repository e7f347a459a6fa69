"""Answer repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional

from forum.domain.model.answer import Answer
from forum.domain.value import AnswerId, QuestionId


class AnswerRepository(ABC):
    """Repository for Answer entity."""

    @abstractmethod
    async def find_by_id(
        self, answer_id: AnswerId, for_update: bool = False
    ) -> Optional[Answer]:
        """Find an answer by ID.

        Args:
            answer_id: The answer's unique identifier
            for_update: Lock the row until the transaction ends

        Returns:
            The answer if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_question(self, question_id: QuestionId) -> List[Answer]:
        """Find all answers to a question.

        Ordered accepted answer first, then oldest first.

        Args:
            question_id: The question ID

        Returns:
            Answers to the question
        """
        pass

    @abstractmethod
    async def save(self, answer: Answer) -> Answer:
        """Insert a new answer.

        Args:
            answer: The answer to save

        Returns:
            The saved answer
        """
        pass

    @abstractmethod
    async def delete(self, answer_id: AnswerId) -> bool:
        """Delete an answer, cascading to its votes.

        Args:
            answer_id: The answer ID

        Returns:
            True if an answer was deleted
        """
        pass

    @abstractmethod
    async def adjust_vote_counts(
        self, answer_id: AnswerId, upvote_delta: int, downvote_delta: int
    ) -> None:
        """Apply vote counter deltas in a single statement."""
        pass

    @abstractmethod
    async def set_accepted(self, answer_id: AnswerId, value: bool) -> None:
        """Set is_accepted on one answer."""
        pass

    @abstractmethod
    async def clear_accepted_except(
        self, question_id: QuestionId, answer_id: AnswerId
    ) -> int:
        """Unaccept every other answer to a question.

        Args:
            question_id: The question ID
            answer_id: The answer that keeps its flag

        Returns:
            Number of answers that were unaccepted
        """
        pass

    @abstractmethod
    async def exists_accepted(
        self, question_id: QuestionId, exclude_answer_id: Optional[AnswerId] = None
    ) -> bool:
        """Check whether any answer to a question is accepted.

        Args:
            question_id: The question ID
            exclude_answer_id: Answer to leave out of the check

        Returns:
            True if an accepted answer exists
        """
        pass
