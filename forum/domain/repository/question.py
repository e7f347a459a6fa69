"""Question repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional

from forum.domain.model.question import Question
from forum.domain.value import QuestionFilter, QuestionId, TagName


class QuestionRepository(ABC):
    """Repository for Question aggregate.

    Aggregate fields are only changed through the adjust_*/set_* methods,
    which must be executed inside the caller's transaction.
    """

    @abstractmethod
    async def find_by_id(
        self, question_id: QuestionId, for_update: bool = False
    ) -> Optional[Question]:
        """Find a question by ID.

        Args:
            question_id: The question's unique identifier
            for_update: Lock the row until the transaction ends

        Returns:
            The question if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_all(
        self,
        filter: QuestionFilter = QuestionFilter.NEWEST,
        tag: Optional[TagName] = None,
        search: Optional[str] = None,
        limit: int = 20,
        offset: int = 0,
    ) -> List[Question]:
        """Find questions with filtering and pagination.

        Args:
            filter: Listing filter, which also decides the sort order
            tag: Only questions carrying this tag
            search: Case-insensitive substring of title or body
            limit: Maximum number of questions to return
            offset: Number of questions to skip

        Returns:
            List of questions matching the criteria
        """
        pass

    @abstractmethod
    async def list_tags(self) -> List[TagName]:
        """List distinct tags used by any question, sorted by name."""
        pass

    @abstractmethod
    async def save(self, question: Question) -> Question:
        """Insert a new question.

        Args:
            question: The question to save

        Returns:
            The saved question
        """
        pass

    @abstractmethod
    async def delete(self, question_id: QuestionId) -> bool:
        """Delete a question, cascading to its answers and their votes.

        Args:
            question_id: The question ID to delete

        Returns:
            True if a question was deleted
        """
        pass

    @abstractmethod
    async def adjust_vote_counts(
        self, question_id: QuestionId, upvote_delta: int, downvote_delta: int
    ) -> None:
        """Apply vote counter deltas in a single statement.

        Args:
            question_id: The question ID
            upvote_delta: Change to upvote_count
            downvote_delta: Change to downvote_count
        """
        pass

    @abstractmethod
    async def adjust_answer_count(self, question_id: QuestionId, delta: int) -> None:
        """Apply a delta to answer_count.

        Args:
            question_id: The question ID
            delta: +1 on answer creation, -1 on answer deletion
        """
        pass

    @abstractmethod
    async def set_has_accepted_answer(
        self, question_id: QuestionId, value: bool
    ) -> None:
        """Set the accepted-answer flag.

        Args:
            question_id: The question ID
            value: New flag value
        """
        pass
