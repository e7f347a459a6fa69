"""Vote repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional, Sequence
from uuid import UUID

from forum.domain.model.vote import Vote
from forum.domain.value import UserId, VotableType, VoteId, VoteTarget, VoteType


class VoteRepository(ABC):
    """Repository for Vote entity.

    Defines the contract for vote persistence operations.
    Implementations live in the persistence layer.
    """

    @abstractmethod
    async def find_by_user_and_target(
        self, user_id: UserId, target: VoteTarget
    ) -> Optional[Vote]:
        """Find a principal's vote on a specific target.

        Args:
            user_id: The principal's ID
            target: Question or answer

        Returns:
            The vote if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_user_and_targets(
        self,
        user_id: UserId,
        votable_type: VotableType,
        target_ids: Sequence[UUID],
    ) -> List[Vote]:
        """Find a principal's votes on multiple targets (batch query).

        Args:
            user_id: The principal's ID
            votable_type: Type of the targets
            target_ids: IDs of the targets

        Returns:
            Votes by the principal on the given targets
        """
        pass

    @abstractmethod
    async def find_by_target(self, target: VoteTarget) -> List[Vote]:
        """Find all votes on a target."""
        pass

    @abstractmethod
    async def save(self, vote: Vote) -> Vote:
        """Insert a vote.

        Args:
            vote: The vote to save

        Returns:
            The saved vote

        Raises:
            ConflictError: If the principal already holds a vote on the target
        """
        pass

    @abstractmethod
    async def update_vote_type(self, vote_id: VoteId, vote_type: VoteType) -> Vote:
        """Replace the kind of an existing vote.

        Args:
            vote_id: The vote ID
            vote_type: New kind

        Returns:
            The updated vote
        """
        pass

    @abstractmethod
    async def delete(self, vote_id: VoteId) -> bool:
        """Delete a vote.

        Args:
            vote_id: The vote ID

        Returns:
            True if a vote was deleted
        """
        pass
