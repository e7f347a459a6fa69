"""In-memory vote repository for testing."""

from typing import List, Optional, Sequence
from uuid import UUID

from forum.domain.error import ConflictError, NotFoundError
from forum.domain.model import Vote
from forum.domain.repository import VoteRepository
from forum.domain.value import UserId, VotableType, VoteId, VoteTarget, VoteType

from .database import InMemoryDatabase


class InMemoryVoteRepository(VoteRepository):
    """In-memory implementation of VoteRepository for testing."""

    def __init__(self, database: InMemoryDatabase) -> None:
        self.database = database

    async def find_by_user_and_target(
        self, user_id: UserId, target: VoteTarget
    ) -> Optional[Vote]:
        for vote in self.database.votes.values():
            if vote.user_id == user_id and vote.target == target:
                return vote
        return None

    async def find_by_user_and_targets(
        self,
        user_id: UserId,
        votable_type: VotableType,
        target_ids: Sequence[UUID],
    ) -> List[Vote]:
        """Find a principal's votes on multiple targets (batch query)."""
        if not target_ids:
            return []

        wanted = set(target_ids)
        return [
            v
            for v in self.database.votes.values()
            if v.user_id == user_id
            and v.target.type == votable_type
            and v.target.id in wanted
        ]

    async def find_by_target(self, target: VoteTarget) -> List[Vote]:
        return [v for v in self.database.votes.values() if v.target == target]

    async def save(self, vote: Vote) -> Vote:
        """Save a vote.

        Raises:
            ConflictError: If the principal already voted on the target
        """
        if await self.find_by_user_and_target(vote.user_id, vote.target):
            raise ConflictError("Vote already exists for this target")

        self.database.votes[vote.id] = vote
        return vote

    async def update_vote_type(self, vote_id: VoteId, vote_type: VoteType) -> Vote:
        vote = self.database.votes.get(vote_id)
        if vote is None:
            raise NotFoundError("Vote", str(vote_id))
        updated = vote.model_copy(update={"vote_type": vote_type})
        self.database.votes[vote_id] = updated
        return updated

    async def delete(self, vote_id: VoteId) -> bool:
        return self.database.votes.pop(vote_id, None) is not None
