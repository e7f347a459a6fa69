"""PostgreSQL implementation of Vote repository."""

from typing import List, Optional, Sequence
from uuid import UUID

import logfire
from sqlalchemy import and_, delete, insert, select, update
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from forum.domain.error import ConflictError, NotFoundError
from forum.domain.model import Vote
from forum.domain.repository import VoteRepository
from forum.domain.value import UserId, VotableType, VoteId, VoteTarget, VoteType
from forum.persistence.mappers import row_to_vote, vote_to_dict
from forum.persistence.tables import votes_table


def _target_column(votable_type: VotableType):
    if votable_type == VotableType.QUESTION:
        return votes_table.c.question_id
    return votes_table.c.answer_id


class PostgresVoteRepository(VoteRepository):
    """PostgreSQL implementation of VoteRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_user_and_target(
        self, user_id: UserId, target: VoteTarget
    ) -> Optional[Vote]:
        """Find a principal's vote on a specific target."""
        stmt = select(votes_table).where(
            and_(
                votes_table.c.user_id == user_id,
                _target_column(target.type) == target.id,
            )
        )
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_vote(row._asdict()) if row else None

    async def find_by_user_and_targets(
        self,
        user_id: UserId,
        votable_type: VotableType,
        target_ids: Sequence[UUID],
    ) -> List[Vote]:
        """Find a principal's votes on multiple targets (batch query)."""
        if not target_ids:
            return []

        stmt = select(votes_table).where(
            and_(
                votes_table.c.user_id == user_id,
                _target_column(votable_type).in_(target_ids),
            )
        )
        result = await self.session.execute(stmt)
        return [row_to_vote(row._asdict()) for row in result.fetchall()]

    async def find_by_target(self, target: VoteTarget) -> List[Vote]:
        """Find all votes on a target."""
        stmt = select(votes_table).where(_target_column(target.type) == target.id)
        result = await self.session.execute(stmt)
        return [row_to_vote(row._asdict()) for row in result.fetchall()]

    async def save(self, vote: Vote) -> Vote:
        """Insert a vote."""
        stmt = insert(votes_table).values(**vote_to_dict(vote))
        try:
            await self.session.execute(stmt)
            await self.session.flush()
        except IntegrityError as e:
            logfire.warn(
                "Vote unique constraint violated",
                user_id=str(vote.user_id),
                error=str(e.orig),
            )
            raise ConflictError("Vote already exists for this target") from e
        return vote

    async def update_vote_type(self, vote_id: VoteId, vote_type: VoteType) -> Vote:
        """Replace the kind of an existing vote."""
        stmt = (
            update(votes_table)
            .where(votes_table.c.id == vote_id)
            .values(vote_type=vote_type.value)
            .returning(votes_table)
        )
        result = await self.session.execute(stmt)
        row = result.fetchone()
        if row is None:
            raise NotFoundError("Vote", str(vote_id))
        await self.session.flush()
        return row_to_vote(row._asdict())

    async def delete(self, vote_id: VoteId) -> bool:
        """Delete a vote."""
        stmt = delete(votes_table).where(votes_table.c.id == vote_id)
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount > 0  # type: ignore[attr-defined]
