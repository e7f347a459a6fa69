"""Vote domain service.

Implements the vote aggregation rule: every vote insert, delete or kind
change is applied together with the matching counter delta on the target,
in one transaction, after locking the target row.
"""

from typing import Optional, Sequence
from uuid import UUID, uuid4

import logfire

from forum.domain.error import ConflictError
from forum.domain.model.vote import Vote
from forum.domain.repository import TransactionManager, VoteRepository
from forum.domain.value import (
    AnswerId,
    QuestionId,
    UserId,
    VotableType,
    VoteId,
    VoteTarget,
    VoteType,
)

from .answer_service import AnswerService
from .base import Service
from .question_service import QuestionService


def vote_delta(vote_type: VoteType, sign: int) -> tuple[int, int]:
    """Counter delta (upvote, downvote) for adding (+1) or removing (-1) a vote."""
    if vote_type == VoteType.UPVOTE:
        return sign, 0
    return 0, sign


class VoteService(Service):
    """Domain service for vote operations."""

    def __init__(
        self,
        vote_repository: VoteRepository,
        question_service: QuestionService,
        answer_service: AnswerService,
        transaction_manager: TransactionManager,
    ) -> None:
        """Initialize vote service.

        Args:
            vote_repository: Vote repository
            question_service: Question domain service
            answer_service: Answer domain service
            transaction_manager: Transaction boundary for writes
        """
        self.vote_repository = vote_repository
        self.question_service = question_service
        self.answer_service = answer_service
        self.transaction_manager = transaction_manager

    async def cast_vote(
        self, user_id: UserId, target: VoteTarget, vote_type: VoteType
    ) -> Vote:
        """Cast or replace the principal's vote on a target.

        A new vote increments the counter for its kind. Replacing the kind of
        an existing vote moves one count from the old kind to the new one in
        a single counter update.

        Args:
            user_id: Voting principal
            target: Question or answer
            vote_type: Upvote or downvote

        Returns:
            The stored vote

        Raises:
            NotFoundError: If the target does not exist
            ConflictError: If the principal already holds this exact vote
        """
        with logfire.span(
            "vote_service.cast_vote",
            target_type=target.type.value,
            target_id=str(target.id),
            user_id=str(user_id),
            vote_type=vote_type.value,
        ):
            async with self.transaction_manager.atomic("cast_vote"):
                await self._lock_target(target)
                return await self._upsert_vote(user_id, target, vote_type)

    async def delete_vote(self, user_id: UserId, target: VoteTarget) -> bool:
        """Remove the principal's vote from a target.

        Args:
            user_id: Voting principal
            target: Question or answer

        Returns:
            True if a vote was removed, False if there was none

        Raises:
            NotFoundError: If the target does not exist
        """
        with logfire.span(
            "vote_service.delete_vote",
            target_type=target.type.value,
            target_id=str(target.id),
            user_id=str(user_id),
        ):
            async with self.transaction_manager.atomic("delete_vote"):
                await self._lock_target(target)
                existing = await self.vote_repository.find_by_user_and_target(
                    user_id, target
                )
                if not existing:
                    logfire.info(
                        "No vote to remove",
                        target_id=str(target.id),
                        user_id=str(user_id),
                    )
                    return False
                await self._remove_vote(existing)

            logfire.info(
                "Vote removed",
                target_type=target.type.value,
                target_id=str(target.id),
                user_id=str(user_id),
                vote_type=existing.vote_type.value,
            )
            return True

    async def toggle_vote(
        self, user_id: UserId, target: VoteTarget, vote_type: VoteType
    ) -> Optional[Vote]:
        """Click behavior of the vote buttons.

        Clicking the kind the principal already holds removes the vote;
        clicking the other kind (or voting for the first time) casts it.

        Returns:
            The resulting vote, or None if the vote was removed

        Raises:
            NotFoundError: If the target does not exist
        """
        with logfire.span(
            "vote_service.toggle_vote",
            target_type=target.type.value,
            target_id=str(target.id),
            user_id=str(user_id),
            vote_type=vote_type.value,
        ):
            async with self.transaction_manager.atomic("toggle_vote"):
                await self._lock_target(target)
                existing = await self.vote_repository.find_by_user_and_target(
                    user_id, target
                )
                if existing and existing.vote_type == vote_type:
                    await self._remove_vote(existing)
                    logfire.info("Vote toggled off", target_id=str(target.id))
                    return None
                return await self._upsert_vote(user_id, target, vote_type)

    async def get_user_votes(
        self,
        user_id: UserId,
        votable_type: VotableType,
        target_ids: Sequence[UUID],
    ) -> dict[UUID, VoteType]:
        """Map each target the principal voted on to the kind of vote.

        Args:
            user_id: Principal ID
            votable_type: Type of the targets
            target_ids: Targets to check

        Returns:
            Dictionary of target ID to vote kind (targets without votes omitted)
        """
        if not target_ids:
            return {}

        # Batch query to fetch all votes at once (avoid N+1)
        votes = await self.vote_repository.find_by_user_and_targets(
            user_id=user_id, votable_type=votable_type, target_ids=target_ids
        )
        return {vote.target.id: vote.vote_type for vote in votes}

    async def _lock_target(self, target: VoteTarget) -> None:
        if target.is_question:
            await self.question_service.lock_question(QuestionId(target.id))
        else:
            await self.answer_service.lock_answer(AnswerId(target.id))

    async def _apply_delta(
        self, target: VoteTarget, upvote_delta: int, downvote_delta: int
    ) -> None:
        if target.is_question:
            await self.question_service.apply_vote_delta(
                QuestionId(target.id), upvote_delta, downvote_delta
            )
        else:
            await self.answer_service.apply_vote_delta(
                AnswerId(target.id), upvote_delta, downvote_delta
            )

    async def _upsert_vote(
        self, user_id: UserId, target: VoteTarget, vote_type: VoteType
    ) -> Vote:
        existing = await self.vote_repository.find_by_user_and_target(user_id, target)

        if existing is None:
            vote = Vote.for_target(
                id=VoteId(uuid4()),
                user_id=user_id,
                target=target,
                vote_type=vote_type,
            )
            saved = await self.vote_repository.save(vote)
            await self._apply_delta(target, *vote_delta(vote_type, +1))
            logfire.info(
                "Vote cast",
                target_type=target.type.value,
                target_id=str(target.id),
                user_id=str(user_id),
                vote_type=vote_type.value,
            )
            return saved

        if existing.vote_type == vote_type:
            logfire.warn(
                "Duplicate vote attempt",
                target_id=str(target.id),
                user_id=str(user_id),
                vote_type=vote_type.value,
            )
            raise ConflictError(f"Already {vote_type.value}d this {target.type.value}")

        updated = await self.vote_repository.update_vote_type(existing.id, vote_type)
        old_up, old_down = vote_delta(existing.vote_type, -1)
        new_up, new_down = vote_delta(vote_type, +1)
        await self._apply_delta(target, old_up + new_up, old_down + new_down)
        logfire.info(
            "Vote changed",
            target_type=target.type.value,
            target_id=str(target.id),
            user_id=str(user_id),
            old_vote_type=existing.vote_type.value,
            vote_type=vote_type.value,
        )
        return updated

    async def _remove_vote(self, vote: Vote) -> None:
        await self.vote_repository.delete(vote.id)
        await self._apply_delta(vote.target, *vote_delta(vote.vote_type, -1))
