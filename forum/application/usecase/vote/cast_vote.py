"""Cast vote use case."""

from uuid import UUID

from pydantic import BaseModel

from forum.application.usecase.base import BaseUseCase
from forum.domain.service import AnswerService, QuestionService, VoteService
from forum.domain.value import (
    AnswerId,
    QuestionId,
    UserId,
    VotableType,
    VoteTarget,
    VoteType,
)


class CastVoteRequest(BaseModel):
    """Cast vote request."""

    votable_type: VotableType
    votable_id: str  # UUID string
    user_id: str  # User ID from authenticated user
    vote_type: VoteType


class VoteStateResponse(BaseModel):
    """Principal's vote on a target and the target's counters after the operation."""

    votable_type: VotableType
    votable_id: str
    vote_type: VoteType | None  # None when the principal holds no vote
    upvote_count: int
    downvote_count: int
    score: int


def build_target(votable_type: VotableType, votable_id: str) -> VoteTarget:
    if votable_type == VotableType.QUESTION:
        return VoteTarget.question(QuestionId(UUID(votable_id)))
    return VoteTarget.answer(AnswerId(UUID(votable_id)))


async def load_vote_state(
    target: VoteTarget,
    vote_type: VoteType | None,
    question_service: QuestionService,
    answer_service: AnswerService,
) -> VoteStateResponse:
    """Read the target's committed counters into a response."""
    if target.is_question:
        votable = await question_service.get_question(QuestionId(target.id))
    else:
        votable = await answer_service.get_answer(AnswerId(target.id))

    return VoteStateResponse(
        votable_type=target.type,
        votable_id=str(target.id),
        vote_type=vote_type,
        upvote_count=votable.upvote_count,
        downvote_count=votable.downvote_count,
        score=votable.score,
    )


class CastVoteUseCase(BaseUseCase):
    """Use case for upvoting or downvoting a question or answer."""

    def __init__(
        self,
        vote_service: VoteService,
        question_service: QuestionService,
        answer_service: AnswerService,
    ) -> None:
        """Initialize cast vote use case.

        Args:
            vote_service: Vote domain service
            question_service: Question domain service (counter read-back)
            answer_service: Answer domain service (counter read-back)
        """
        self.vote_service = vote_service
        self.question_service = question_service
        self.answer_service = answer_service

    async def execute(self, request: CastVoteRequest) -> VoteStateResponse:
        """Execute cast vote flow.

        Args:
            request: Cast vote request

        Returns:
            Vote state with updated counters

        Raises:
            NotFoundError: If the target does not exist
            ConflictError: If the principal already holds the same vote
        """
        target = build_target(request.votable_type, request.votable_id)
        vote = await self.vote_service.cast_vote(
            UserId(UUID(request.user_id)), target, request.vote_type
        )
        return await load_vote_state(
            target, vote.vote_type, self.question_service, self.answer_service
        )
