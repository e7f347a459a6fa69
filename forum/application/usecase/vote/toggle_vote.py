"""Toggle vote use case."""

from uuid import UUID

from pydantic import BaseModel

from forum.application.usecase.base import BaseUseCase
from forum.domain.service import AnswerService, QuestionService, VoteService
from forum.domain.value import UserId, VotableType, VoteType

from .cast_vote import VoteStateResponse, build_target, load_vote_state


class ToggleVoteRequest(BaseModel):
    """Toggle vote request (a click on the upvote or downvote button)."""

    votable_type: VotableType
    votable_id: str  # UUID string
    user_id: str  # User ID from authenticated user
    vote_type: VoteType


class ToggleVoteUseCase(BaseUseCase):
    """Use case for the vote buttons: same kind removes, other kind replaces."""

    def __init__(
        self,
        vote_service: VoteService,
        question_service: QuestionService,
        answer_service: AnswerService,
    ) -> None:
        self.vote_service = vote_service
        self.question_service = question_service
        self.answer_service = answer_service

    async def execute(self, request: ToggleVoteRequest) -> VoteStateResponse:
        target = build_target(request.votable_type, request.votable_id)
        vote = await self.vote_service.toggle_vote(
            UserId(UUID(request.user_id)), target, request.vote_type
        )
        return await load_vote_state(
            target,
            vote.vote_type if vote else None,
            self.question_service,
            self.answer_service,
        )
