"""Remove vote use case."""

from uuid import UUID

from pydantic import BaseModel

from forum.application.usecase.base import BaseUseCase
from forum.domain.service import AnswerService, QuestionService, VoteService
from forum.domain.value import UserId, VotableType

from .cast_vote import VoteStateResponse, build_target, load_vote_state


class RemoveVoteRequest(BaseModel):
    """Remove vote request."""

    votable_type: VotableType
    votable_id: str  # UUID string
    user_id: str  # User ID from authenticated user


class RemoveVoteResponse(VoteStateResponse):
    """Remove vote response."""

    removed: bool


class RemoveVoteUseCase(BaseUseCase):
    """Use case for removing a vote from a question or answer."""

    def __init__(
        self,
        vote_service: VoteService,
        question_service: QuestionService,
        answer_service: AnswerService,
    ) -> None:
        self.vote_service = vote_service
        self.question_service = question_service
        self.answer_service = answer_service

    async def execute(self, request: RemoveVoteRequest) -> RemoveVoteResponse:
        """Execute remove vote flow.

        Removing a vote that does not exist is not an error; ``removed`` is
        False in that case.

        Raises:
            NotFoundError: If the target does not exist
        """
        target = build_target(request.votable_type, request.votable_id)
        removed = await self.vote_service.delete_vote(
            UserId(UUID(request.user_id)), target
        )
        state = await load_vote_state(
            target, None, self.question_service, self.answer_service
        )
        return RemoveVoteResponse(**state.model_dump(), removed=removed)
