"""Set answer accepted use case."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel

from forum.application.usecase.base import BaseUseCase
from forum.domain.service import AnswerService, QuestionService
from forum.domain.value import AnswerId, UserId


class SetAnswerAcceptedRequest(BaseModel):
    """Set answer accepted request."""

    answer_id: str  # UUID string
    accepted: bool
    user_id: str  # From authenticated user (question owner)


class SetAnswerAcceptedResponse(BaseModel):
    """Set answer accepted response."""

    answer_id: str
    question_id: str
    is_accepted: bool
    has_accepted_answer: bool
    updated_at: datetime


class SetAnswerAcceptedUseCase(BaseUseCase):
    """Use case for accepting or unaccepting an answer."""

    def __init__(
        self, answer_service: AnswerService, question_service: QuestionService
    ) -> None:
        """Initialize set answer accepted use case.

        Args:
            answer_service: Answer domain service
            question_service: Question domain service
        """
        self.answer_service = answer_service
        self.question_service = question_service

    async def execute(
        self, request: SetAnswerAcceptedRequest
    ) -> SetAnswerAcceptedResponse:
        """Execute set answer accepted flow.

        Args:
            request: Request with the answer and the new accepted value

        Returns:
            The answer's accepted state and the question's accepted flag

        Raises:
            NotFoundError: If the answer does not exist
            AuthorizationError: If the principal does not own the question
        """
        answer = await self.answer_service.set_answer_accepted(
            user_id=UserId(UUID(request.user_id)),
            answer_id=AnswerId(UUID(request.answer_id)),
            accepted=request.accepted,
        )
        question = await self.question_service.get_question(answer.question_id)

        return SetAnswerAcceptedResponse(
            answer_id=str(answer.id),
            question_id=str(answer.question_id),
            is_accepted=answer.is_accepted,
            has_accepted_answer=question.has_accepted_answer,
            updated_at=answer.updated_at,
        )
