"""Delete question use case."""

from uuid import UUID

from pydantic import BaseModel

from forum.application.usecase.base import BaseUseCase
from forum.domain.service import QuestionService
from forum.domain.value import QuestionId, UserId


class DeleteQuestionRequest(BaseModel):
    """Delete question request."""

    question_id: str  # UUID string
    user_id: str  # From authenticated user (owner or admin)


class DeleteQuestionUseCase(BaseUseCase):
    """Use case for deleting a question with its answers and votes."""

    def __init__(self, question_service: QuestionService) -> None:
        self.question_service = question_service

    async def execute(self, request: DeleteQuestionRequest) -> None:
        await self.question_service.delete_question(
            user_id=UserId(UUID(request.user_id)),
            question_id=QuestionId(UUID(request.question_id)),
        )
