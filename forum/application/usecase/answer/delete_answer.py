"""Delete answer use case."""

from uuid import UUID

from pydantic import BaseModel

from forum.application.usecase.base import BaseUseCase
from forum.domain.service import AnswerService
from forum.domain.value import AnswerId, UserId


class DeleteAnswerRequest(BaseModel):
    """Delete answer request."""

    answer_id: str  # UUID string
    user_id: str  # From authenticated user (owner or admin)


class DeleteAnswerUseCase(BaseUseCase):
    """Use case for deleting an answer."""

    def __init__(self, answer_service: AnswerService) -> None:
        self.answer_service = answer_service

    async def execute(self, request: DeleteAnswerRequest) -> None:
        """Execute delete answer flow.

        Raises:
            NotFoundError: If the answer does not exist
            AuthorizationError: If the principal is neither owner nor admin
        """
        await self.answer_service.delete_answer(
            user_id=UserId(UUID(request.user_id)),
            answer_id=AnswerId(UUID(request.answer_id)),
        )
