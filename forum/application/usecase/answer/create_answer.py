"""Create answer use case."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, Field

from forum.application.usecase.base import BaseUseCase
from forum.domain.service import AnswerService, QuestionService
from forum.domain.value import QuestionId, UserId


class CreateAnswerRequest(BaseModel):
    """Create answer request."""

    question_id: str  # UUID string
    body: str = Field(min_length=1)
    user_id: str  # From authenticated user


class CreateAnswerResponse(BaseModel):
    """Create answer response."""

    answer_id: str
    question_id: str
    body: str
    user_id: str
    is_accepted: bool
    created_at: datetime
    answer_count: int  # Question's answer count after the insert


class CreateAnswerUseCase(BaseUseCase):
    """Use case for answering a question."""

    def __init__(
        self, answer_service: AnswerService, question_service: QuestionService
    ) -> None:
        """Initialize create answer use case.

        Args:
            answer_service: Answer domain service
            question_service: Question domain service
        """
        self.answer_service = answer_service
        self.question_service = question_service

    async def execute(self, request: CreateAnswerRequest) -> CreateAnswerResponse:
        """Execute create answer flow.

        Args:
            request: Create answer request

        Returns:
            Created answer and the question's new answer count

        Raises:
            NotFoundError: If the question does not exist
            ValidationError: If the body is blank
        """
        question_id = QuestionId(UUID(request.question_id))
        answer = await self.answer_service.create_answer(
            user_id=UserId(UUID(request.user_id)),
            question_id=question_id,
            body=request.body,
        )
        question = await self.question_service.get_question(question_id)

        return CreateAnswerResponse(
            answer_id=str(answer.id),
            question_id=str(answer.question_id),
            body=answer.body,
            user_id=str(answer.user_id),
            is_accepted=answer.is_accepted,
            created_at=answer.created_at,
            answer_count=question.answer_count,
        )
