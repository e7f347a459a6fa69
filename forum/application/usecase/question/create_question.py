"""Create question use case."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, Field

from forum.application.usecase.base import BaseUseCase
from forum.domain.service import QuestionService
from forum.domain.value import UserId


class CreateQuestionRequest(BaseModel):
    """Create question request."""

    title: str = Field(min_length=1, max_length=255)
    body: str = Field(min_length=1)
    tags: list[str] = Field(default_factory=list)
    user_id: str  # From authenticated user


class CreateQuestionResponse(BaseModel):
    """Create question response."""

    question_id: str
    title: str
    body: str
    tags: list[str]
    user_id: str
    created_at: datetime


class CreateQuestionUseCase(BaseUseCase):
    """Use case for asking a question."""

    def __init__(self, question_service: QuestionService) -> None:
        """Initialize create question use case.

        Args:
            question_service: Question domain service
        """
        self.question_service = question_service

    async def execute(self, request: CreateQuestionRequest) -> CreateQuestionResponse:
        """Execute create question flow.

        Tags are trimmed, lowercased and deduplicated by the question service.

        Raises:
            ValidationError: If a tag is invalid or there are too many tags
        """
        question = await self.question_service.create_question(
            user_id=UserId(UUID(request.user_id)),
            title=request.title,
            body=request.body,
            tags=request.tags,
        )

        return CreateQuestionResponse(
            question_id=str(question.id),
            title=question.title,
            body=question.body,
            tags=[tag.root for tag in question.tags],
            user_id=str(question.user_id),
            created_at=question.created_at,
        )
