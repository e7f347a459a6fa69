"""List tags use case."""

import logfire
from pydantic import BaseModel

from forum.application.usecase.base import BaseUseCase
from forum.domain.service import QuestionService


class ListTagsRequest(BaseModel):
    """List tags request."""

    prefix: str | None = None  # Autocomplete filter


class ListTagsResponse(BaseModel):
    """List tags response."""

    tags: list[str]


class ListTagsUseCase(BaseUseCase):
    """Use case for listing tags used by questions."""

    def __init__(self, question_service: QuestionService) -> None:
        """Initialize list tags use case.

        Args:
            question_service: Question domain service
        """
        self.question_service = question_service

    async def execute(self, request: ListTagsRequest) -> ListTagsResponse:
        """Execute list tags flow.

        Returns:
            Distinct tag names sorted alphabetically
        """
        with logfire.span("list_tags.execute", prefix=request.prefix):
            tags = [tag.root for tag in await self.question_service.list_tags()]
            if request.prefix:
                prefix = request.prefix.strip().lower()
                tags = [tag for tag in tags if tag.startswith(prefix)]

            logfire.info("Tags listed", count=len(tags))
            return ListTagsResponse(tags=tags)
