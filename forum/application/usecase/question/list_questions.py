"""List questions use case."""

from datetime import datetime
from uuid import UUID

import logfire
from pydantic import BaseModel, Field

from forum.application.usecase.base import BaseUseCase
from forum.domain.error import ValidationError
from forum.domain.service import ProfileService, QuestionService, VoteService
from forum.domain.value import QuestionFilter, TagName, UserId, VotableType, VoteType

from .get_question import AuthorInfo, author_info


class QuestionListItem(BaseModel):
    """Question list item in response."""

    question_id: str
    title: str
    body: str
    tags: list[str]
    author: AuthorInfo | None
    upvote_count: int
    downvote_count: int
    score: int
    answer_count: int
    has_accepted_answer: bool
    created_at: datetime
    user_vote: VoteType | None


class ListQuestionsRequest(BaseModel):
    """List questions request."""

    filter: QuestionFilter = QuestionFilter.NEWEST
    tag: str | None = None  # Filter by tag name
    search: str | None = Field(default=None, max_length=200)
    page: int = Field(default=1, ge=1)
    user_id: str | None = None  # Current user ID (if authenticated)


class ListQuestionsResponse(BaseModel):
    """List questions response."""

    questions: list[QuestionListItem]
    page: int
    page_size: int
    has_more: bool


class ListQuestionsUseCase(BaseUseCase):
    """Use case for the question index with filters and pagination."""

    def __init__(
        self,
        question_service: QuestionService,
        profile_service: ProfileService,
        vote_service: VoteService,
        page_size: int = 20,
    ) -> None:
        """Initialize list questions use case.

        Args:
            question_service: Question domain service
            profile_service: Profile domain service (authors)
            vote_service: Vote domain service (viewer's votes)
            page_size: Questions per page
        """
        self.question_service = question_service
        self.profile_service = profile_service
        self.vote_service = vote_service
        self.page_size = page_size

    async def execute(self, request: ListQuestionsRequest) -> ListQuestionsResponse:
        """Execute list questions flow.

        Args:
            request: List questions request with filters and page number

        Returns:
            One page of questions and whether another page follows

        Raises:
            ValidationError: If the tag filter is not a valid tag name
        """
        with logfire.span(
            "list_questions.execute",
            filter=request.filter.value,
            tag=request.tag,
            search=request.search,
            page=request.page,
        ):
            tag_filter = None
            if request.tag:
                try:
                    tag_filter = TagName(request.tag)
                except ValueError as e:
                    raise ValidationError(f"Invalid tag filter: {request.tag}") from e

            # Fetch one extra row to learn whether another page exists
            questions = await self.question_service.list_questions(
                filter=request.filter,
                tag=tag_filter,
                search=request.search,
                limit=self.page_size + 1,
                offset=(request.page - 1) * self.page_size,
            )
            has_more = len(questions) > self.page_size
            questions = questions[: self.page_size]

            authors = await self.profile_service.get_profiles(
                [question.user_id for question in questions]
            )

            # Use batch query to avoid N+1 problem
            user_votes: dict[UUID, VoteType] = {}
            if request.user_id and questions:
                user_votes = await self.vote_service.get_user_votes(
                    UserId(UUID(request.user_id)),
                    VotableType.QUESTION,
                    [question.id for question in questions],
                )

            items = [
                QuestionListItem(
                    question_id=str(question.id),
                    title=question.title,
                    body=question.body,
                    tags=[tag.root for tag in question.tags],
                    author=author_info(authors.get(question.user_id)),
                    upvote_count=question.upvote_count,
                    downvote_count=question.downvote_count,
                    score=question.score,
                    answer_count=question.answer_count,
                    has_accepted_answer=question.has_accepted_answer,
                    created_at=question.created_at,
                    user_vote=user_votes.get(question.id),
                )
                for question in questions
            ]

            logfire.info("Questions listed", count=len(items), has_more=has_more)

            return ListQuestionsResponse(
                questions=items,
                page=request.page,
                page_size=self.page_size,
                has_more=has_more,
            )
