"""Get question use case."""

from datetime import datetime
from uuid import UUID

import logfire
from pydantic import BaseModel

from forum.application.usecase.base import BaseUseCase
from forum.domain.model import Profile
from forum.domain.service import (
    AnswerService,
    ProfileService,
    QuestionService,
    VoteService,
)
from forum.domain.value import QuestionId, UserId, VotableType, VoteType


class AuthorInfo(BaseModel):
    """Author summary embedded in questions and answers."""

    user_id: str
    username: str
    full_name: str
    avatar_url: str | None


class AnswerItem(BaseModel):
    """Answer item in response."""

    answer_id: str
    body: str
    author: AuthorInfo | None
    upvote_count: int
    downvote_count: int
    score: int
    is_accepted: bool
    created_at: datetime
    user_vote: VoteType | None


class GetQuestionRequest(BaseModel):
    """Get question request."""

    question_id: str  # UUID string
    user_id: str | None = None  # Viewer ID (if authenticated)


class GetQuestionResponse(BaseModel):
    """Get question response with its answers."""

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
    updated_at: datetime
    user_vote: VoteType | None
    answers: list[AnswerItem]


def author_info(profile: Profile | None) -> AuthorInfo | None:
    if profile is None:
        return None
    return AuthorInfo(
        user_id=str(profile.user_id),
        username=profile.username.root,
        full_name=profile.full_name,
        avatar_url=profile.avatar_url,
    )


class GetQuestionUseCase(BaseUseCase):
    """Use case for the question detail page."""

    def __init__(
        self,
        question_service: QuestionService,
        answer_service: AnswerService,
        profile_service: ProfileService,
        vote_service: VoteService,
    ) -> None:
        """Initialize get question use case.

        Args:
            question_service: Question domain service
            answer_service: Answer domain service
            profile_service: Profile domain service (authors)
            vote_service: Vote domain service (viewer's votes)
        """
        self.question_service = question_service
        self.answer_service = answer_service
        self.profile_service = profile_service
        self.vote_service = vote_service

    async def execute(self, request: GetQuestionRequest) -> GetQuestionResponse:
        """Execute get question flow.

        Args:
            request: Get question request with optional viewer ID

        Returns:
            Question with answers (accepted first, then oldest first), author
            profiles and the viewer's votes

        Raises:
            NotFoundError: If the question does not exist
        """
        with logfire.span("get_question.execute", question_id=request.question_id):
            question_id = QuestionId(UUID(request.question_id))
            question = await self.question_service.get_question(question_id)
            answers = await self.answer_service.get_answers_for_question(question_id)

            authors = await self.profile_service.get_profiles(
                [question.user_id] + [answer.user_id for answer in answers]
            )

            # Viewer's votes, one batch query per target type
            question_vote: VoteType | None = None
            answer_votes: dict[UUID, VoteType] = {}
            if request.user_id:
                viewer_id = UserId(UUID(request.user_id))
                question_votes = await self.vote_service.get_user_votes(
                    viewer_id, VotableType.QUESTION, [question.id]
                )
                question_vote = question_votes.get(question.id)
                answer_votes = await self.vote_service.get_user_votes(
                    viewer_id, VotableType.ANSWER, [answer.id for answer in answers]
                )

            return GetQuestionResponse(
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
                updated_at=question.updated_at,
                user_vote=question_vote,
                answers=[
                    AnswerItem(
                        answer_id=str(answer.id),
                        body=answer.body,
                        author=author_info(authors.get(answer.user_id)),
                        upvote_count=answer.upvote_count,
                        downvote_count=answer.downvote_count,
                        score=answer.score,
                        is_accepted=answer.is_accepted,
                        created_at=answer.created_at,
                        user_vote=answer_votes.get(answer.id),
                    )
                    for answer in answers
                ],
            )
