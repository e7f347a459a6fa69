"""Question routes."""

from uuid import UUID

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, Header, Query, Response, status
from pydantic import BaseModel, Field

from forum.application.usecase.answer import (
    CreateAnswerRequest,
    CreateAnswerResponse,
    CreateAnswerUseCase,
)
from forum.application.usecase.profile import GetCurrentProfileUseCase
from forum.application.usecase.question import (
    CreateQuestionRequest,
    CreateQuestionResponse,
    CreateQuestionUseCase,
    DeleteQuestionRequest,
    DeleteQuestionUseCase,
    GetQuestionRequest,
    GetQuestionResponse,
    GetQuestionUseCase,
    ListQuestionsRequest,
    ListQuestionsResponse,
    ListQuestionsUseCase,
)
from forum.domain.service import JWTService
from forum.domain.value import QuestionFilter
from forum.interface.api.auth import optional_user_id, require_profile

router = APIRouter(prefix="/questions", tags=["questions"], route_class=DishkaRoute)


class CreateQuestionAPIRequest(BaseModel):
    """API request for asking a question."""

    title: str = Field(min_length=1, max_length=255)
    body: str = Field(min_length=1, max_length=20000)
    tags: list[str] = Field(default_factory=list)


class CreateAnswerAPIRequest(BaseModel):
    """API request for answering a question."""

    body: str = Field(min_length=1, max_length=20000)


@router.get("", response_model=ListQuestionsResponse)
async def list_questions(
    list_questions_use_case: FromDishka[ListQuestionsUseCase],
    jwt_service: FromDishka[JWTService],
    filter: QuestionFilter = Query(default=QuestionFilter.NEWEST),
    tag: str | None = Query(default=None),
    search: str | None = Query(default=None, max_length=200),
    page: int = Query(default=1, ge=1),
    authorization: str | None = Header(default=None),
    auth_token: str | None = Cookie(default=None),
) -> ListQuestionsResponse:
    """List questions with filtering and pagination.

    Args:
        filter: newest (default), oldest, most_voted or unanswered
        tag: Only questions carrying this tag
        search: Case-insensitive search over title and body
        page: 1-based page number

    Returns:
        One page of questions, with the viewer's votes when authenticated
    """
    return await list_questions_use_case.execute(
        ListQuestionsRequest(
            filter=filter,
            tag=tag,
            search=search,
            page=page,
            user_id=optional_user_id(jwt_service, authorization, auth_token),
        )
    )


@router.post(
    "", response_model=CreateQuestionResponse, status_code=status.HTTP_201_CREATED
)
async def create_question(
    request: CreateQuestionAPIRequest,
    create_question_use_case: FromDishka[CreateQuestionUseCase],
    get_current_profile_use_case: FromDishka[GetCurrentProfileUseCase],
    authorization: str | None = Header(default=None),
    auth_token: str | None = Cookie(default=None),
) -> CreateQuestionResponse:
    """Ask a new question.

    Requires authentication.
    """
    profile = await require_profile(
        get_current_profile_use_case, authorization, auth_token
    )
    return await create_question_use_case.execute(
        CreateQuestionRequest(
            title=request.title,
            body=request.body,
            tags=request.tags,
            user_id=profile.user_id,
        )
    )


@router.get("/{question_id}", response_model=GetQuestionResponse)
async def get_question(
    question_id: UUID,
    get_question_use_case: FromDishka[GetQuestionUseCase],
    jwt_service: FromDishka[JWTService],
    authorization: str | None = Header(default=None),
    auth_token: str | None = Cookie(default=None),
) -> GetQuestionResponse:
    """Get a question with its answers."""
    return await get_question_use_case.execute(
        GetQuestionRequest(
            question_id=str(question_id),
            user_id=optional_user_id(jwt_service, authorization, auth_token),
        )
    )


@router.delete("/{question_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_question(
    question_id: UUID,
    delete_question_use_case: FromDishka[DeleteQuestionUseCase],
    get_current_profile_use_case: FromDishka[GetCurrentProfileUseCase],
    authorization: str | None = Header(default=None),
    auth_token: str | None = Cookie(default=None),
) -> Response:
    """Delete a question with its answers and votes.

    Requires authentication as the question owner or an admin.
    """
    profile = await require_profile(
        get_current_profile_use_case, authorization, auth_token
    )
    await delete_question_use_case.execute(
        DeleteQuestionRequest(question_id=str(question_id), user_id=profile.user_id)
    )
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.post(
    "/{question_id}/answers",
    response_model=CreateAnswerResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_answer(
    question_id: UUID,
    request: CreateAnswerAPIRequest,
    create_answer_use_case: FromDishka[CreateAnswerUseCase],
    get_current_profile_use_case: FromDishka[GetCurrentProfileUseCase],
    authorization: str | None = Header(default=None),
    auth_token: str | None = Cookie(default=None),
) -> CreateAnswerResponse:
    """Answer a question.

    Requires authentication.
    """
    profile = await require_profile(
        get_current_profile_use_case, authorization, auth_token
    )
    return await create_answer_use_case.execute(
        CreateAnswerRequest(
            question_id=str(question_id), body=request.body, user_id=profile.user_id
        )
    )
