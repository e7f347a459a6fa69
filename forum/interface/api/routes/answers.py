"""Answer routes."""

from uuid import UUID

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, Header, Response, status
from pydantic import BaseModel

from forum.application.usecase.answer import (
    DeleteAnswerRequest,
    DeleteAnswerUseCase,
    SetAnswerAcceptedRequest,
    SetAnswerAcceptedResponse,
    SetAnswerAcceptedUseCase,
)
from forum.application.usecase.profile import GetCurrentProfileUseCase
from forum.interface.api.auth import require_profile

router = APIRouter(prefix="/answers", tags=["answers"], route_class=DishkaRoute)


class SetAcceptedAPIRequest(BaseModel):
    """API request for accepting or unaccepting an answer."""

    accepted: bool


@router.delete("/{answer_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_answer(
    answer_id: UUID,
    delete_answer_use_case: FromDishka[DeleteAnswerUseCase],
    get_current_profile_use_case: FromDishka[GetCurrentProfileUseCase],
    authorization: str | None = Header(default=None),
    auth_token: str | None = Cookie(default=None),
) -> Response:
    """Delete an answer.

    Requires authentication as the answer owner or an admin.
    """
    profile = await require_profile(
        get_current_profile_use_case, authorization, auth_token
    )
    await delete_answer_use_case.execute(
        DeleteAnswerRequest(answer_id=str(answer_id), user_id=profile.user_id)
    )
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.put("/{answer_id}/accepted", response_model=SetAnswerAcceptedResponse)
async def set_answer_accepted(
    answer_id: UUID,
    request: SetAcceptedAPIRequest,
    set_answer_accepted_use_case: FromDishka[SetAnswerAcceptedUseCase],
    get_current_profile_use_case: FromDishka[GetCurrentProfileUseCase],
    authorization: str | None = Header(default=None),
    auth_token: str | None = Cookie(default=None),
) -> SetAnswerAcceptedResponse:
    """Accept or unaccept an answer.

    Requires authentication as the owner of the answered question. Accepting
    an answer unaccepts any other accepted answer to the same question.
    """
    profile = await require_profile(
        get_current_profile_use_case, authorization, auth_token
    )
    return await set_answer_accepted_use_case.execute(
        SetAnswerAcceptedRequest(
            answer_id=str(answer_id),
            accepted=request.accepted,
            user_id=profile.user_id,
        )
    )
