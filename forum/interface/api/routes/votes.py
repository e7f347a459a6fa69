"""Vote routes.

Questions and answers expose the same three vote operations:

- ``PUT .../vote`` casts a vote or switches its kind
- ``DELETE .../vote`` removes the vote
- ``POST .../vote/toggle`` is the vote button: same kind removes, other kind switches
"""

from uuid import UUID

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, Header
from pydantic import BaseModel

from forum.application.usecase.profile import GetCurrentProfileUseCase
from forum.application.usecase.vote import (
    CastVoteRequest,
    CastVoteUseCase,
    RemoveVoteRequest,
    RemoveVoteResponse,
    RemoveVoteUseCase,
    ToggleVoteRequest,
    ToggleVoteUseCase,
    VoteStateResponse,
)
from forum.domain.value import VotableType, VoteType
from forum.interface.api.auth import require_profile

router = APIRouter(tags=["votes"], route_class=DishkaRoute)


class VoteAPIRequest(BaseModel):
    """API request carrying the kind of vote."""

    vote_type: VoteType


@router.put("/questions/{question_id}/vote", response_model=VoteStateResponse)
async def vote_question(
    question_id: UUID,
    request: VoteAPIRequest,
    cast_vote_use_case: FromDishka[CastVoteUseCase],
    get_current_profile_use_case: FromDishka[GetCurrentProfileUseCase],
    authorization: str | None = Header(default=None),
    auth_token: str | None = Cookie(default=None),
) -> VoteStateResponse:
    """Upvote or downvote a question.

    Requires authentication. Returns 409 if the same vote is already held.
    """
    profile = await require_profile(
        get_current_profile_use_case, authorization, auth_token
    )
    return await cast_vote_use_case.execute(
        CastVoteRequest(
            votable_type=VotableType.QUESTION,
            votable_id=str(question_id),
            user_id=profile.user_id,
            vote_type=request.vote_type,
        )
    )


@router.delete("/questions/{question_id}/vote", response_model=RemoveVoteResponse)
async def remove_question_vote(
    question_id: UUID,
    remove_vote_use_case: FromDishka[RemoveVoteUseCase],
    get_current_profile_use_case: FromDishka[GetCurrentProfileUseCase],
    authorization: str | None = Header(default=None),
    auth_token: str | None = Cookie(default=None),
) -> RemoveVoteResponse:
    """Remove the principal's vote from a question."""
    profile = await require_profile(
        get_current_profile_use_case, authorization, auth_token
    )
    return await remove_vote_use_case.execute(
        RemoveVoteRequest(
            votable_type=VotableType.QUESTION,
            votable_id=str(question_id),
            user_id=profile.user_id,
        )
    )


@router.post("/questions/{question_id}/vote/toggle", response_model=VoteStateResponse)
async def toggle_question_vote(
    question_id: UUID,
    request: VoteAPIRequest,
    toggle_vote_use_case: FromDishka[ToggleVoteUseCase],
    get_current_profile_use_case: FromDishka[GetCurrentProfileUseCase],
    authorization: str | None = Header(default=None),
    auth_token: str | None = Cookie(default=None),
) -> VoteStateResponse:
    """Click a vote button on a question."""
    profile = await require_profile(
        get_current_profile_use_case, authorization, auth_token
    )
    return await toggle_vote_use_case.execute(
        ToggleVoteRequest(
            votable_type=VotableType.QUESTION,
            votable_id=str(question_id),
            user_id=profile.user_id,
            vote_type=request.vote_type,
        )
    )


@router.put("/answers/{answer_id}/vote", response_model=VoteStateResponse)
async def vote_answer(
    answer_id: UUID,
    request: VoteAPIRequest,
    cast_vote_use_case: FromDishka[CastVoteUseCase],
    get_current_profile_use_case: FromDishka[GetCurrentProfileUseCase],
    authorization: str | None = Header(default=None),
    auth_token: str | None = Cookie(default=None),
) -> VoteStateResponse:
    """Upvote or downvote an answer.

    Requires authentication. Returns 409 if the same vote is already held.
    """
    profile = await require_profile(
        get_current_profile_use_case, authorization, auth_token
    )
    return await cast_vote_use_case.execute(
        CastVoteRequest(
            votable_type=VotableType.ANSWER,
            votable_id=str(answer_id),
            user_id=profile.user_id,
            vote_type=request.vote_type,
        )
    )


@router.delete("/answers/{answer_id}/vote", response_model=RemoveVoteResponse)
async def remove_answer_vote(
    answer_id: UUID,
    remove_vote_use_case: FromDishka[RemoveVoteUseCase],
    get_current_profile_use_case: FromDishka[GetCurrentProfileUseCase],
    authorization: str | None = Header(default=None),
    auth_token: str | None = Cookie(default=None),
) -> RemoveVoteResponse:
    """Remove the principal's vote from an answer."""
    profile = await require_profile(
        get_current_profile_use_case, authorization, auth_token
    )
    return await remove_vote_use_case.execute(
        RemoveVoteRequest(
            votable_type=VotableType.ANSWER,
            votable_id=str(answer_id),
            user_id=profile.user_id,
        )
    )


@router.post("/answers/{answer_id}/vote/toggle", response_model=VoteStateResponse)
async def toggle_answer_vote(
    answer_id: UUID,
    request: VoteAPIRequest,
    toggle_vote_use_case: FromDishka[ToggleVoteUseCase],
    get_current_profile_use_case: FromDishka[GetCurrentProfileUseCase],
    authorization: str | None = Header(default=None),
    auth_token: str | None = Cookie(default=None),
) -> VoteStateResponse:
    """Click a vote button on an answer."""
    profile = await require_profile(
        get_current_profile_use_case, authorization, auth_token
    )
    return await toggle_vote_use_case.execute(
        ToggleVoteRequest(
            votable_type=VotableType.ANSWER,
            votable_id=str(answer_id),
            user_id=profile.user_id,
            vote_type=request.vote_type,
        )
    )
