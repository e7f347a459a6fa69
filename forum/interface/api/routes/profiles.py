"""Profile routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, Header
from pydantic import BaseModel, Field

from forum.application.usecase.profile import (
    GetCurrentProfileUseCase,
    GetProfileRequest,
    GetProfileUseCase,
    ProfileResponse,
    UpdateProfileRequest,
    UpdateProfileUseCase,
)
from forum.domain.value import Gender
from forum.interface.api.auth import require_profile

router = APIRouter(prefix="/profiles", tags=["profiles"], route_class=DishkaRoute)


class UpdateProfileAPIRequest(BaseModel):
    """API request for updating the current profile."""

    username: str | None = Field(default=None, min_length=1, max_length=50)
    full_name: str | None = Field(default=None, max_length=100)
    bio: str | None = Field(default=None, max_length=500)
    gender: Gender | None = None
    avatar_url: str | None = Field(default=None, max_length=2048)


@router.get("/me", response_model=ProfileResponse)
async def get_current_profile(
    get_current_profile_use_case: FromDishka[GetCurrentProfileUseCase],
    authorization: str | None = Header(default=None),
    auth_token: str | None = Cookie(default=None),
) -> ProfileResponse:
    """Get the authenticated principal's profile, creating it on first use."""
    return await require_profile(
        get_current_profile_use_case, authorization, auth_token
    )


@router.patch("/me", response_model=ProfileResponse)
async def update_current_profile(
    request: UpdateProfileAPIRequest,
    update_profile_use_case: FromDishka[UpdateProfileUseCase],
    get_current_profile_use_case: FromDishka[GetCurrentProfileUseCase],
    authorization: str | None = Header(default=None),
    auth_token: str | None = Cookie(default=None),
) -> ProfileResponse:
    """Update the authenticated principal's profile.

    Only fields present in the body are changed; ``bio``, ``gender`` and
    ``avatar_url`` may be cleared with null.
    """
    profile = await require_profile(
        get_current_profile_use_case, authorization, auth_token
    )
    return await update_profile_use_case.execute(
        UpdateProfileRequest(
            user_id=profile.user_id,
            **request.model_dump(exclude_unset=True),
        )
    )


@router.get("/{username}", response_model=ProfileResponse)
async def get_profile(
    username: str,
    get_profile_use_case: FromDishka[GetProfileUseCase],
) -> ProfileResponse:
    """Get a profile by username."""
    return await get_profile_use_case.execute(GetProfileRequest(username=username))
