"""Get current profile use case."""

from datetime import datetime

from pydantic import BaseModel

from forum.application.usecase.base import BaseUseCase
from forum.domain.model import Profile
from forum.domain.service import JWTService, ProfileService
from forum.domain.value import Gender, UserId, UserRole


class GetCurrentProfileRequest(BaseModel):
    """Get current profile request."""

    token: str  # JWT token


class ProfileResponse(BaseModel):
    """Profile of a principal."""

    user_id: str
    username: str
    full_name: str
    email: str
    gender: Gender | None
    avatar_url: str | None
    bio: str | None
    role: UserRole
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_profile(cls, profile: Profile) -> "ProfileResponse":
        return cls(
            user_id=str(profile.user_id),
            username=profile.username.root,
            full_name=profile.full_name,
            email=profile.email,
            gender=profile.gender,
            avatar_url=profile.avatar_url,
            bio=profile.bio,
            role=profile.role,
            created_at=profile.created_at,
            updated_at=profile.updated_at,
        )


class GetCurrentProfileUseCase(BaseUseCase):
    """Use case for getting the authenticated principal's profile."""

    def __init__(self, jwt_service: JWTService, profile_service: ProfileService) -> None:
        """Initialize get current profile use case.

        Args:
            jwt_service: JWT token domain service
            profile_service: Profile domain service
        """
        self.jwt_service = jwt_service
        self.profile_service = profile_service

    async def execute(self, request: GetCurrentProfileRequest) -> ProfileResponse:
        """Execute get current profile flow.

        Steps:
        1. Verify JWT token via JWT service
        2. Create the profile if this is the principal's first request
        3. Return profile info

        Args:
            request: Request with JWT token

        Returns:
            The principal's profile

        Raises:
            JWTError: If token is invalid or expired
        """
        payload = self.jwt_service.verify_token(request.token)

        profile = await self.profile_service.ensure_profile(
            user_id=UserId(payload.sub),
            email=payload.email,
            username=payload.username,
            full_name=payload.full_name,
        )
        return ProfileResponse.from_profile(profile)
