"""Get profile use case."""

from pydantic import BaseModel

from forum.application.usecase.base import BaseUseCase
from forum.domain.error import NotFoundError
from forum.domain.service import ProfileService
from forum.domain.value import Username

from .get_current_profile import ProfileResponse


class GetProfileRequest(BaseModel):
    """Get profile request."""

    username: str


class GetProfileUseCase(BaseUseCase):
    """Use case for viewing a profile by username."""

    def __init__(self, profile_service: ProfileService) -> None:
        self.profile_service = profile_service

    async def execute(self, request: GetProfileRequest) -> ProfileResponse:
        """Execute get profile flow.

        Raises:
            NotFoundError: If no profile has the username
        """
        try:
            username = Username(request.username)
        except ValueError as e:
            raise NotFoundError("Profile", request.username) from e

        profile = await self.profile_service.get_by_username(username)
        return ProfileResponse.from_profile(profile)
