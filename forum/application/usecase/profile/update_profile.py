"""Update profile use case."""

from uuid import UUID

from pydantic import BaseModel, Field

from forum.application.usecase.base import BaseUseCase
from forum.domain.error import ValidationError
from forum.domain.service import ProfileService
from forum.domain.value import Gender, UserId, Username

from .get_current_profile import ProfileResponse


class UpdateProfileRequest(BaseModel):
    """Update profile request.

    Only fields that are explicitly set are changed. ``bio``, ``gender`` and
    ``avatar_url`` can be cleared by setting them to null.
    """

    user_id: str  # From authenticated user
    username: str | None = Field(default=None, max_length=50)
    full_name: str | None = Field(default=None, max_length=100)
    bio: str | None = Field(default=None, max_length=500)
    gender: Gender | None = None
    avatar_url: str | None = None


class UpdateProfileUseCase(BaseUseCase):
    """Use case for updating the principal's own profile.

    Role and email cannot be changed through this endpoint.
    """

    def __init__(self, profile_service: ProfileService) -> None:
        """Initialize update profile use case.

        Args:
            profile_service: Profile domain service
        """
        self.profile_service = profile_service

    async def execute(self, request: UpdateProfileRequest) -> ProfileResponse:
        """Execute update profile flow.

        Args:
            request: Request with the principal's ID and fields to update

        Returns:
            Updated profile

        Raises:
            ValidationError: If the username is invalid
            ConflictError: If the username is taken
            NotFoundError: If the principal has no profile
        """
        username = None
        if request.username is not None:
            try:
                username = Username(request.username)
            except ValueError as e:
                raise ValidationError(f"Invalid username: {request.username}") from e

        # Nullable fields are only passed on when the client sent them
        optional = {
            name: getattr(request, name)
            for name in ("bio", "gender", "avatar_url")
            if name in request.model_fields_set
        }

        profile = await self.profile_service.update_profile(
            user_id=UserId(UUID(request.user_id)),
            username=username,
            full_name=request.full_name,
            **optional,
        )
        return ProfileResponse.from_profile(profile)
