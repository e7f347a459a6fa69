"""Profile use cases."""

from .get_current_profile import (
    GetCurrentProfileRequest,
    GetCurrentProfileUseCase,
    ProfileResponse,
)
from .get_profile import GetProfileRequest, GetProfileUseCase
from .update_profile import UpdateProfileRequest, UpdateProfileUseCase

__all__ = [
    "GetCurrentProfileRequest",
    "GetCurrentProfileUseCase",
    "GetProfileRequest",
    "GetProfileUseCase",
    "ProfileResponse",
    "UpdateProfileRequest",
    "UpdateProfileUseCase",
]
