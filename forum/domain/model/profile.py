"""Profile entity.

Exactly one profile exists per authenticated principal. It is created on the
principal's first authenticated request.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from forum.domain.model.common import DomainModel
from forum.domain.value import Gender, ProfileId, UserId, UserRole, Username


class Profile(DomainModel):
    """Public identity of a principal and its role."""

    id: ProfileId
    user_id: UserId
    username: Username
    full_name: str = Field(default="", max_length=100)
    email: str = Field(max_length=255)
    gender: Optional[Gender] = None
    avatar_url: Optional[str] = None
    bio: Optional[str] = None
    role: UserRole = UserRole.USER
    created_at: datetime = Field(default_factory=datetime.now)
    updated_at: datetime = Field(default_factory=datetime.now)

    @property
    def is_admin(self) -> bool:
        return self.role == UserRole.ADMIN
