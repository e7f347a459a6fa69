"""In-memory profile repository for testing."""

from typing import Optional

from forum.domain.error import ConflictError
from forum.domain.model import Profile
from forum.domain.repository import ProfileRepository
from forum.domain.value import UserId, Username

from .database import InMemoryDatabase


class InMemoryProfileRepository(ProfileRepository):
    """In-memory implementation of ProfileRepository for testing."""

    def __init__(self, database: InMemoryDatabase) -> None:
        self.database = database

    async def find_by_user_id(self, user_id: UserId) -> Optional[Profile]:
        for profile in self.database.profiles.values():
            if profile.user_id == user_id:
                return profile
        return None

    async def find_by_username(self, username: Username) -> Optional[Profile]:
        for profile in self.database.profiles.values():
            if profile.username == username:
                return profile
        return None

    async def find_by_user_ids(self, user_ids: list[UserId]) -> list[Profile]:
        wanted = set(user_ids)
        return [p for p in self.database.profiles.values() if p.user_id in wanted]

    async def save(self, profile: Profile) -> Profile:
        """Save a profile.

        Raises:
            ConflictError: If another profile has the same username or email
        """
        for other in self.database.profiles.values():
            if other.id == profile.id:
                continue
            if other.username == profile.username or other.email == profile.email:
                raise ConflictError(
                    f"Username or email already taken: {profile.username.root}"
                )

        self.database.profiles[profile.id] = profile
        return profile
