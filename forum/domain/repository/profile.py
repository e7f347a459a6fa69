"""Profile repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from forum.domain.model.profile import Profile
from forum.domain.value import UserId, Username


class ProfileRepository(ABC):
    """Repository for Profile entity.

    Defines the contract for profile persistence operations.
    Implementations live in the persistence layer.
    """

    @abstractmethod
    async def find_by_user_id(self, user_id: UserId) -> Optional[Profile]:
        """Find the profile of a principal.

        Args:
            user_id: The principal's ID

        Returns:
            The profile if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_username(self, username: Username) -> Optional[Profile]:
        """Find a profile by username.

        Args:
            username: The username to look up

        Returns:
            The profile if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_user_ids(self, user_ids: list[UserId]) -> list[Profile]:
        """Find profiles for several principals (batch query).

        Args:
            user_ids: Principal IDs

        Returns:
            Profiles that exist for the given principals
        """
        pass

    @abstractmethod
    async def save(self, profile: Profile) -> Profile:
        """Save a profile (create or update).

        Args:
            profile: The profile to save

        Returns:
            The saved profile

        Raises:
            ConflictError: If the username is already taken
        """
        pass
