"""PostgreSQL implementation of Profile repository."""

from typing import Optional

import logfire
from sqlalchemy import insert, select, update
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from forum.domain.error import ConflictError
from forum.domain.model import Profile
from forum.domain.repository import ProfileRepository
from forum.domain.value import UserId, Username
from forum.persistence.mappers import profile_to_dict, row_to_profile
from forum.persistence.tables import profiles_table


class PostgresProfileRepository(ProfileRepository):
    """PostgreSQL implementation of ProfileRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_user_id(self, user_id: UserId) -> Optional[Profile]:
        """Find the profile of a principal."""
        stmt = select(profiles_table).where(profiles_table.c.user_id == user_id)
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_profile(row._asdict()) if row else None

    async def find_by_username(self, username: Username) -> Optional[Profile]:
        """Find a profile by username."""
        stmt = select(profiles_table).where(
            profiles_table.c.username == username.root
        )
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_profile(row._asdict()) if row else None

    async def find_by_user_ids(self, user_ids: list[UserId]) -> list[Profile]:
        """Find profiles for several principals (batch query)."""
        if not user_ids:
            return []

        stmt = select(profiles_table).where(profiles_table.c.user_id.in_(user_ids))
        result = await self.session.execute(stmt)
        return [row_to_profile(row._asdict()) for row in result.fetchall()]

    async def save(self, profile: Profile) -> Profile:
        """Save a profile (create or update)."""
        with logfire.span(
            "profile_repository.save",
            user_id=str(profile.user_id),
            username=profile.username.root,
        ):
            existing = await self.find_by_user_id(profile.user_id)
            profile_dict = profile_to_dict(profile)

            if existing:
                stmt = (
                    update(profiles_table)
                    .where(profiles_table.c.user_id == profile.user_id)
                    .values(**profile_dict)
                )
            else:
                stmt = insert(profiles_table).values(**profile_dict)

            try:
                await self.session.execute(stmt)
                await self.session.flush()
            except IntegrityError as e:
                logfire.warn(
                    "Profile unique constraint violated",
                    user_id=str(profile.user_id),
                    error=str(e.orig),
                )
                raise ConflictError(
                    f"Username or email already taken: {profile.username.root}"
                ) from e

            return profile
