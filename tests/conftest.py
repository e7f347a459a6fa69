"""Test configuration and shared helpers."""

from datetime import datetime
from uuid import uuid4

from forum.config import Settings
from forum.domain.model import Profile
from forum.domain.repository import ProfileRepository
from forum.domain.value import ProfileId, UserId, UserRole, Username
from forum.util.jwt import create_token


async def make_profile(
    profile_repo: ProfileRepository,
    username: str | None = None,
    role: UserRole = UserRole.USER,
) -> Profile:
    """Store a profile for a fresh principal and return it."""
    user_id = UserId(uuid4())
    name = username or f"user-{user_id.hex[:8]}"
    now = datetime.now()
    return await profile_repo.save(
        Profile(
            id=ProfileId(uuid4()),
            user_id=user_id,
            username=Username(name),
            email=f"{name}@example.com",
            role=role,
            created_at=now,
            updated_at=now,
        )
    )


def make_token(
    user_id: UserId | None = None,
    email: str | None = None,
    username: str | None = None,
    full_name: str | None = None,
) -> str:
    """Sign a token the API accepts, using the secret from the environment."""
    user_id = user_id or UserId(uuid4())
    return create_token(
        user_id=user_id,
        email=email or f"{user_id.hex[:8]}@example.com",
        settings=Settings().auth,
        username=username,
        full_name=full_name,
    )


def auth_headers(token: str) -> dict[str, str]:
    return {"Authorization": f"Bearer {token}"}
