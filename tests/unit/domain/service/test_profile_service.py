"""Unit tests for ProfileService."""

from uuid import uuid4

import pytest

from forum.domain.error import AuthorizationError, ConflictError, NotFoundError
from forum.domain.repository import ProfileRepository
from forum.domain.service import ProfileService
from forum.domain.value import Gender, UserId, UserRole, Username
from tests.conftest import make_profile
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


class TestEnsureProfile:
    """Tests for ensure_profile."""

    @pytest.mark.asyncio
    async def test_first_call_creates_profile_from_email(self, unit_env):
        profile_service = await unit_env.get(ProfileService)
        user_id = UserId(uuid4())

        profile = await profile_service.ensure_profile(
            user_id, "ada@example.com", full_name="Ada Lovelace"
        )

        assert profile.user_id == user_id
        assert profile.username == Username("ada")
        assert profile.full_name == "Ada Lovelace"
        assert profile.role == UserRole.USER

    @pytest.mark.asyncio
    async def test_second_call_returns_same_profile(self, unit_env):
        profile_service = await unit_env.get(ProfileService)
        user_id = UserId(uuid4())

        first = await profile_service.ensure_profile(user_id, "bob@example.com")
        second = await profile_service.ensure_profile(
            user_id, "bob@example.com", username="robert"
        )

        assert second == first

    @pytest.mark.asyncio
    async def test_preferred_username_is_used(self, unit_env):
        profile_service = await unit_env.get(ProfileService)

        profile = await profile_service.ensure_profile(
            UserId(uuid4()), "c@example.com", username="carol"
        )

        assert profile.username == Username("carol")

    @pytest.mark.asyncio
    async def test_taken_username_gets_suffix(self, unit_env):
        profile_service = await unit_env.get(ProfileService)
        await profile_service.ensure_profile(UserId(uuid4()), "dan@example.com")
        user_id = UserId(uuid4())

        profile = await profile_service.ensure_profile(user_id, "dan@example.org")

        assert profile.username == Username(f"dan-{user_id.hex[:6]}")

    @pytest.mark.asyncio
    async def test_blank_username_claim_falls_back_to_email(self, unit_env):
        profile_service = await unit_env.get(ProfileService)

        profile = await profile_service.ensure_profile(
            UserId(uuid4()), "  eve@example.com", username="   "
        )

        assert profile.username == Username("eve")

    @pytest.mark.asyncio
    async def test_long_claims_are_cut_to_fit(self, unit_env):
        profile_service = await unit_env.get(ProfileService)

        profile = await profile_service.ensure_profile(
            UserId(uuid4()),
            "f@example.com",
            username="u" * 60,
            full_name="n" * 150,
        )

        assert profile.username == Username("u" * 43)
        assert profile.full_name == "n" * 100


class TestUpdateProfile:
    """Tests for update_profile."""

    @pytest.mark.asyncio
    async def test_update_changes_only_given_fields(self, unit_env):
        profile_service = await unit_env.get(ProfileService)
        profile_repo = await unit_env.get(ProfileRepository)
        profile = await make_profile(profile_repo)

        updated = await profile_service.update_profile(
            profile.user_id, bio="Hello", gender=Gender.OTHER
        )

        assert updated.bio == "Hello"
        assert updated.gender == Gender.OTHER
        assert updated.username == profile.username
        assert updated.email == profile.email

    @pytest.mark.asyncio
    async def test_none_clears_optional_fields(self, unit_env):
        profile_service = await unit_env.get(ProfileService)
        profile_repo = await unit_env.get(ProfileRepository)
        profile = await make_profile(profile_repo)
        await profile_service.update_profile(profile.user_id, bio="Temporary")

        updated = await profile_service.update_profile(profile.user_id, bio=None)

        assert updated.bio is None

    @pytest.mark.asyncio
    async def test_taken_username_raises_conflict(self, unit_env):
        profile_service = await unit_env.get(ProfileService)
        profile_repo = await unit_env.get(ProfileRepository)
        await make_profile(profile_repo, username="taken")
        profile = await make_profile(profile_repo)

        with pytest.raises(ConflictError, match="Username already taken"):
            await profile_service.update_profile(
                profile.user_id, username=Username("taken")
            )

    @pytest.mark.asyncio
    async def test_update_missing_profile_raises(self, unit_env):
        profile_service = await unit_env.get(ProfileService)

        with pytest.raises(NotFoundError, match="Profile not found"):
            await profile_service.update_profile(UserId(uuid4()), full_name="Ghost")


class TestAuthorizeOwnerOrAdmin:
    @pytest.mark.asyncio
    async def test_owner_and_admin_allowed_others_rejected(self, unit_env):
        profile_service = await unit_env.get(ProfileService)
        profile_repo = await unit_env.get(ProfileRepository)
        owner = await make_profile(profile_repo)
        admin = await make_profile(profile_repo, role=UserRole.ADMIN)
        other = await make_profile(profile_repo)

        await profile_service.authorize_owner_or_admin(
            owner.user_id, owner.user_id, "delete", "question", "q1"
        )
        await profile_service.authorize_owner_or_admin(
            admin.user_id, owner.user_id, "delete", "question", "q1"
        )
        with pytest.raises(AuthorizationError) as exc_info:
            await profile_service.authorize_owner_or_admin(
                other.user_id, owner.user_id, "delete", "question", "q1"
            )

        assert exc_info.value.action == "delete"
        assert exc_info.value.resource_id == "q1"
