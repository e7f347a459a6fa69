"""Profile domain service."""

from datetime import datetime
from typing import Optional
from uuid import uuid4

import logfire

from forum.domain.error import AuthorizationError, ConflictError, NotFoundError
from forum.domain.model import Profile
from forum.domain.repository import ProfileRepository, TransactionManager
from forum.domain.value import Gender, ProfileId, UserId, Username

from .base import Service

_UNSET = object()


class ProfileService(Service):
    """Domain service for profiles and ownership checks."""

    def __init__(
        self,
        profile_repository: ProfileRepository,
        transaction_manager: TransactionManager,
    ) -> None:
        """Initialize profile service.

        Args:
            profile_repository: Profile repository
            transaction_manager: Transaction boundary for writes
        """
        self.profile_repository = profile_repository
        self.transaction_manager = transaction_manager

    async def ensure_profile(
        self,
        user_id: UserId,
        email: str,
        username: Optional[str] = None,
        full_name: Optional[str] = None,
    ) -> Profile:
        """Return the principal's profile, creating it on first authentication.

        Token claims are trimmed to fit the profile: the username falls back
        to the local part of the email when blank, and the full name is cut
        to 100 characters. If the username is already taken, a short suffix
        derived from the principal ID is added.

        Args:
            user_id: Principal ID from the auth token
            email: Email from the auth token
            username: Preferred username from the auth token
            full_name: Full name from the auth token

        Returns:
            Existing or newly created profile
        """
        with logfire.span("profile_service.ensure_profile", user_id=str(user_id)):
            profile = await self.profile_repository.find_by_user_id(user_id)
            if profile:
                return profile

            async with self.transaction_manager.atomic("ensure_profile"):
                # Another request may have created it since the first lookup
                profile = await self.profile_repository.find_by_user_id(user_id)
                if profile:
                    return profile

                base = (
                    (username or "").strip()
                    or email.split("@", 1)[0].strip()
                    or "user"
                )[:43].strip()
                candidate = Username(base)
                if await self.profile_repository.find_by_username(candidate):
                    candidate = Username(f"{base}-{user_id.hex[:6]}")
                    logfire.info(
                        "Username taken, using suffixed username",
                        requested=base,
                        username=candidate.root,
                    )

                now = datetime.now()
                profile = Profile(
                    id=ProfileId(uuid4()),
                    user_id=user_id,
                    username=candidate,
                    full_name=(full_name or "").strip()[:100],
                    email=email,
                    created_at=now,
                    updated_at=now,
                )
                saved = await self.profile_repository.save(profile)

            logfire.info(
                "Profile created",
                user_id=str(user_id),
                username=saved.username.root,
            )
            return saved

    async def get_by_user_id(self, user_id: UserId) -> Profile:
        """Get the profile of a principal.

        Raises:
            NotFoundError: If the principal has no profile
        """
        profile = await self.profile_repository.find_by_user_id(user_id)
        if not profile:
            logfire.warn("Profile not found", user_id=str(user_id))
            raise NotFoundError("Profile", str(user_id))
        return profile

    async def get_by_username(self, username: Username) -> Profile:
        """Get a profile by username.

        Raises:
            NotFoundError: If no profile has this username
        """
        with logfire.span("profile_service.get_by_username", username=username.root):
            profile = await self.profile_repository.find_by_username(username)
            if not profile:
                logfire.warn("Profile not found", username=username.root)
                raise NotFoundError("Profile", username.root)
            return profile

    async def get_profiles(self, user_ids: list[UserId]) -> dict[UserId, Profile]:
        """Get profiles for several principals keyed by principal ID."""
        if not user_ids:
            return {}
        profiles = await self.profile_repository.find_by_user_ids(
            list(dict.fromkeys(user_ids))
        )
        return {p.user_id: p for p in profiles}

    async def update_profile(
        self,
        user_id: UserId,
        username: Optional[Username] = None,
        full_name: Optional[str] = None,
        bio: object = _UNSET,
        gender: object = _UNSET,
        avatar_url: object = _UNSET,
    ) -> Profile:
        """Update the editable fields of the principal's own profile.

        ``bio``, ``gender`` and ``avatar_url`` may be cleared by passing None;
        leaving them out keeps the current value.

        Args:
            user_id: Principal ID (profile owner)
            username: New username
            full_name: New full name
            bio: New bio
            gender: New gender
            avatar_url: New avatar URL

        Returns:
            Updated profile

        Raises:
            NotFoundError: If the principal has no profile
            ConflictError: If the username is taken by another profile
        """
        with logfire.span("profile_service.update_profile", user_id=str(user_id)):
            async with self.transaction_manager.atomic("update_profile"):
                profile = await self.get_by_user_id(user_id)
                changes: dict[str, object] = {}

                if username is not None and username != profile.username:
                    other = await self.profile_repository.find_by_username(username)
                    if other and other.user_id != user_id:
                        logfire.warn(
                            "Username already taken",
                            user_id=str(user_id),
                            username=username.root,
                        )
                        raise ConflictError(f"Username already taken: {username.root}")
                    changes["username"] = username
                if full_name is not None:
                    changes["full_name"] = full_name
                if bio is not _UNSET:
                    changes["bio"] = bio
                if gender is not _UNSET:
                    changes["gender"] = Gender(gender) if gender else None
                if avatar_url is not _UNSET:
                    changes["avatar_url"] = avatar_url

                if not changes:
                    return profile

                changes["updated_at"] = datetime.now()
                updated = profile.model_copy(update=changes)
                saved = await self.profile_repository.save(updated)

            logfire.info(
                "Profile updated", user_id=str(user_id), fields=sorted(changes)
            )
            return saved

    async def authorize_owner_or_admin(
        self,
        user_id: UserId,
        owner_id: UserId,
        action: str,
        resource: str,
        resource_id: str,
    ) -> None:
        """Allow the content owner or an admin, reject everyone else.

        Raises:
            AuthorizationError: If the principal is neither owner nor admin
        """
        if user_id == owner_id:
            return
        profile = await self.profile_repository.find_by_user_id(user_id)
        if profile and profile.is_admin:
            logfire.info(
                "Admin override",
                action=action,
                resource=resource,
                resource_id=resource_id,
                user_id=str(user_id),
            )
            return
        logfire.warn(
            "Unauthorized mutation attempt",
            action=action,
            resource=resource,
            resource_id=resource_id,
            user_id=str(user_id),
        )
        raise AuthorizationError(action, resource, resource_id, str(user_id))
