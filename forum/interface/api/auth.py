"""Request authentication helpers for API routes.

The bearer token is read from the Authorization header, falling back to the
``auth_token`` cookie set by the frontend.
"""

from fastapi import HTTPException, status

from forum.application.usecase.profile import (
    GetCurrentProfileRequest,
    GetCurrentProfileUseCase,
    ProfileResponse,
)
from forum.domain.service import JWTService
from forum.util.jwt import JWTError


def extract_token(authorization: str | None, auth_token: str | None) -> str | None:
    """Pick the token from ``Authorization: Bearer`` or the auth cookie."""
    if authorization:
        scheme, _, credentials = authorization.partition(" ")
        if scheme.lower() == "bearer" and credentials.strip():
            return credentials.strip()
    return auth_token or None


async def require_profile(
    get_current_profile_use_case: GetCurrentProfileUseCase,
    authorization: str | None,
    auth_token: str | None,
) -> ProfileResponse:
    """Authenticate the request and return the principal's profile.

    The profile is created on the principal's first authenticated request.

    Raises:
        HTTPException: 401 if the token is missing, invalid or expired
    """
    token = extract_token(authorization, auth_token)
    if not token:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Not authenticated",
            headers={"WWW-Authenticate": "Bearer"},
        )

    try:
        return await get_current_profile_use_case.execute(
            GetCurrentProfileRequest(token=token)
        )
    except JWTError as e:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=str(e),
            headers={"WWW-Authenticate": "Bearer"},
        ) from e


def optional_user_id(
    jwt_service: JWTService, authorization: str | None, auth_token: str | None
) -> str | None:
    """Principal ID for read endpoints; anonymous if the token is missing or bad."""
    payload = jwt_service.get_payload_from_token(
        extract_token(authorization, auth_token)
    )
    return str(payload.sub) if payload else None
