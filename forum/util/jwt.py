"""JWT token utilities."""

from datetime import datetime, timedelta, timezone
from uuid import UUID

import jwt
from pydantic import BaseModel, Field

from forum.config import AuthSettings


class TokenPayload(BaseModel):
    """JWT token payload issued by the identity provider."""

    sub: UUID
    email: str = Field(max_length=255)
    username: str | None = None
    full_name: str | None = None
    exp: datetime


class JWTError(Exception):
    """JWT-related error."""

    pass


def create_token(
    user_id: UUID,
    email: str,
    settings: AuthSettings,
    username: str | None = None,
    full_name: str | None = None,
    expires_in: timedelta = timedelta(hours=1),
) -> str:
    """Create a JWT token for a principal.

    Used by tests and local tooling; production tokens come from the
    identity provider.

    Args:
        user_id: Principal ID (``sub`` claim)
        email: Principal email
        settings: Authentication settings
        username: Optional preferred username
        full_name: Optional display name
        expires_in: Token lifetime

    Returns:
        Encoded JWT token
    """
    payload: dict = {
        "sub": str(user_id),
        "email": email,
        "exp": datetime.now(timezone.utc) + expires_in,
    }
    if username is not None:
        payload["username"] = username
    if full_name is not None:
        payload["full_name"] = full_name
    if settings.jwt_audience:
        payload["aud"] = settings.jwt_audience

    return jwt.encode(payload, settings.jwt_secret, algorithm=settings.jwt_algorithm)


def verify_token(token: str, settings: AuthSettings) -> TokenPayload:
    """Verify and decode a JWT token.

    Args:
        token: JWT token to verify
        settings: Authentication settings

    Returns:
        Token payload if valid

    Raises:
        JWTError: If token is invalid or expired
    """
    try:
        payload = jwt.decode(
            token,
            settings.jwt_secret,
            algorithms=[settings.jwt_algorithm],
            audience=settings.jwt_audience,
            options={"verify_aud": settings.jwt_audience is not None},
        )
        return TokenPayload(**payload)
    except jwt.ExpiredSignatureError:
        raise JWTError("Token has expired")
    except jwt.InvalidTokenError:
        raise JWTError("Invalid token")
    except ValueError:
        # Claims present but malformed (e.g. sub is not a UUID)
        raise JWTError("Invalid token claims")
