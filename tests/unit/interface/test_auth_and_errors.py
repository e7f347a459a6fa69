"""Unit tests for request authentication and error mapping."""

import pytest
from fastapi import HTTPException, Request

from forum.domain.error import (
    AuthorizationError,
    ConflictError,
    DomainError,
    NotFoundError,
    TransactionFailure,
    ValidationError,
)
from forum.interface.api.auth import extract_token, require_profile
from forum.interface.error import domain_error_handler, status_for
from forum.util.jwt import JWTError


class TestExtractToken:
    def test_bearer_header_wins_over_cookie(self):
        assert extract_token("Bearer abc", "cookie-token") == "abc"

    def test_scheme_is_case_insensitive(self):
        assert extract_token("bearer abc", None) == "abc"

    def test_falls_back_to_cookie(self):
        assert extract_token(None, "cookie-token") == "cookie-token"
        assert extract_token("Basic dXNlcjpwYXNz", "cookie-token") == "cookie-token"

    def test_missing_everywhere(self):
        assert extract_token(None, None) is None
        assert extract_token("Bearer ", "") is None


class TestStatusFor:
    @pytest.mark.parametrize(
        ("error", "status_code"),
        [
            (ValidationError("bad"), 400),
            (AuthorizationError("delete", "answer", "a1", "u1"), 403),
            (NotFoundError("Question", "q1"), 404),
            (ConflictError("dup"), 409),
            (TransactionFailure("cast_vote", "deadlock"), 503),
            (DomainError("other"), 400),
        ],
    )
    def test_domain_errors_map_to_status(self, error, status_code):
        assert status_for(error) == status_code


class _RejectingProfileUseCase:
    async def execute(self, request):
        raise JWTError("Token has expired")


class TestRequireProfile:
    @pytest.mark.asyncio
    async def test_invalid_token_is_401_chained_to_jwt_error(self):
        with pytest.raises(HTTPException) as exc_info:
            await require_profile(_RejectingProfileUseCase(), "Bearer stale", None)

        assert exc_info.value.status_code == 401
        assert exc_info.value.detail == "Token has expired"
        assert isinstance(exc_info.value.__cause__, JWTError)

    @pytest.mark.asyncio
    async def test_missing_token_is_401(self):
        with pytest.raises(HTTPException) as exc_info:
            await require_profile(_RejectingProfileUseCase(), None, None)

        assert exc_info.value.status_code == 401


class TestDomainErrorHandler:
    def _request(self) -> Request:
        return Request(
            {
                "type": "http",
                "method": "PUT",
                "path": "/questions/q1/vote",
                "query_string": b"",
                "headers": [],
            }
        )

    @pytest.mark.asyncio
    async def test_transaction_failure_is_retryable_503(self):
        response = await domain_error_handler(
            self._request(), TransactionFailure("cast_vote", "deadlock")
        )

        assert response.status_code == 503
        assert response.headers["retry-after"] == "1"

    @pytest.mark.asyncio
    async def test_conflict_has_no_retry_header(self):
        response = await domain_error_handler(
            self._request(), ConflictError("Already upvoted this question")
        )

        assert response.status_code == 409
        assert "retry-after" not in response.headers
        assert response.body == b'{"detail":"Already upvoted this question"}'
