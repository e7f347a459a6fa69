"""End-to-end tests for profile endpoints."""

import pytest
from fastapi.testclient import TestClient

from forum.interface.api.app import create_app
from forum.util.di.container import setup_di
from tests.conftest import auth_headers, make_token
from tests.di import build_test_container


@pytest.fixture
def client():
    """Create test client backed by the in-memory container."""
    app_instance = create_app()
    setup_di(app_instance, build_test_container())
    return TestClient(app_instance)


class TestProfileEndpoints:
    def test_me_creates_profile_on_first_request(self, client):
        headers = auth_headers(make_token(email="lin@example.com"))

        first = client.get("/profiles/me", headers=headers)
        second = client.get("/profiles/me", headers=headers)

        assert first.status_code == 200
        assert first.json()["username"] == "lin"
        assert first.json()["role"] == "user"
        assert second.json()["created_at"] == first.json()["created_at"]

    def test_cookie_authentication(self, client):
        response = client.get(
            "/profiles/me", cookies={"auth_token": make_token(username="cookie")}
        )

        assert response.status_code == 200
        assert response.json()["username"] == "cookie"

    def test_blank_username_claim_falls_back_to_email(self, client):
        headers = auth_headers(make_token(email="mira@example.com", username="   "))

        response = client.get("/profiles/me", headers=headers)

        assert response.status_code == 200
        assert response.json()["username"] == "mira"

    def test_long_full_name_claim_is_truncated(self, client):
        headers = auth_headers(make_token(full_name="x" * 150))

        response = client.get("/profiles/me", headers=headers)

        assert response.status_code == 200
        assert response.json()["full_name"] == "x" * 100

    def test_me_without_auth(self, client):
        response = client.get("/profiles/me")

        assert response.status_code == 401

    def test_update_and_lookup_by_username(self, client):
        headers = auth_headers(make_token(username="old-name"))
        client.get("/profiles/me", headers=headers)

        updated = client.patch(
            "/profiles/me",
            json={"username": "new-name", "bio": "Hi", "gender": "other"},
            headers=headers,
        )
        public = client.get("/profiles/new-name")

        assert updated.status_code == 200
        assert public.json()["bio"] == "Hi"
        assert public.json()["gender"] == "other"
        assert client.get("/profiles/old-name").status_code == 404

    def test_username_conflict(self, client):
        client.get("/profiles/me", headers=auth_headers(make_token(username="taken")))
        headers = auth_headers(make_token(username="someone"))
        client.get("/profiles/me", headers=headers)

        response = client.patch(
            "/profiles/me", json={"username": "taken"}, headers=headers
        )

        assert response.status_code == 409

    def test_bio_max_length(self, client):
        headers = auth_headers(make_token())

        response = client.patch("/profiles/me", json={"bio": "a" * 501}, headers=headers)

        assert response.status_code == 422
