"""End-to-end tests for user profile, activity and post endpoints."""

import pytest
from fastapi.testclient import TestClient

from bookclub.interface.api.app import create_app
from bookclub.persistence.repository.inmemory import InMemoryDatabase
from tests.conftest import BASE_TIME, make_post, make_token, make_user
from tests.di import build_test_container


@pytest.fixture
def env():
    """Running app with one user ("u1", ana) and one post ("p1")."""
    container = build_test_container()
    with TestClient(create_app(container=container)) as client:
        db = client.portal.call(container.get, InMemoryDatabase)
        user = make_user("ana", user_id="u1")
        post = make_post(user.id, post_id="p1")
        db.users[user.id] = user
        db.posts[post.id] = post
        client.db = db
        yield client


class TestUserEndpoints:
    """HTTP contract for user lookups and activity refresh."""

    def test_get_user_by_username(self, env):
        response = env.get("/api/v1/users/ana")

        assert response.status_code == 200
        assert response.json()["id"] == "u1"
        assert response.json()["username"] == "ana"

    def test_get_user_by_id(self, env):
        response = env.get("/api/v1/users/id/u1")

        assert response.status_code == 200
        assert response.json()["username"] == "ana"

    @pytest.mark.parametrize("path", ["/api/v1/users/nobody", "/api/v1/users/id/ghost"])
    def test_unknown_user_is_404(self, env, path):
        response = env.get(path)

        assert response.status_code == 404
        assert response.json()["error"] == "NotFoundError"

    def test_refresh_requires_auth(self, env):
        response = env.post("/api/v1/users/refresh")

        assert response.status_code == 401

    def test_refresh_stamps_caller(self, env):
        # Act
        response = env.post(
            "/api/v1/users/refresh", cookies={"auth_token": make_token("u1")}
        )

        # Assert
        assert response.status_code == 200
        assert response.json()["user_id"] == "u1"
        assert env.db.users["u1"].last_active_at > BASE_TIME

    def test_refresh_for_caller_without_record_is_404(self, env):
        response = env.post(
            "/api/v1/users/refresh", cookies={"auth_token": make_token("ghost")}
        )

        assert response.status_code == 404


class TestPostEndpoints:
    """HTTP contract for post lookups."""

    def test_get_post(self, env):
        response = env.get("/api/v1/posts/p1")

        assert response.status_code == 200
        assert response.json()["id"] == "p1"
        assert response.json()["user_id"] == "u1"

    def test_missing_post_is_404(self, env):
        assert env.get("/api/v1/posts/missing").status_code == 404
