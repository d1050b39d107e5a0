"""Unit tests for JWTService."""

from datetime import datetime, timedelta, timezone

import jwt
import pytest

from bookclub.config import AuthSettings
from bookclub.domain.service import JWTService
from bookclub.util.jwt import JWTError


@pytest.fixture
def jwt_service() -> JWTService:
    return JWTService(auth_settings=AuthSettings())


class TestJWTService:
    """Tests for token verification."""

    def test_round_trip_yields_user_id(self, jwt_service):
        token = jwt_service.create_token("user-1")

        assert jwt_service.get_user_id_from_token(token) == "user-1"

    @pytest.mark.parametrize("token", [None, "", "not-a-token"])
    def test_missing_or_garbage_token_is_anonymous(self, jwt_service, token):
        assert jwt_service.get_user_id_from_token(token) is None

    def test_expired_token_raises(self, jwt_service):
        settings = AuthSettings()
        token = jwt.encode(
            {
                "user_id": "user-1",
                "exp": datetime.now(timezone.utc) - timedelta(minutes=1),
            },
            settings.jwt_secret,
            algorithm=settings.jwt_algorithm,
        )

        with pytest.raises(JWTError, match="expired"):
            jwt_service.verify_token(token)

    def test_token_signed_with_other_secret_is_rejected(self, jwt_service):
        token = jwt.encode(
            {"user_id": "user-1", "exp": datetime.now(timezone.utc) + timedelta(days=1)},
            "some-other-secret-that-is-long-enough-0123",
            algorithm="HS256",
        )

        assert jwt_service.get_user_id_from_token(token) is None
